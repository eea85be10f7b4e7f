"""AuthNegotiator: picks an authentication branch and yields a normalized AuthResult."""

from enum import Enum
from typing import Callable, Optional

from adogen.auth.scheme import AuthResult, AuthScheme
from adogen.console import SessionConsole
from adogen.errors import AuthFailure, ValidationError
from adogen.input_checks import is_absolute_url

AUTH_PROMPT = (
    "Choose authentication method: "
    "1. Device Login using AD auth 2. Personal Access Token (PAT)"
)
URL_ENTERED_MESSAGE = (
    "Please enter only the last part of the Azure DevOps URL "
    "(e.g., {ORGANIZATION_NAME} from https://dev.azure.com/{ORGANIZATION_NAME})."
)


class AuthBranch(Enum):
    FEDERATED = "1"
    STATIC_CREDENTIAL = "2"

    @classmethod
    def from_choice(cls, choice) -> Optional["AuthBranch"]:
        choice = (choice or "").strip()
        for branch in cls:
            if branch.value == choice:
                return branch
        return None


class AuthNegotiator:
    """Runs one authentication branch per provisioning attempt.

    ``auth_service_factory`` builds an AuthService bound to the attempt's
    console; nothing is kept between calls to ``negotiate``.
    """

    def __init__(self, auth_service_factory: Callable):
        self._auth_service_factory = auth_service_factory

    def negotiate(self, console: SessionConsole) -> Optional[AuthResult]:
        """Ask for the method and authenticate.

        Returns:
            AuthResult, or None when the choice matches no branch.

        Raises:
            ValidationError: Static-credential input was blank or a full URL.
            AuthFailure: The federated branch failed for any reason.
        """
        choice = console.ask(AUTH_PROMPT)
        branch = AuthBranch.from_choice(choice)
        if branch is None:
            console.error(f"Unknown authentication method: '{choice}'.")
            return None
        if branch == AuthBranch.FEDERATED:
            return self._federated(console)
        return self._static_credential(console)

    def _federated(self, console):
        try:
            service = self._auth_service_factory(console)
            app = service.build_client_context()
            token = self._acquire(service, app)
            member_id = service.get_profile(token)
            organizations = service.get_organizations(token, member_id)
            organization = service.select_organization(token, organizations)
        except AuthFailure:
            raise
        except Exception as exc:
            raise AuthFailure(str(exc)) from exc
        return AuthResult(token, organization, AuthScheme.BEARER)

    @staticmethod
    def _acquire(service, app):
        accounts = app.get_accounts()
        if accounts:
            try:
                return service.acquire_token_silent(app, accounts[0])
            except AuthFailure:
                # Cached account no longer valid; fall back to device login.
                pass
        return service.acquire_token(app)

    @staticmethod
    def _static_credential(console):
        organization = console.ask("Enter your Azure DevOps organization name:")
        if not organization:
            raise ValidationError("Organization name cannot be empty.")
        if is_absolute_url(organization):
            raise ValidationError(URL_ENTERED_MESSAGE)

        token = console.ask_secret("Enter your Azure DevOps personal access token:")
        if not token:
            raise ValidationError("Personal access token cannot be empty.")
        return AuthResult(token, organization, AuthScheme.BASIC)
