"""AuthService: MSAL device-code login and Azure DevOps identity lookups."""

from contextlib import closing

import msal

from adogen.auth.scheme import AuthScheme
from adogen.config import GeneratorConfig
from adogen.console import SessionConsole
from adogen.devops_client import VSSPS_BASE_URL, DevOpsClient
from adogen.errors import AuthFailure
from adogen.menu import get_user_choice


def _token_from(result, what):
    if not result or "access_token" not in result:
        detail = ""
        if result:
            detail = result.get("error_description") or result.get("error") or ""
        raise AuthFailure(f"{what} failed. {detail}".strip())
    return result["access_token"]


class AuthService:
    """Token acquisition plus the profile/organization calls that follow it."""

    def __init__(self, config: GeneratorConfig, console: SessionConsole, *,
                 app_factory=None, client_factory=None):
        self._config = config
        self._console = console
        self._app_factory = app_factory or msal.PublicClientApplication
        self._client_factory = client_factory or DevOpsClient

    def build_client_context(self):
        return self._app_factory(self._config.client_id, authority=self._config.authority)

    def acquire_token_silent(self, app, account) -> str:
        result = app.acquire_token_silent(
            self._config.scopes, account=account, force_refresh=True,
        )
        return _token_from(result, "Silent token acquisition")

    def acquire_token(self, app) -> str:
        """Run the device-code flow; the user signs in from a browser."""
        flow = app.initiate_device_flow(scopes=self._config.scopes)
        if "user_code" not in flow:
            raise AuthFailure(
                f"Could not start device login. {flow.get('error_description', '')}".strip()
            )
        self._console.info(flow["message"], fg="yellow")
        result = app.acquire_token_by_device_flow(flow)
        return _token_from(result, "Device login")

    def _client(self, token):
        return self._client_factory(
            token, AuthScheme.BEARER,
            api_version=self._config.api_version,
            timeout=self._config.request_timeout,
        )

    def get_profile(self, token) -> str:
        with closing(self._client(token)) as client:
            profile = client.get(f"{VSSPS_BASE_URL}/_apis/profile/profiles/me")
        member_id = (profile or {}).get("id")
        if not member_id:
            raise AuthFailure("Could not read the signed-in user's profile.")
        return member_id

    def get_organizations(self, token, member_id) -> list[str]:
        with closing(self._client(token)) as client:
            accounts = client.get(
                f"{VSSPS_BASE_URL}/_apis/accounts",
                params={"memberId": member_id},
            )
        names = sorted(
            a["accountName"] for a in (accounts or {}).get("value", [])
            if a.get("accountName")
        )
        if not names:
            raise AuthFailure("No Azure DevOps organizations found for this account.")
        return names

    def select_organization(self, token, organizations) -> str:
        choice = get_user_choice(
            "Select an organization:", list(organizations), self._console,
        )
        return organizations[choice - 1]
