"""ProvisioningRequest: the validated record handed to the project service."""

from dataclasses import dataclass, field

from adogen.auth.scheme import AuthResult, AuthScheme
from adogen.errors import ValidationError


@dataclass(frozen=True)
class ProvisioningRequest:
    session_id: str
    access_token: str = field(repr=False)
    organization_name: str
    project_name: str
    template_name: str
    template_folder: str
    auth_scheme: AuthScheme
    extensions_present: bool = False
    consent_granted: bool = False
    extensions: tuple = ()


def build_request(session_id, auth, project_name, template_name, template_folder,
                  extensions=(), consent_granted=False) -> ProvisioningRequest:
    """Assemble a request once every required field is present.

    ``auth`` may be None when no authentication branch ran.

    Raises:
        ValidationError: If the organization, token or project name is empty.
    """
    organization = auth.organization_name if auth else ""
    token = auth.access_token if auth else ""
    if not (organization and organization.strip()) or not (token and token.strip()) \
            or not (project_name and project_name.strip()):
        raise ValidationError("All inputs must be provided.")
    return ProvisioningRequest(
        session_id=session_id,
        access_token=token,
        organization_name=organization,
        project_name=project_name.strip(),
        template_name=template_name,
        template_folder=template_folder,
        auth_scheme=auth.auth_scheme,
        extensions_present=bool(extensions),
        consent_granted=consent_granted,
        extensions=tuple(extensions),
    )
