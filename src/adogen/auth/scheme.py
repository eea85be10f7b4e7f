"""Authentication result types shared by the negotiator and the REST client."""

from dataclasses import dataclass, field
from enum import Enum


class AuthScheme(Enum):
    BEARER = "Bearer"
    BASIC = "Basic"


@dataclass(frozen=True)
class AuthResult:
    access_token: str = field(repr=False)
    organization_name: str
    auth_scheme: AuthScheme
