"""DevOpsClient: wraps authenticated Azure DevOps REST calls made with requests."""

import base64
from typing import Any, Optional

import requests

from adogen.auth.scheme import AuthScheme
from adogen.errors import DevOpsApiError

DEVOPS_BASE_URL = "https://dev.azure.com"
VSSPS_BASE_URL = "https://app.vssps.visualstudio.com"
EXTMGMT_BASE_URL = "https://extmgmt.dev.azure.com"

USER_AGENT = "adogen/0.1"


def authorization_header(access_token: str, auth_scheme: AuthScheme) -> str:
    if auth_scheme == AuthScheme.BASIC:
        encoded = base64.b64encode(f":{access_token}".encode()).decode("ascii")
        return f"Basic {encoded}"
    return f"Bearer {access_token}"


class DevOpsClient:
    """Sends JSON requests with the caller's credentials.

    All HTTP calls go through _request() so headers, api-version and
    error mapping stay consistent.
    """

    def __init__(self, access_token, auth_scheme, *, api_version="7.1",
                 timeout=30.0, session=None):
        self._access_token = access_token
        self._auth_scheme = auth_scheme
        self._api_version = api_version
        self._timeout = timeout
        self._owns_session = session is None
        self._session = session or requests.Session()

    def _headers(self):
        return {
            "Authorization": authorization_header(self._access_token, self._auth_scheme),
            "Accept": "application/json",
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
        }

    def _request(self, method, url, *, params=None, json=None,
                 api_version=None) -> Optional[Any]:
        query = {"api-version": api_version or self._api_version}
        if params:
            query.update(params)
        try:
            response = self._session.request(
                method, url,
                headers=self._headers(),
                params=query,
                json=json,
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            raise DevOpsApiError(f"{method} {url} failed: {exc}") from exc

        if response.status_code >= 400:
            raise DevOpsApiError(
                f"{method} {url} returned {response.status_code}: {response.text}",
                status_code=response.status_code,
            )
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise DevOpsApiError(
                f"{method} {url} returned a non-JSON response",
                status_code=response.status_code,
            ) from exc

    def get(self, url, params=None, api_version=None):
        return self._request("GET", url, params=params, api_version=api_version)

    def post(self, url, payload=None, api_version=None):
        return self._request("POST", url, json=payload, api_version=api_version)

    def close(self):
        """Release the HTTP session unless the caller supplied it."""
        if self._owns_session:
            self._session.close()

    @staticmethod
    def organization_url(organization: str, path: str) -> str:
        return f"{DEVOPS_BASE_URL}/{organization}/{path.lstrip('/')}"
