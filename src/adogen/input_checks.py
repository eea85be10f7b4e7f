"""Syntactic checks on user input: project names, organization URLs, extension links."""

import html
import re
from urllib.parse import urlsplit

MAX_PROJECT_NAME_LENGTH = 64

_INVALID_NAME_CHARS = set('\\/:*?"\'<>;#${},+=[]|%&')

_RESERVED_NAMES = {
    "aux", "con", "nul", "prn", "server", "signalr", "defaultcollection",
    "web", "web.config", "bin", "app_browsers", "app_code", "app_data",
    "app_globalresources", "app_localresources", "app_themes",
    "app_webresources",
}
_RESERVED_NAMES.update(f"com{i}" for i in range(1, 10))
_RESERVED_NAMES.update(f"lpt{i}" for i in range(1, 10))

_RESERVED_PREFIXES = ("_vti_", "remote_web_")

_SCHEME_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9+.-]*\Z")
_HREF_PATTERN = re.compile(r"""href\s*=\s*(["'])(?P<url>.*?)\1""", re.IGNORECASE | re.DOTALL)


def check_project_name(name) -> bool:
    """Return True when ``name`` is acceptable as an Azure DevOps project name."""
    if not name or not name.strip():
        return False
    if len(name) > MAX_PROJECT_NAME_LENGTH:
        return False
    if any(ord(ch) < 32 or ord(ch) == 127 for ch in name):
        return False
    if any(ch in _INVALID_NAME_CHARS for ch in name):
        return False
    if name.startswith(("_", ".")) or name.endswith("."):
        return False
    lowered = name.lower()
    if lowered in _RESERVED_NAMES:
        return False
    return not lowered.startswith(_RESERVED_PREFIXES)


def is_absolute_url(text) -> bool:
    """True for well-formed absolute URIs: ``https://dev.azure.com/org``, ``mailto:a@b``, ``urn:x``."""
    if not text or any(ch.isspace() for ch in text.strip()):
        return False
    try:
        parts = urlsplit(text.strip())
    except ValueError:
        return False
    if not _SCHEME_PATTERN.match(parts.scheme):
        return False
    return bool(parts.netloc or parts.path)


def extract_display_link(raw) -> str:
    """Derive a display link from a raw URL or an HTML anchor fragment.

    Entities are unescaped first. When the text contains an ``href``
    attribute its target is returned, otherwise the trimmed text itself.
    """
    if not raw:
        return ""
    text = html.unescape(raw)
    match = _HREF_PATTERN.search(text)
    if match:
        return match.group("url").strip()
    return text.strip()
