"""Shared fixtures for auth tests."""

import os
import sys

sys.path.insert(0, os.path.dirname(__file__))

from fake_auth import FakeAuthService, FakePublicClientApp  # noqa: E402, F401
