"""Shared fixtures for provisioning tests."""

import os
import sys

sys.path.insert(0, os.path.dirname(__file__))

from fake_project_service import FakeNegotiator, FakeProjectService  # noqa: E402, F401
