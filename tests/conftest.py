"""Shared test setup: make tests/ importable for the scripted I/O helpers."""

import os
import sys

sys.path.insert(0, os.path.dirname(__file__))
