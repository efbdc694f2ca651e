"""
Shared pytest configuration for the storage adapter integration tests.

Adds the service root to sys.path so tests can import service modules
directly, mirroring the production import style without installation.
"""
import sys
import os

_SERVICE_ROOTS = [
    "services/storage",
]

_REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))

for _rel in _SERVICE_ROOTS:
    _abs = os.path.join(_REPO_ROOT, _rel)
    if _abs not in sys.path:
        sys.path.insert(0, _abs)
