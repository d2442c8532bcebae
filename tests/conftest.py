"""Pytest configuration to make the project root importable.

Also provides small helpers for inspecting flet control trees built outside
of a running page.
"""

import os
import sys
from types import SimpleNamespace

import pytest

# Project root = parent directory of this tests/ folder
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


def _walk(control):
    yield control
    content = getattr(control, "content", None)
    if content is not None and not isinstance(content, str):
        yield from _walk(content)
    for child in getattr(control, "controls", None) or []:
        yield from _walk(child)


@pytest.fixture
def find_all():
    """Return every control of ``kind`` under ``root``, depth first"""
    def _find_all(root, kind):
        return [c for c in _walk(root) if isinstance(c, kind)]
    return _find_all


@pytest.fixture
def change_event():
    """Stub of the event flet hands to on_change/on_submit"""
    def _event(value):
        return SimpleNamespace(control=SimpleNamespace(value=value), data=value)
    return _event
