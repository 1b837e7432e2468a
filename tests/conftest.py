"""Shared test fixtures for tix.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

import pytest


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "tix"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def sample_text() -> str:
    """A small document with a preamble, two projects, and a Done section."""
    return (
        "Notes for the week\n"
        "\n"
        "Work:\n"
        "bob - review PR\n"
        "alice - fix bug\n"
        "\n"
        "Home:\n"
        "  errands - buy milk\n"
        "call mom\n"
        "\n"
        "\n"
        "Done:\n"
        "alice - ship release\n"
    )
