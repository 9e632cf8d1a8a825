"""Runner adapter - binds the scenario stages to an external test runner.

Contents:
    * :mod:`.pytest_bridge` - pytest plugin providing the ``scenario`` fixture
"""

from __future__ import annotations

__all__: list[str] = []
