"""Adapters layer - infrastructure and framework integrations.

Contains adapter implementations that connect the sorting domain to the
outside world (CLI, configuration, record files, logging).

Contents:
    * :mod:`.config` - Configuration loading, display, and overrides
    * :mod:`.records` - JSON record input/output and sorting settings
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory adapters for tests
    * :mod:`.cli` - Click CLI framework integration
"""

from __future__ import annotations

__all__: list[str] = []
