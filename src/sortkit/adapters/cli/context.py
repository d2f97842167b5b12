"""Click context helpers for CLI state management."""

from __future__ import annotations

import contextlib
from collections.abc import Mapping
from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import lib_log_rich.runtime
import rich_click as click
from lib_layered_config import Config

if TYPE_CHECKING:
    from sortkit.adapters.records.settings import SortSettings
    from sortkit.composition import AppServices

TracebackState = tuple[bool, bool]
"""Captured traceback configuration: (traceback_enabled, force_color)."""


@dataclass(slots=True)
class CLIContext:
    """State the root command hands to every subcommand."""

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()

    def sort_settings(self) -> SortSettings:
        """Parse the ``[sorting]`` section of the loaded configuration.

        Raises:
            ConfigurationError: When the section fails validation.
        """
        return self.services.load_sort_settings_from_dict(self.config.as_dict())


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    config: Config,
    services: AppServices,
    profile: str | None = None,
    set_overrides: tuple[str, ...] = (),
) -> None:
    """Replace ``ctx.obj`` (the services factory) with a populated CLIContext.

    ``set_overrides`` is kept so subcommands that reload config for another
    profile can reapply the root ``--set`` values.

    Example:
        >>> from unittest.mock import MagicMock
        >>> ctx = MagicMock()
        >>> store_cli_context(ctx, traceback=True, config=MagicMock(), services=MagicMock())
        >>> ctx.obj.traceback
        True
    """
    ctx.obj = CLIContext(
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the CLIContext stored by the root command.

    Raises:
        RuntimeError: If the root command did not run first.
    """
    if not isinstance(ctx.obj, CLIContext):
        raise RuntimeError("CLI context not initialized. Call store_cli_context first.")
    return ctx.obj


def log_scope(job_id: str, extra: Mapping[str, object]) -> AbstractContextManager[object]:
    """Bind ``job_id`` and ``extra`` to log records emitted inside the block.

    Falls back to a no-op scope when the lib_log_rich runtime is not running,
    which is the case with the in-memory logging adapter.
    """
    if lib_log_rich.runtime.is_initialised():
        return lib_log_rich.runtime.bind(job_id=job_id, extra=dict(extra))
    return contextlib.nullcontext()


def apply_traceback_preferences(enabled: bool) -> None:
    """Mirror the ``--traceback`` flag into ``lib_cli_exit_tools.config``.

    Example:
        >>> apply_traceback_preferences(True)
        >>> bool(lib_cli_exit_tools.config.traceback)
        True
    """
    lib_cli_exit_tools.config.traceback = bool(enabled)
    lib_cli_exit_tools.config.traceback_force_color = bool(enabled)


def snapshot_traceback_state() -> TracebackState:
    """Capture ``(traceback, traceback_force_color)`` for later restoration."""
    return (
        bool(getattr(lib_cli_exit_tools.config, "traceback", False)),
        bool(getattr(lib_cli_exit_tools.config, "traceback_force_color", False)),
    )


def restore_traceback_state(state: TracebackState) -> None:
    """Reapply a state captured by :func:`snapshot_traceback_state`.

    Example:
        >>> original = snapshot_traceback_state()
        >>> apply_traceback_preferences(True)
        >>> restore_traceback_state(original)
        >>> lib_cli_exit_tools.config.traceback == original[0]
        True
    """
    lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color = state


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "log_scope",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
