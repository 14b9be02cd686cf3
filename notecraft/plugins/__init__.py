"""notecraft plugin infrastructure based on pluggy."""

from __future__ import annotations

from ._markers import ENTRY_POINT_GROUP, PLUGIN_NAMESPACE, hookimpl, hookspec
from .config import build_settings_getter
from .manager import (
    PluginRegistrationError,
    get_plugin_manager,
    load_command_contributions,
    reset_plugin_manager_cache,
    run_bootstrap,
)
from .types import BootstrapContext, CommandContext, CommandContribution

__all__ = [
    "BootstrapContext",
    "CommandContext",
    "CommandContribution",
    "ENTRY_POINT_GROUP",
    "PLUGIN_NAMESPACE",
    "PluginRegistrationError",
    "build_settings_getter",
    "get_plugin_manager",
    "hookimpl",
    "hookspec",
    "load_command_contributions",
    "reset_plugin_manager_cache",
    "run_bootstrap",
]
