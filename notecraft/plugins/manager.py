"""Plugin manager setup and the command registry built from it."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from functools import lru_cache

import pluggy

from ._markers import ENTRY_POINT_GROUP, PLUGIN_NAMESPACE
from .spec import NotecraftHookSpec
from .types import BootstrapContext, CommandContribution

logger = logging.getLogger(__name__)


class PluginRegistrationError(RuntimeError):
    """Raised when a plugin fails validation or registration."""


def _builtin_plugin_modules() -> tuple[object, ...]:
    from .builtin import BUILTIN_PLUGINS

    return BUILTIN_PLUGINS


def create_plugin_manager() -> pluggy.PluginManager:
    """Return a manager with the built-in plugins and installed entry points."""

    manager = pluggy.PluginManager(PLUGIN_NAMESPACE)
    manager.add_hookspecs(NotecraftHookSpec)

    for module in _builtin_plugin_modules():
        try:
            manager.register(module)
        except (pluggy.PluginValidationError, ValueError) as exc:
            raise PluginRegistrationError(str(exc)) from exc

    loaded = manager.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
    if loaded:
        logger.debug("Loaded %d plugin(s) from %s", loaded, ENTRY_POINT_GROUP)
    return manager


@lru_cache(maxsize=1)
def get_plugin_manager() -> pluggy.PluginManager:
    """Return the process-wide plugin manager, building it on first use."""

    return create_plugin_manager()


def reset_plugin_manager_cache() -> None:
    """Forget the cached manager so the next lookup re-registers plugins."""

    get_plugin_manager.cache_clear()


def collect_commands(manager: pluggy.PluginManager) -> dict[str, CommandContribution]:
    """Gather every plugin's commands keyed by command id.

    Each ``editor_commands`` result may be a single contribution or an
    iterable of them. A command id claimed twice is a registration error.
    """

    commands: dict[str, CommandContribution] = {}
    for result in manager.hook.editor_commands():
        if not result:
            continue
        if isinstance(result, CommandContribution):
            result = (result,)
        elif not isinstance(result, Iterable) or isinstance(result, (str, bytes)):
            raise PluginRegistrationError(
                "Plugin hook did not return an iterable contribution collection."
            )

        for contribution in result:
            if not isinstance(contribution, CommandContribution):
                raise PluginRegistrationError(
                    "Command contributions must be CommandContribution instances."
                )
            if contribution.command_id in commands:
                raise PluginRegistrationError(
                    f"Duplicate command id detected: '{contribution.command_id}'."
                )
            commands[contribution.command_id] = contribution

    return commands


def load_command_contributions() -> dict[str, CommandContribution]:
    """Collect commands from the shared plugin manager."""

    return collect_commands(get_plugin_manager())


def run_bootstrap(context: BootstrapContext) -> list[Exception]:
    """Call every ``bootstrap`` hook, returning the exceptions they raised.

    One failing plugin does not stop the others from running.
    """

    manager = get_plugin_manager()
    errors: list[Exception] = []
    for impl in manager.hook.bootstrap.get_hookimpls():
        kwargs = {"context": context} if "context" in impl.argnames else {}
        try:
            impl.function(**kwargs)
        except Exception as exc:
            logger.debug("Bootstrap of plugin %s failed: %s", impl.plugin_name, exc)
            errors.append(exc)
    return errors


__all__ = [
    "PluginRegistrationError",
    "collect_commands",
    "create_plugin_manager",
    "get_plugin_manager",
    "load_command_contributions",
    "reset_plugin_manager_cache",
    "run_bootstrap",
]
