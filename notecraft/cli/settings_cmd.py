"""Settings command for the notecraft CLI."""

from __future__ import annotations

import click

from ..settings import SettingsError
from ._common import NotecraftCliError, get_app

SETTING_KEY = "mySetting"


@click.command(name="settings")
@click.option(
    "--set",
    "new_value",
    type=str,
    default=None,
    metavar="VALUE",
    help="Store a new value for 'Setting #1'.",
)
@click.pass_context
def settings(ctx: click.Context, new_value: str | None) -> None:
    """Show or update the persisted plugin settings."""

    app = get_app(ctx)

    if new_value is not None:
        app.session.settings[SETTING_KEY] = new_value
        try:
            app.save_settings()
        except SettingsError as exc:
            raise NotecraftCliError(str(exc)) from exc

    click.echo("Setting #1 (It's a secret)")
    click.echo(f"  {SETTING_KEY} = {app.session.settings.get(SETTING_KEY, '')}")


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(settings)
