"""Create the main Typer CLI app."""

import typer

from ..api.plan.cmd_apply import cmd_apply
from ._handle_stage_result import handle_stage_result
from .config import config
from .plan import plan

# Top-level shortcuts: command name -> plan name
PLAN_SHORTCUTS: dict[str, str] = {
    "hide-dock": "minimize-dock",
    "show-dock": "restore-dock",
    "apply-privacy-defaults": "privacy-defaults",
}


def _shortcut(plan_name: str):
    def command(ctx: typer.Context) -> None:
        handle_stage_result(cmd_apply, ctx)(plan_name)

    command.__doc__ = f"Apply the '{plan_name}' plan."
    return command


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="macprefs - declarative macOS preference plans",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.add_typer(plan(), name="plan")
    app.add_typer(config(), name="config")

    for command_name, plan_name in PLAN_SHORTCUTS.items():
        app.command(name=command_name)(_shortcut(plan_name))

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
    ) -> None:
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        # Store display format in context for use by commands
        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app
