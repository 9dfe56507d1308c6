"""Plan Typer app factory."""

import typer

from ..api.plan.cmd_apply import cmd_apply
from ..api.plan.cmd_list import cmd_list
from ..api.plan.cmd_show import cmd_show
from ._handle_stage_result import handle_stage_result


def plan() -> typer.Typer:
    """Create and configure the plan Typer app."""
    app = typer.Typer(
        name="plan",
        help="List, inspect and apply preference plans",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Plan operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="list")
    def list_cmd(ctx: typer.Context) -> None:
        """List built-in and user plans."""
        handle_stage_result(cmd_list, ctx)()

    @app.command(name="show")
    def show_cmd(ctx: typer.Context, name: str = typer.Argument(..., help="Plan name or alias")) -> None:
        """Show a plan's directives without applying it."""
        handle_stage_result(cmd_show, ctx)(name)

    @app.command(name="apply")
    def apply_cmd(ctx: typer.Context, name: str = typer.Argument(..., help="Plan name or alias")) -> None:
        """Apply a plan and restart the services it touches."""
        handle_stage_result(cmd_apply, ctx)(name)

    return app
