"""CLI entry point for quant-monitor."""

import typer

from quant_monitor import __version__
from quant_monitor.cli.commands import run

app = typer.Typer(
    name="quant-monitor",
    help="Periodic price-signal reports for a list of market symbols",
)

app.command("run")(run)


@app.command()
def version() -> None:
    """Show version information."""
    typer.echo(f"quant-monitor version {__version__}")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool = typer.Option(False, "--version", "-v", help="Show version information"),
) -> None:
    """Periodic price-signal reports for a list of market symbols."""
    if version_flag:
        typer.echo(f"quant-monitor version {__version__}")
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


if __name__ == "__main__":
    app()
