"""Command-line dashboard for the phishing classification service."""

import asyncio
import json
from dataclasses import asdict
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console

from phishlens import __version__
from phishlens.catalog.catalog import default_catalog
from phishlens.config.settings import Settings
from phishlens.dashboard.dashboard import CSV_FORMAT_REQUIREMENTS, build_dashboard
from phishlens.dispatch.bulk_dispatcher import RESULTS_FILENAME
from phishlens.logging.logger import Log
from phishlens.notifications.console_notifier import ConsoleNotifier
from phishlens.notifications.log_notifier import LogNotifier
from phishlens.report.console import print_catalog, print_report
from phishlens.state.models import ErrorState

app = typer.Typer(
    name="phishlens",
    help="phishlens - submit URLs to a phishing classification service",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"phishlens {__version__}")
        raise typer.Exit()


@app.callback()
def configure(
    ctx: typer.Context,
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Load settings and logging before any command runs."""
    try:
        settings = Settings()
    except ValidationError as exc:
        err_console.print(f"[red]Invalid configuration:[/red] {exc}")
        raise typer.Exit(2) from exc
    Log.configure(settings.log_level)
    ctx.obj = settings


@app.command()
def analyze(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="URL to analyze"),
    fmt: str = typer.Option(
        "rich",
        "--format",
        "-f",
        help="Output format: rich (default) or json",
    ),
) -> None:
    """Analyze a single URL and show the verdict with its feature breakdown."""
    if fmt not in ("rich", "json"):
        err_console.print(f"[red]Unknown format '{fmt}'. Choose rich or json.[/red]")
        raise typer.Exit(2)

    # keep stdout parseable in json mode
    notifier = LogNotifier() if fmt == "json" else ConsoleNotifier(err_console)
    dashboard = build_dashboard(ctx.obj, notifier=notifier)
    dashboard.set_url(url)
    if not dashboard.can_submit_url:
        err_console.print("[red]Enter a URL to analyze.[/red]")
        raise typer.Exit(2)

    state = asyncio.run(dashboard.analyze_url())
    if isinstance(state, ErrorState):
        err_console.print(f"[red]Error:[/red] {state.message}")
        raise typer.Exit(1)

    report = dashboard.report()
    if report is None:
        raise typer.Exit(1)
    if fmt == "json":
        typer.echo(json.dumps(asdict(report), indent=2))
    else:
        print_report(console, report)


@app.command()
def bulk(
    ctx: typer.Context,
    csv_path: Path = typer.Argument(
        ...,
        help="CSV file with a 'url' column",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    output_dir: Path | None = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Directory for the results file (default: DOWNLOAD_DIR)",
        file_okay=False,
    ),
) -> None:
    """Upload a CSV of URLs; the service's results are saved as a CSV file."""
    settings: Settings = ctx.obj
    if output_dir is not None:
        settings = settings.model_copy(update={"download_dir": output_dir})

    dashboard = build_dashboard(settings, notifier=ConsoleNotifier(err_console))
    dashboard.select_path(csv_path)

    state = asyncio.run(dashboard.analyze_bulk())
    if isinstance(state, ErrorState):
        err_console.print(f"[red]Error:[/red] {state.message}")
        raise typer.Exit(1)
    console.print(
        f"Results saved to {settings.download_dir / RESULTS_FILENAME}",
        markup=False,
        highlight=False,
    )


@app.command()
def features() -> None:
    """List the feature catalog grouped by category."""
    print_catalog(console, default_catalog())


@app.command("csv-format")
def csv_format() -> None:
    """Show the requirements for bulk CSV files."""
    console.print("[bold]CSV Format Requirements[/bold]")
    for number, line in enumerate(CSV_FORMAT_REQUIREMENTS, start=1):
        console.print(f"{number}. {line}", highlight=False)


def main() -> None:
    """Entry point: settings -> logging -> dispatch the requested command."""
    app()


if __name__ == "__main__":
    main()
