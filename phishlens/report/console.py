"""Rich console views for reports and the feature catalog."""

from rich.console import Console
from rich.table import Table

from phishlens.catalog.catalog import FeatureCatalog
from phishlens.report.models import AnalysisReport


def print_report(console: Console, report: AnalysisReport) -> None:
    style = "green" if report.is_safe else "red"
    console.print(f"[bold {style}]{report.badge}[/bold {style}]  {report.alert_title}")
    console.print(f"Classification: [bold]{report.prediction}[/bold]")
    console.print(f"URL: {report.url}", markup=False, highlight=False)
    console.print()
    console.print("[bold]URL Feature Analysis[/bold]")
    for section in report.sections:
        table = Table(title=section.name, title_justify="left", show_edge=False)
        table.add_column("Feature", ratio=7)
        table.add_column("Value", justify="right", style="cyan")
        for row in section.rows:
            table.add_row(row.label, str(row.value))
        console.print(table)


def print_catalog(console: Console, catalog: FeatureCatalog) -> None:
    for category in catalog.categories():
        table = Table(title=category.name, title_justify="left", show_edge=False)
        table.add_column("Id", style="dim")
        table.add_column("Feature")
        for fid in category.feature_ids:
            table.add_row(fid, catalog.label_of(fid))
        console.print(table)
