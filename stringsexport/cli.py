"""Command-line interface for the export pipeline."""

import click
from dataclasses import replace
from pathlib import Path
from typing import List, Optional
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import config
from .export import ContextJsonWriter, StringsDictWriter, StringsFileWriter
from .extraction.terms_parser import TermsParser, load_substitutions
from .formatting.filters import is_android_term
from .log import ConsoleLog

console = Console()


@click.group()
@click.version_option(version=__version__)
def cli():
    """Export POEditor terms to Apple resource files."""
    pass


@cli.command()
@click.option(
    "--input", "-i",
    "input_path",
    required=True,
    type=click.Path(exists=True),
    help="Path to the terms JSON file"
)
@click.option(
    "--output-dir", "-o",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory to write the files to (defaults to STRINGS_EXPORT_OUTPUT_DIR)"
)
@click.option(
    "--substitutions", "-s",
    "substitutions_path",
    type=click.Path(),
    default=None,
    help="JSON object of literal replacements applied to translations"
)
@click.option(
    "--print-date/--no-print-date",
    default=None,
    help="Print the generation date in the file headers"
)
@click.option("--strings/--no-strings", "with_strings", default=True, help="Write Localizable.strings")
@click.option("--stringsdict/--no-stringsdict", "with_stringsdict", default=True, help="Write Localizable.stringsdict")
@click.option("--context/--no-context", "with_context", default=True, help="Write the context JSON index")
@click.option(
    "--dry-run",
    is_flag=True,
    help="Render everything but do not write any file"
)
def export(
    input_path: str,
    output_dir: Optional[str],
    substitutions_path: Optional[str],
    print_date: Optional[bool],
    with_strings: bool,
    with_stringsdict: bool,
    with_context: bool,
    dry_run: bool,
):
    """Write the Apple resource files for a terms file."""
    settings = replace(
        config,
        output_dir=output_dir if output_dir is not None else config.output_dir,
        substitutions_path=(
            substitutions_path if substitutions_path is not None else config.substitutions_path
        ),
        print_date=print_date if print_date is not None else config.print_date,
    )

    # Validate config
    errors = settings.validate()
    if errors:
        console.print("[red]Configuration errors:[/red]")
        for error in errors:
            console.print(f"  - {error}")
        raise click.Abort()

    console.print(f"[blue]Reading:[/blue] {input_path}")
    terms = TermsParser().parse(input_path)
    substitutions = load_substitutions(settings.substitutions_path)
    console.print(f"[green]Found:[/green] {len(terms)} terms")

    log = ConsoleLog(console)
    out_dir = Path(settings.output_dir)
    jobs = []
    if with_strings:
        jobs.append(("Localizable.strings", StringsFileWriter(log), settings.strings_filename))
    if with_stringsdict:
        jobs.append(("Localizable.stringsdict", StringsDictWriter(log), settings.stringsdict_filename))
    if with_context:
        jobs.append(("Context index", ContextJsonWriter(log), settings.context_filename))

    if not jobs:
        console.print("[yellow]Nothing to export[/yellow]")
        return

    results = []
    for label, writer, filename in jobs:
        if dry_run:
            _, stats = writer.render(terms, substitutions, settings.print_date)
        else:
            stats = writer.write(terms, out_dir / filename, substitutions, settings.print_date)
        results.append((label, stats))

    _print_export_stats(results)

    if dry_run:
        console.print("\n[yellow]Dry run - no files written[/yellow]")
    else:
        console.print("[green]Done![/green]")


@cli.command()
@click.option(
    "--input", "-i",
    "input_path",
    required=True,
    type=click.Path(exists=True),
    help="Path to the terms JSON file"
)
def stats(input_path: str):
    """Show statistics for a terms file."""
    terms = TermsParser().parse(input_path)

    table = Table(title=f"Statistics for {Path(input_path).name}")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")

    table.add_row("Total terms", str(len(terms)))
    table.add_row("Android-only terms", str(sum(1 for t in terms if is_android_term(t.term))))
    table.add_row("Plural definitions", str(sum(1 for t in terms if t.plural_forms() is not None)))
    table.add_row("With context", str(sum(1 for t in terms if t.context)))
    empty = [t for t in terms if t.definition is None or t.definition.is_empty()]
    table.add_row("Empty definitions", str(len(empty)))

    console.print(table)


def _print_export_stats(results: List[tuple]):
    """Print per-file export statistics."""
    table = Table(title="Export Stats")
    table.add_column("File", style="cyan")
    table.add_column("Written", justify="right")
    table.add_column("Android", justify="right")
    table.add_column("Empty", justify="right")

    for label, stats in results:
        table.add_row(label, str(stats.count), str(stats.android), str(stats.empty_count))

    console.print(table)


if __name__ == "__main__":
    cli()
