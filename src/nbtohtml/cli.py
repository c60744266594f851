"""Command-line interface for nbtohtml."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from nbtohtml import NbToHtmlError, __version__
from nbtohtml.config import NbToHtmlConfig, get_config
from nbtohtml.conversion.converter import NotebookConverter
from nbtohtml.models import ConversionResult
from nbtohtml.styles import available_styles, render_styles

# HTML goes to stdout, everything else to stderr
console = Console(stderr=True)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def setup_logging(level: str) -> None:
    """Route log records through Rich on stderr."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False, markup=False)],
        force=True,
    )


def load_config() -> NbToHtmlConfig:
    """Load configuration, exiting with a message when it is invalid."""
    try:
        return get_config()
    except NbToHtmlError as e:
        console.print(f"[red]Error loading config:[/red] {e}")
        sys.exit(1)


def print_diagnostics(result: ConversionResult) -> None:
    """Summarize recoverable problems of a conversion."""
    if not result.diagnostics:
        return

    table = Table(title="Conversion warnings", title_justify="left")
    table.add_column("Location", style="cyan")
    table.add_column("Code", style="yellow")
    table.add_column("Message")
    for diagnostic in result.diagnostics:
        table.add_row(diagnostic.location or "-", diagnostic.code, diagnostic.message)
    console.print(table)


@click.group()
@click.version_option(version=__version__)
def main():
    """nbtohtml - Convert Jupyter notebooks to embeddable HTML."""
    pass


@main.command()
@click.argument("notebook", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Output file path (default: stdout)",
)
@click.option(
    "--include-code-css/--no-include-code-css",
    default=None,
    help="Include styles for syntax highlighting in the HTML",
)
@click.option(
    "--include-notebook-css/--no-include-notebook-css",
    default=None,
    help="Include styles for the notebook layout in the HTML",
)
@click.option(
    "--code-light-style",
    type=click.Choice(available_styles()),
    default=None,
    help="Pygments style to use in light mode",
)
@click.option(
    "--code-dark-style",
    type=click.Choice(available_styles()),
    default=None,
    help="Pygments style to use in dark mode",
)
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Fail on unrecognized cell and output types",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (default: from config or WARNING)",
)
def convert(
    notebook: Path,
    output: Optional[Path],
    include_code_css: Optional[bool],
    include_notebook_css: Optional[bool],
    code_light_style: Optional[str],
    code_dark_style: Optional[str],
    strict: Optional[bool],
    log_level: Optional[str],
):
    """Convert a Jupyter notebook to an HTML fragment.

    NOTEBOOK: Path to the .ipynb file to convert
    """
    config = load_config()
    setup_logging(log_level or config.log_level)

    # Override config with CLI options
    if include_code_css is None:
        include_code_css = config.include_code_css
    if include_notebook_css is None:
        include_notebook_css = config.include_notebook_css
    if strict is None:
        strict = config.strict

    try:
        converter = NotebookConverter(css_class=config.highlight_css_class, strict=strict)
        result = converter.convert_file(notebook)

        styles = render_styles(
            include_code_css=include_code_css,
            include_notebook_css=include_notebook_css,
            light_style=code_light_style or config.code_light_style,
            dark_style=code_dark_style or config.code_dark_style,
            css_class=config.highlight_css_class,
        )
        html = f"{styles}\n{result.html}" if styles else result.html

        if output:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(html + "\n", encoding="utf-8")
            console.print(f"[green]Wrote[/green] {output}")
        else:
            click.echo(html)

        print_diagnostics(result)

    except NbToHtmlError as e:
        console.print(
            Panel.fit(
                f"[red]Error:[/red] {e}",
                border_style="red",
                title="[bold red]Conversion Failed[/bold red]",
            )
        )
        sys.exit(1)


@main.command()
@click.option(
    "--code-light-style",
    type=click.Choice(available_styles()),
    default=None,
    help="Pygments style to use in light mode",
)
@click.option(
    "--code-dark-style",
    type=click.Choice(available_styles()),
    default=None,
    help="Pygments style to use in dark mode",
)
def styles(code_light_style: Optional[str], code_dark_style: Optional[str]):
    """Print the stylesheet for converted notebooks."""
    config = load_config()
    click.echo(
        render_styles(
            light_style=code_light_style or config.code_light_style,
            dark_style=code_dark_style or config.code_dark_style,
            css_class=config.highlight_css_class,
        )
    )


@main.command()
def config_show():
    """Show current configuration."""
    config = load_config()
    console.print(Panel.fit("[bold cyan]nbtohtml Configuration[/bold cyan]", border_style="cyan"))
    console.print()
    console.print(f"[cyan]Code Light Style:[/cyan] {config.code_light_style}")
    console.print(f"[cyan]Code Dark Style:[/cyan] {config.code_dark_style}")
    console.print(f"[cyan]Include Code CSS:[/cyan] {config.include_code_css}")
    console.print(f"[cyan]Include Notebook CSS:[/cyan] {config.include_notebook_css}")
    console.print(f"[cyan]Highlight CSS Class:[/cyan] {config.highlight_css_class}")
    console.print(f"[cyan]Strict:[/cyan] {config.strict}")
    console.print(f"[cyan]Log Level:[/cyan] {config.log_level}")


if __name__ == "__main__":
    main()
