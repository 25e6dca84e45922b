"""
Command-line interface for robofont
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from . import registry
from .base import FontDefinition
from .compositor import Compositor
from .config import reset_config
from .exceptions import RobofontError
from .litlogger import LogLevel, set_global_level
from .loader import load_font
from .version import __version__

app: typer.Typer = typer.Typer(help="robofont - ASCII art banners from bitmap fonts", no_args_is_help=True)
console: Console = Console()
err_console: Console = Console(stderr=True)

DEFAULT_TEXT = "HELLO WORLD"


def _fail(error: RobofontError) -> None:
    err_console.print(f"[bold red]Error: {error}[/bold red]", markup=True, highlight=False)
    raise typer.Exit(code=1)


def _resolve_font(name: Optional[str], file: Optional[Path]) -> FontDefinition:
    if file is not None:
        return load_font(file)
    return registry.get_font(name)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    config_dir: Optional[Path] = typer.Option(None, "--config-dir", help="Read config.json from this directory"),
) -> None:
    """
    Render text as ASCII art banners.
    """
    if config_dir is not None:
        reset_config(str(config_dir))
        registry.clear_cache()
    if verbose:
        set_global_level(LogLevel.DEBUG)


@app.command("render")
def render(
    text: str = typer.Argument(DEFAULT_TEXT, help="Text to render"),
    font: Optional[str] = typer.Option(None, "--font", "-f", help="Font name (see 'robofont fonts')"),
    file: Optional[Path] = typer.Option(None, "--file", "-F", help="Render with a .robofont file instead of a named font"),
    upper: bool = typer.Option(True, "--upper/--no-upper", help="Upper-case the text before glyph lookup"),
) -> None:
    """
    Print TEXT as a banner.
    """
    try:
        definition = _resolve_font(font, file)
    except RobofontError as e:
        _fail(e)
    typer.echo(Compositor(definition, uppercase=upper).render(text))


@app.command("fonts")
def list_fonts() -> None:
    """
    List available fonts.
    """
    table = Table(title="Available Fonts")
    table.add_column("Name", style="cyan")
    table.add_column("Source", style="green")
    table.add_column("Height", style="magenta", justify="right")
    table.add_column("Spaces", style="magenta", justify="right")
    table.add_column("Glyphs", style="yellow", justify="right")

    for name in registry.available_fonts():
        source = "bundled" if registry.is_bundled(name) else "user"
        try:
            font = registry.get_font(name)
        except RobofontError as e:
            table.add_row(name, source, "-", "-", f"[red]{e}[/red]")
            continue
        table.add_row(name, source, str(font.height), str(font.space_width), str(len(font)))

    console.print(table)


@app.command("preview")
def preview(
    name: Optional[str] = typer.Argument(None, help="Font name (default: configured default font)"),
    per_line: int = typer.Option(12, "--per-line", "-n", help="Glyphs per banner line"),
) -> None:
    """
    Render every single-character glyph of a font.
    """
    try:
        font = registry.get_font(name)
    except RobofontError as e:
        _fail(e)
    keys = sorted(key for key in font.keys() if len(key) == 1)
    compositor = Compositor(font, uppercase=False)
    console.print(f"[bold blue]{font.name}[/bold blue] ({len(keys)} glyphs)")
    step = max(per_line, 1)
    for start in range(0, len(keys), step):
        typer.echo(compositor.render(" ".join(keys[start:start + step])))
        typer.echo()


@app.command("info")
def info(name: Optional[str] = typer.Argument(None, help="Font name (default: configured default font)")) -> None:
    """
    Show font parameters and glyph keys.
    """
    try:
        font = registry.get_font(name)
        path = registry.font_path(font.name)
    except RobofontError as e:
        _fail(e)
    console.print(f"[bold]Name:[/bold] {font.name}")
    console.print(f"[bold]File:[/bold] {path}", highlight=False)
    console.print(f"[bold]Height:[/bold] {font.height}")
    console.print(f"[bold]Space width:[/bold] {font.space_width}")
    console.print(f"[bold]Glyphs:[/bold] {len(font)}")
    console.print(" ".join(sorted(font.keys())), markup=False, highlight=False)


@app.command("version")
def version() -> None:
    """Show the version of robofont."""
    console.print(f"robofont version: {__version__}")


if __name__ == "__main__":
    app()
