"""
Newsroom Markup CLI Application.

Command-line access to the markup engine for authors and for scripting:
preview a draft, export escaped HTML, project plain text, build excerpts
and SEO-metadata prompts, and inspect how block tags were resolved.

Every command reading a FILE accepts ``-`` for standard input.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich import print as rprint
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from .. import __version__
from ..core.excerpts import build_excerpt, reading_time, truncate_words
from ..core.markup import parse, resolve, tokenize_blocks
from ..core.metadata_prompt import build_metadata_prompt
from ..core.renderers import (
    PreviewElement,
    PreviewOptions,
    project_plain_text,
    render_html,
    render_preview,
)
from ..exceptions import ConfigurationError, NewsroomMarkupError
from ..utils.config import ConfigManager
from ..utils.logging_config import setup_logging

console = Console()

app = typer.Typer(
    name="newsroom-markup",
    help="Parse, preview and project newsroom article markup",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)

# Set up lazily by the app callback
_config_manager: Optional[ConfigManager] = None
_logger: Optional[logging.Logger] = None


def get_config_manager(config_path: Optional[str] = None) -> ConfigManager:
    """
    Return the shared ConfigManager, rebuilding it when a new path is given.

    Raises:
        typer.Exit: If configuration loading fails
    """
    global _config_manager

    if _config_manager is None or config_path:
        try:
            manager = ConfigManager(config_file=config_path)
            manager.load_config()
        except ConfigurationError as e:
            rprint(f"[red]Configuration Error:[/red] {escape(str(e))}")
            raise typer.Exit(1)
        _config_manager = manager

    return _config_manager


def get_logger() -> logging.Logger:
    """Get the global logger instance."""
    global _logger
    if _logger is None:
        _logger = setup_logging()
    return _logger


def read_source(path: str) -> str:
    """Read markup from a file, or from stdin when ``path`` is ``-``."""
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def handle_cli_error(error: Exception) -> None:
    """Print a user-friendly message for ``error``."""
    logger = get_logger()

    if isinstance(error, ConfigurationError):
        rprint(f"[red]Configuration Error:[/red] {escape(str(error))}")
        logger.debug("Configuration error details", exc_info=True)
    elif isinstance(error, FileNotFoundError):
        rprint(f"[red]File Not Found:[/red] {escape(str(error))}")
        logger.debug("File not found details", exc_info=True)
    elif isinstance(error, NewsroomMarkupError):
        rprint(f"[red]Markup Error:[/red] {escape(str(error))}")
        logger.debug("Markup error details", exc_info=True)
    else:
        rprint(f"[red]Error:[/red] {escape(str(error))}")
        logger.debug("Unexpected error details", exc_info=True)


def build_rich_tree(element: PreviewElement, tree: Optional[Tree] = None) -> Tree:
    """Convert a preview tree into a rich ``Tree`` for terminal display."""
    label = Text(element.kind.value, style="bold cyan")
    if element.css_class:
        label.append(f" .{element.css_class}", style="dim")
    if element.text is not None:
        label.append(f" {element.text!r}")

    node = Tree(label) if tree is None else tree.add(label)
    for child in element.children:
        build_rich_tree(child, node)
    return node


@app.callback()
def main(
    config_path: Optional[str] = typer.Option(
        None,
        "--config-path",
        "-c",
        help="Path to configuration file (default: newsroom_markup.config.json)",
        metavar="PATH",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging (DEBUG level)",
    ),
) -> None:
    """
    Newsroom Markup CLI - work with bracket-tag article markup.

    Common workflows:
    • Preview a draft: newsroom-markup preview draft.txt
    • Plain text for SEO: newsroom-markup plain draft.txt
    • Metadata prompt: newsroom-markup meta-prompt draft.txt --title "Budget passed"
    """
    global _logger

    manager = get_config_manager(config_path)
    level = "DEBUG" if verbose else manager.get("logging.level", "INFO")
    _logger = setup_logging(level, manager.get("logging.format", "rich"))


@app.command()
def preview(file: str = typer.Argument(..., help="Markup file, or - for stdin")) -> None:
    """Show the preview tree of a draft."""
    try:
        options = PreviewOptions.from_config(get_config_manager().get("preview", {}))
        tree = render_preview(parse(read_source(file)), options)
        console.print(build_rich_tree(tree))
    except Exception as e:
        handle_cli_error(e)
        raise typer.Exit(1)


@app.command()
def html(file: str = typer.Argument(..., help="Markup file, or - for stdin")) -> None:
    """Render a draft to an escaped HTML fragment."""
    try:
        options = PreviewOptions.from_config(get_config_manager().get("preview", {}))
        typer.echo(render_html(render_preview(parse(read_source(file)), options)))
    except Exception as e:
        handle_cli_error(e)
        raise typer.Exit(1)


@app.command()
def plain(
    file: str = typer.Argument(..., help="Markup file, or - for stdin"),
    max_words: Optional[int] = typer.Option(
        None, "--max-words", "-w", help="Truncate to this many words"
    ),
) -> None:
    """Project a draft to plain text."""
    try:
        text = project_plain_text(parse(read_source(file)))
        if max_words is not None:
            text = truncate_words(text, max_words).truncated
        typer.echo(text)
    except Exception as e:
        handle_cli_error(e)
        raise typer.Exit(1)


@app.command()
def excerpt(
    file: str = typer.Argument(..., help="Excerpt markup file, or - for stdin"),
    title: str = typer.Option("", "--title", "-t", help="Article title used as fallback"),
    limit: Optional[int] = typer.Option(
        None, "--limit", "-l", help="Title fallback length (default from config)"
    ),
) -> None:
    """Build the stored excerpt from excerpt markup, falling back to the title."""
    try:
        if limit is None:
            limit = get_config_manager().get("excerpt.max_length", 200)
        typer.echo(build_excerpt(read_source(file), title, limit))
    except Exception as e:
        handle_cli_error(e)
        raise typer.Exit(1)


@app.command("meta-prompt")
def meta_prompt(
    file: str = typer.Argument(..., help="Article body markup file, or - for stdin"),
    title: str = typer.Option(..., "--title", "-t", help="Article title"),
    excerpt_text: Optional[str] = typer.Option(
        None, "--excerpt", "-e", help="Excerpt markup"
    ),
    budget: Optional[int] = typer.Option(
        None, "--budget", "-b", help="Content character budget (default from config)"
    ),
) -> None:
    """Print the SEO-metadata generation prompt for an article."""
    try:
        if budget is None:
            budget = get_config_manager().get("metadata.content_budget", 2000)
        typer.echo(build_metadata_prompt(title, read_source(file), excerpt_text, budget))
    except Exception as e:
        handle_cli_error(e)
        raise typer.Exit(1)


@app.command()
def tokens(file: str = typer.Argument(..., help="Markup file, or - for stdin")) -> None:
    """Show the resolved block spans of a draft."""
    try:
        source = read_source(file)
        spans = resolve(tokenize_blocks(source))

        table = Table(title="Resolved block spans")
        table.add_column("#", justify="right")
        table.add_column("Tag", style="cyan")
        table.add_column("Start", justify="right")
        table.add_column("End", justify="right")
        table.add_column("Inner text")

        for span in spans:
            inner = span.inner_text.strip().replace("\n", " ⏎ ")
            if len(inner) > 60:
                inner = inner[:57] + "..."
            table.add_row(str(span.position), span.tag.tag_name, str(span.start), str(span.end), escape(inner))

        console.print(table)
        rprint(f"{len(spans)} block span(s), reading time {reading_time(project_plain_text(parse(source)))} min")
    except Exception as e:
        handle_cli_error(e)
        raise typer.Exit(1)


@app.command()
def info() -> None:
    """Show configuration status."""
    try:
        config_manager = get_config_manager()

        info_text = Text()
        info_text.append("Newsroom Markup Information\n\n", style="bold blue")
        info_text.append(f"Version: {__version__}\n")
        info_text.append(f"Config file: {config_manager.config_file}\n")
        info_text.append(f"Loaded from file: {'✓' if config_manager.loaded_from_file else '✗'}\n\n")

        info_text.append("Configuration:\n", style="bold")
        info_text.append(f"• Excerpt length: {config_manager.get('excerpt.max_length')}\n")
        info_text.append(f"• Metadata content budget: {config_manager.get('metadata.content_budget')}\n")
        info_text.append(f"• Log level: {config_manager.get('logging.level')}\n")

        console.print(Panel(info_text, title="System Information", border_style="blue"))
    except Exception as e:
        handle_cli_error(e)
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show version information."""
    rprint(f"Newsroom Markup [blue]v{__version__}[/blue]")


def cli_main() -> None:
    """Console script entry point."""
    try:
        app()
    except KeyboardInterrupt:
        rprint("\n[yellow]Operation cancelled by user[/yellow]")
        raise typer.Exit(130)


if __name__ == "__main__":
    cli_main()
