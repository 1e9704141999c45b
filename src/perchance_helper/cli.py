"""CLI interface for perchance-helper."""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich import print as rprint
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from perchance_helper.interpreter import format_output, make_rng, parse_lists, render, validate
from perchance_helper.user_config import (
    get_config_path,
    get_default_config_template,
    get_default_seed,
    get_output_label,
    load_user_config,
    parse_config_value,
    save_user_config,
)

app = typer.Typer(
    name="perchance-helper",
    help="Validate, inspect, and test Perchance-style generator templates.",
    no_args_is_help=True,
)

config_app = typer.Typer(
    name="config",
    help="Manage user-level default preferences.",
    no_args_is_help=True,
)
app.add_typer(config_app, name="config")

console = Console()

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: %(message)s",
)
logger = logging.getLogger(__name__)

TemplateFile = Annotated[
    Path,
    typer.Argument(
        help="File containing Perchance code",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
]


def _read_template(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        rprint(f"[red]Error:[/red] {path} is not valid UTF-8 text ({e.reason})")
        raise typer.Exit(1) from e


@app.command("validate")
def validate_cmd(
    template: TemplateFile,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable verbose output")] = False,
) -> None:
    """Check a template for list definitions."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    report = validate(_read_template(template))

    if verbose:
        rprint(f"[dim]list block found: {report.has_lists}[/dim]")
        rprint(f"[dim]placeholders found: {report.has_brackets}[/dim]")

    if report:
        rprint(f"[green]✓ {report.message}[/green]")
    else:
        rprint(f"[red]✗ {report.message}[/red]")
        raise typer.Exit(1)


@app.command("generate")
def generate_cmd(
    template: TemplateFile,
    seed: Annotated[
        int | None, typer.Option("--seed", "-s", help="Seed for reproducible output")
    ] = None,
    count: Annotated[
        int, typer.Option("--count", "-n", min=1, help="Number of outputs to generate")
    ] = 1,
    label: Annotated[
        bool, typer.Option("--label/--no-label", help="Prefix output with the configured label")
    ] = True,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable verbose output")] = False,
) -> None:
    """Render a template with random options."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    parsed = parse_lists(_read_template(template))
    if seed is None:
        seed = get_default_seed()
    rng = make_rng(seed) if seed is not None else None
    prefix = get_output_label() if label else ""
    logger.debug("Generating %d output(s) with seed %s", count, seed)

    for _ in range(count):
        # Rendered output is HTML; keep rich from reading brackets as markup
        console.print(
            escape(format_output(render(parsed, rng), prefix)), highlight=False, soft_wrap=True
        )

    missing = parsed.unresolved_placeholders()
    if missing:
        rprint(f"[yellow]Unresolved placeholders: {', '.join(missing)}[/yellow]")


@app.command("lists")
def lists_cmd(template: TemplateFile) -> None:
    """Show the lists and body parsed from a template."""
    parsed = parse_lists(_read_template(template))

    rprint(f"[cyan]Body:[/cyan] {escape(parsed.body)}\n")

    if not parsed.lists:
        rprint("[yellow]No lists found[/yellow]")
        return

    table = Table(title="Lists")
    table.add_column("Name", style="cyan")
    table.add_column("Options")
    table.add_column("Count", justify="right")

    for name, options in parsed.lists.items():
        table.add_row(escape(name), escape(" | ".join(options)), str(len(options)))

    console.print(table)


@app.command("serve")
def serve_cmd() -> None:
    """Run the MCP server over stdio."""
    from perchance_helper.mcp_server import main as serve_main

    serve_main()


@config_app.command("show")
def config_show_cmd() -> None:
    """Show current user configuration."""
    config_path = get_config_path()
    user_cfg = load_user_config()

    if not user_cfg:
        rprint(f"[yellow]No user config found at {config_path}[/yellow]")
        rprint("[dim]Run 'perchance-helper config init' to create one.[/dim]")
        return

    rprint(f"[cyan]Config file:[/cyan] {config_path}\n")
    table = Table(title="User Defaults")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    for key, value in user_cfg.items():
        table.add_row(key, repr(value))

    console.print(table)


@config_app.command("init")
def config_init_cmd(
    force: Annotated[bool, typer.Option("--force", "-f", help="Overwrite existing config")] = False,
) -> None:
    """Create a default user configuration file."""
    config_path = get_config_path()

    if config_path.exists() and not force:
        rprint(f"[yellow]Config already exists at {config_path}[/yellow]")
        rprint("[dim]Use --force to overwrite.[/dim]")
        raise typer.Exit(1)

    template = get_default_config_template()
    saved_path = save_user_config(template)
    rprint(f"[green]Created default config at {saved_path}[/green]")
    rprint("[dim]Edit this file to customize your defaults.[/dim]")


@config_app.command("set")
def config_set_cmd(
    key: Annotated[str, typer.Argument(help="Config key: output_label, seed, or log_level")],
    value: Annotated[str, typer.Argument(help="Value to set ('none' clears the seed)")],
) -> None:
    """Set a single configuration value."""
    try:
        parsed = parse_config_value(key, value)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e

    user_cfg = load_user_config()
    user_cfg[key] = parsed
    save_user_config(user_cfg)
    rprint(f"[green]Set {key} = {escape(repr(parsed))}[/green]")


@config_app.command("path")
def config_path_cmd() -> None:
    """Print the path to the user config file."""
    rprint(str(get_config_path()))


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
