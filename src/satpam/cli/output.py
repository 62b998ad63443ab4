"""Rich output formatting helpers for the Satpam CLI."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from satpam.core.abilities import Abilities, TokenValidation, ValidationCode

_CODE_STYLES: dict[ValidationCode, str] = {
    ValidationCode.VALID: "bold green",
    ValidationCode.HAS_ROOT: "yellow",
}

console = Console()


def code_style(code: ValidationCode) -> str:
    """Return the Rich style string for a validation code."""
    return _CODE_STYLES.get(code, "bold red")


def print_validation(result: TokenValidation, rerooted: str = "") -> None:
    """Print the outcome of validating one token.

    Args:
        result: Validation result.
        rerooted: The re-rooted token for ``has-root`` results.
    """
    header = Text.assemble(
        ("Token: ", "bold"), (result.token, ""),
        ("  Result: ", "bold"), (result.code.value, code_style(result.code)),
    )
    console.print(Panel(header, title="Token Validation"))
    console.print(f"  {result.message}")

    if result.valid:
        console.print(f"  Parent:  {escape('/'.join(result.parent)) or '-'}")
        console.print(f"  Key:     {escape(result.key)}")
        console.print(f"  Actions: {escape(', '.join(result.actions))}")
    elif rerooted:
        console.print(f"  Re-rooted: [bold]{escape(rerooted)}[/bold]")


def print_abilities(store: Abilities) -> None:
    """Print a table of stored paths and their actions."""
    if not store.count:
        console.print("[dim]No abilities granted.[/dim]")
        return

    table = Table(title=f"Abilities (root: {store.root})", show_header=True, header_style="bold")
    table.add_column("Path", style="bold", overflow="fold")
    table.add_column("Actions", overflow="fold")
    for ability in store:
        table.add_row(escape(ability.path), escape(", ".join(ability.actions)))
    console.print(table)
    console.print(f"[bold]{store.count}[/bold] paths")
