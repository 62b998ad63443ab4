"""``satpam show <policy>`` — Display the abilities a policy grants.

Exit Codes:
    0 — Policy loaded.
    2 — Policy file could not be loaded.
"""

from __future__ import annotations

import json

import click

from satpam.cli.common import ignore_invalid_option, load_store, policy_argument, root_option


@click.command("show")
@policy_argument
@root_option
@ignore_invalid_option
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
def show_command(
    policy: str, root: str | None, ignore_invalid: bool, output_format: str
) -> None:
    """Load POLICY and list every stored path with its actions."""
    store = load_store(policy, root, ignore_invalid)

    if output_format == "json":
        click.echo(json.dumps({
            "root": store.root,
            "count": store.count,
            "abilities": {a.path: list(a.actions) for a in store},
        }, indent=2))
        return

    from satpam.cli.output import print_abilities
    print_abilities(store)
