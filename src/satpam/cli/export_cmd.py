"""``satpam export <policy>`` — Print normalised tokens for a policy.

Loads the policy into a store (merging duplicate paths and re-rooting
foreign-prefixed tokens) and prints the store's tokens, one per line.

Exit Codes:
    0 — Tokens printed.
    2 — Policy file could not be loaded.
"""

from __future__ import annotations

import click

from satpam.cli.common import ignore_invalid_option, load_store, policy_argument, root_option


@click.command("export")
@policy_argument
@root_option
@ignore_invalid_option
@click.option(
    "--to", "export_root",
    default="",
    help="Cut exported paths to start at this segment (default: store root).",
)
@click.option(
    "--expand", is_flag=True,
    help="One token per action instead of one token per path.",
)
def export_command(
    policy: str,
    root: str | None,
    ignore_invalid: bool,
    export_root: str,
    expand: bool,
) -> None:
    """Load POLICY and print its tokens, one per line."""
    store = load_store(policy, root, ignore_invalid)
    for token in store.export_tokens(export_root, compact=not expand):
        click.echo(token)
