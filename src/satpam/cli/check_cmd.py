"""``satpam check <policy> <path> <action>...`` — Test a grant.

Exit Codes:
    0 — The path grants the actions.
    1 — The path is missing or does not grant them.
    2 — Policy file could not be loaded.
"""

from __future__ import annotations

import sys

import click

from satpam.cli.common import ignore_invalid_option, load_store, policy_argument, root_option


@click.command("check")
@policy_argument
@click.argument("path")
@click.argument("actions", nargs=-1, required=True)
@root_option
@ignore_invalid_option
@click.option("--any", "match_any", is_flag=True, help="Require any one action instead of all.")
def check_command(
    policy: str,
    path: str,
    actions: tuple[str, ...],
    root: str | None,
    ignore_invalid: bool,
    match_any: bool,
) -> None:
    """Check whether POLICY grants ACTIONS on PATH."""
    store = load_store(policy, root, ignore_invalid)
    ability = store.get(path)

    if ability is None:
        click.echo(f"DENIED: {path} is not granted")
        sys.exit(1)

    granted = ability.has_any(*actions) if match_any else ability.has_all(*actions)
    verdict = "ALLOWED" if granted else "DENIED"
    click.echo(f"{verdict}: {ability.path} [{', '.join(actions)}]")
    sys.exit(0 if granted else 1)
