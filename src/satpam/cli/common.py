"""Shared option handling for commands that load a policy file."""

from __future__ import annotations

import sys

import click

from satpam.config import load_policy
from satpam.core.abilities import Abilities
from satpam.exceptions import SatpamError

policy_argument = click.argument("policy", type=click.Path(exists=True, dir_okay=False))
root_option = click.option(
    "--root", "-r",
    default=None,
    help="Store root segment (overrides the policy file).",
)
ignore_invalid_option = click.option(
    "--ignore-invalid",
    is_flag=True,
    help="Drop invalid tokens instead of failing.",
)


def load_store(policy: str, root: str | None, ignore_invalid: bool) -> Abilities:
    """Load a policy file into a store, exiting with code 2 on failure.

    Without ``--ignore-invalid`` the policy file decides how invalid
    tokens are handled.
    """
    try:
        return load_policy(policy).with_overrides(root, ignore_invalid or None).build()
    except SatpamError as exc:
        click.echo(f"Error: {exc}")
        sys.exit(2)
