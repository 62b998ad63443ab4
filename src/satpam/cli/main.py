"""Satpam CLI — inspect and normalise capability token policies.

Entry point for the ``satpam`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    validate — Classify a single token against the grammar.
    show     — Display the abilities a policy grants.
    export   — Print a policy's tokens re-rooted, compacted or expanded.
    check    — Test whether a policy grants actions on a path.

Usage::

    satpam validate "outside/app/login:signin" --root app
    satpam show policy.yaml
    satpam export tokens.txt --root app --to user --expand
    satpam check policy.yaml app/list read update
"""

from __future__ import annotations

import logging

import click

from satpam import __version__
from satpam.cli.check_cmd import check_command
from satpam.cli.export_cmd import export_command
from satpam.cli.show_cmd import show_command
from satpam.cli.validate_cmd import validate_command


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """Satpam: hierarchical capability tokens.

    Validate tokens, and load token policies to inspect, normalise and
    query the abilities they grant.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Register all subcommands
cli.add_command(validate_command)
cli.add_command(show_command)
cli.add_command(export_command)
cli.add_command(check_command)
