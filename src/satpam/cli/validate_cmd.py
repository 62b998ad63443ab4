"""``satpam validate <token>`` — Classify a token against the grammar.

Exit Codes:
    0 — Token is valid, or becomes valid once re-rooted (``has-root``).
    1 — Token is invalid, including after re-rooting.
"""

from __future__ import annotations

import json
import sys

import click

from satpam.core.abilities import ValidationCode, shift_path, validate_token


@click.command("validate")
@click.argument("token")
@click.option("--root", "-r", default="", help="Required root segment.")
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
def validate_command(token: str, root: str, output_format: str) -> None:
    """Validate TOKEN, optionally requiring it to start at ROOT.

    A token whose root appears after a foreign prefix is reported as
    ``has-root`` together with the re-rooted token an import would use.
    When the re-rooted token is itself malformed, its own error is
    reported instead.
    """
    result = validate_token(token, root)
    recut = ""
    if result.recoverable:
        recut = shift_path(token, root)
        rerooted = validate_token(recut, root)
        if not rerooted.valid:
            result = rerooted

    if output_format == "json":
        click.echo(json.dumps({
            "token": result.token,
            "code": result.code.value,
            "message": result.message,
            "parent": list(result.parent),
            "key": result.key,
            "actions": list(result.actions),
            "rerooted": recut or None,
        }, indent=2))
    else:
        from satpam.cli.output import print_validation
        print_validation(result, recut)

    sys.exit(0 if result.valid or result.code is ValidationCode.HAS_ROOT else 1)
