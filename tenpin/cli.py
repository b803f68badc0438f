"""
cli.py

Entry point for CLI.
"""

import sys
import json

import click
from loguru import logger

from tenpin import __version__
from tenpin.rules import AVAILABLE_RULESETS


@click.group("tenpin", invoke_without_command=True)
@click.version_option(version=__version__)
@click.pass_context
@click.option(
    "-v",
    "--loglevel",
    type=click.Choice(["debug", "info", "warning", "error"]),
    default="warning",
)
def cli(ctx, loglevel):
    """Scores ten-pin bowling frames from roll notation."""

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        return

    logger.remove()
    logger.add(sys.stderr, level=loglevel.upper())


@cli.command("score")
@click.argument("ROLLS", nargs=-1)
@click.option(
    "--ruleset", type=click.Choice(list(AVAILABLE_RULESETS.keys())), default="tenpin"
)
@click.option("--json", "as_json", is_flag=True, help="Print the raw frame scores.")
def score(rolls, ruleset, as_json):
    """Score a sequence of rolls (0-9, / or X)."""
    from tenpin.errors import MalformedRollError, ScoringError
    from tenpin.report import print_frames
    from tenpin.scoring import score as score_rolls

    ruleset = AVAILABLE_RULESETS[ruleset]

    try:
        frame_scores = score_rolls(rolls, ruleset=ruleset)
    except (MalformedRollError, ScoringError) as e:
        logger.info("Rejected rolls {}: {!r}", " ".join(rolls), e)
        raise click.ClickException(str(e))

    if as_json:
        click.echo(json.dumps(frame_scores))
    else:
        click.echo(print_frames(frame_scores, ruleset=ruleset))


@cli.command("selftest")
def selftest():
    """Check the scorer against the reference roll sequences."""
    from tenpin.selftest import run_selftest

    if not run_selftest():
        sys.exit(1)


if __name__ == "__main__":
    cli()
