import logging
from pathlib import Path

import click

from cache_me.capture.parser import parse_ttl_minutes
from cache_me.errors import InvalidTTL
from cache_me.generation.calculator import SAMPLE_INPUT, calculate
from cache_me.generation.formatter import format_results
from cache_me.generation.reconstructor import format_log

_LOG_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG]


def _validate_minutes(ctx, param, value):
    try:
        return parse_ttl_minutes(value)
    except InvalidTTL as e:
        raise click.BadParameter(str(e)) from e


@click.group()
@click.version_option(package_name="cache-me")
@click.option("-v", "--verbose", count=True, help="Increase log output (repeat for debug)")
def cli(verbose):
    """Estimate how many cache fills an access log would cause for a given cache time."""
    level = _LOG_LEVELS[min(len(_LOG_LEVELS) - 1, verbose)]
    logging.basicConfig(level=level, format="%(asctime)s %(name)s %(levelname)s: %(message)s")


@cli.command("calculate")
@click.argument("logfile", type=click.File("r"), default="-")
@click.option(
    "--minutes", "-m", default="10", show_default=True, envvar="CACHE_ME_MINUTES",
    callback=_validate_minutes, help="Cache time in minutes",
)
@click.option(
    "--routes", "-r", default="", envvar="CACHE_ME_ROUTES",
    help='Comma-separated route templates, e.g. "/:season,/:season/:eventId"',
)
@click.option("--group-by-route/--no-group-by-route", default=True, show_default=True)
@click.option("--show-log", is_flag=True, help="Print the reconstructed cache-miss log")
@click.option("--log-output", type=click.Path(dir_okay=False), help="Write the reconstructed log to a file")
def calculate_cmd(logfile, minutes, routes, group_by_route, show_log, log_output):
    """Count cache fills per route for LOGFILE ("<timestamp> <path>" per line)."""
    result = calculate(logfile.read(), minutes, routes=routes, group_by_route=group_by_route)

    if result.skipped_lines:
        click.echo(f"Skipped {result.skipped_lines} malformed line(s)", err=True)

    click.echo(format_results(result.results))

    log_text = format_log(result.log)
    if show_log and log_text:
        click.echo()
        click.echo(log_text)

    if log_output:
        Path(log_output).write_text(log_text + "\n" if log_text else "")
        click.echo(f"Wrote {len(result.log)} line(s) to {log_output}", err=True)


@cli.command()
def sample():
    """Print an example log in the expected input format."""
    click.echo(SAMPLE_INPUT, nl=False)
