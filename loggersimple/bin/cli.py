"""Send a single log entry or heartbeat to Logger-Simple."""

import logging

import click

from loggersimple.api.transport import Transport
from loggersimple.config.user import LoggerSimpleConfiguration
from loggersimple.exception import LoggerSimpleError
from loggersimple.models import LOG_LEVELS


_logger = logging.getLogger(__name__)
_logger.setLevel(logging.INFO)


def _create_transport(app_id: str | None, api_key: str | None) -> Transport:
    try:
        _config = LoggerSimpleConfiguration.fetch(app_id=app_id, api_key=api_key)
    except RuntimeError as err:
        _logger.critical("Failed to load configuration: %s", str(err))
        raise click.Abort from err
    return Transport(_config.credentials)


@click.group("loggersimple")
@click.option(
    "--app-id",
    type=str,
    default=None,
    required=False,
    help="Application identifier, by default read from the environment or configuration file",
)
@click.option(
    "--api-key",
    type=str,
    default=None,
    required=False,
    help="Application API key, by default read from the environment or configuration file",
)
@click.pass_context
def cli(ctx: click.Context, app_id: str | None, api_key: str | None) -> None:
    ctx.ensure_object(dict)
    ctx.obj["app_id"] = app_id
    ctx.obj["api_key"] = api_key


@cli.command("log")
@click.argument("message", type=str)
@click.option(
    "--level",
    "-l",
    type=click.Choice(LOG_LEVELS),
    default="info",
    show_default=True,
    help="Level of the log entry",
)
@click.pass_context
def log(ctx: click.Context, message: str, level: str) -> None:
    """Send MESSAGE as a log entry"""
    _transport = _create_transport(**ctx.obj)
    try:
        click.echo(_transport.send_log(level, message))
    except LoggerSimpleError as err:
        _logger.critical("Failed to send log: %s", str(err))
        raise click.Abort from err


@cli.command("heartbeat")
@click.pass_context
def heartbeat(ctx: click.Context) -> None:
    """Notify the server that the application is online"""
    _transport = _create_transport(**ctx.obj)
    try:
        click.echo(_transport.send_heartbeat())
    except LoggerSimpleError as err:
        _logger.critical("Failed to send heartbeat: %s", str(err))
        raise click.Abort from err
