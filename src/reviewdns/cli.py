"""Command-line interface for review app DNS hooks.

This module provides the Click-based CLI that Heroku's postdeploy and
pr-predestroy scripts call.
"""
import logging
import sys
import click
from typing import Optional, Tuple

from . import utils
from .config import HookConfig, derive_hostname
from .console_output import ConsoleOutput
from .dns import Route53Zones
from .lifecycle import review_apps
from .platform import HerokuClient

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG = logging.getLogger(__name__)


def _build_clients(config: HookConfig) -> Tuple[HerokuClient, Route53Zones]:
    platform = HerokuClient(config.heroku_api_token, session=utils.get_http_session())
    zones = Route53Zones(
        utils.get_route53_client(
            access_key_id=config.aws_access_key_id,
            secret_access_key=config.aws_secret_access_key,
            region=config.aws_region,
        )
    )
    return platform, zones


def _domain_options(func):
    func = click.option('--base-domain', envvar='REVIEW_APP_BASE_DOMAIN',
                        help='Parent domain for review app hostnames '
                             '(default: $REVIEW_APP_BASE_DOMAIN)')(func)
    func = click.option('--app-name', envvar='HEROKU_APP_NAME',
                        help='Heroku review app name (default: $HEROKU_APP_NAME)')(func)
    return func


@click.group()
@click.version_option(package_name='review-app-dns')
@click.option('--log-level', default='INFO', show_default=True,
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Logging level')
@click.pass_context
def cli(ctx, log_level: str):
    """Review App DNS - Route53 records for Heroku review apps."""
    ctx.ensure_object(dict)
    ctx.obj['console'] = ConsoleOutput()
    logging.basicConfig(level=log_level.upper(), format=LOG_FORMAT)


@cli.command()
@_domain_options
@click.pass_context
def postdeploy(ctx, app_name: Optional[str], base_domain: Optional[str]):
    """Register the review app hostname and create its CNAME record."""
    console = ctx.obj['console']

    try:
        config = HookConfig.from_env(app_name=app_name, base_domain=base_domain)
        platform, zones = _build_clients(config)
        result = review_apps.provision(config, platform=platform, zones=zones)
        console.print_result("CNAME Created", result)
    except Exception as e:
        LOG.error("postdeploy failed: %s", e)
        console.print_error(f"Failed to provision review app DNS: {str(e)}")
        sys.exit(1)


@cli.command()
@_domain_options
@click.pass_context
def predestroy(ctx, app_name: Optional[str], base_domain: Optional[str]):
    """Delete the CNAME record of a review app about to be destroyed."""
    console = ctx.obj['console']

    try:
        config = HookConfig.from_env(app_name=app_name, base_domain=base_domain)
        platform, zones = _build_clients(config)
        result = review_apps.decommission(config, platform=platform, zones=zones)
        console.print_result("CNAME Deleted", result)
    except Exception as e:
        LOG.error("predestroy failed: %s", e)
        console.print_error(f"Failed to decommission review app DNS: {str(e)}")
        sys.exit(1)


@cli.command()
@_domain_options
@click.pass_context
def status(ctx, app_name: Optional[str], base_domain: Optional[str]):
    """Show the Heroku domain and Route53 record of a review app."""
    console = ctx.obj['console']

    try:
        config = HookConfig.from_env(app_name=app_name, base_domain=base_domain)
        platform, zones = _build_clients(config)
        domain_status = review_apps.inspect(config, platform=platform, zones=zones)
        console.print_status(domain_status)
    except Exception as e:
        LOG.error("status failed: %s", e)
        console.print_error(f"Failed to retrieve status: {str(e)}")
        sys.exit(1)

    if not domain_status.in_sync:
        console.print_warning(f"{domain_status.hostname} is not in sync")
        sys.exit(1)


@cli.command()
@click.argument('app_name')
@click.option('--base-domain', envvar='REVIEW_APP_BASE_DOMAIN', required=True,
              help='Parent domain for review app hostnames (default: $REVIEW_APP_BASE_DOMAIN)')
@click.pass_context
def hostname(ctx, app_name: str, base_domain: str):
    """Print the hostname APP_NAME gets under the base domain."""
    ctx.obj['console'].print_hostname(derive_hostname(app_name, base_domain.rstrip('.')))


def main():
    """Entry point for the CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
