import logging
import sys

import click

from lambdaprune import __version__
from lambdaprune.config import Config, ConfigError, make_client
from lambdaprune.logs import configure_logging
from lambdaprune.prune import prune as prune_functions
from lambdaprune.retention import KEEP_COUNT


logger = logging.getLogger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name='lambda-prune')
def cli():
    """Delete old AWS Lambda function versions."""


@cli.command()
@click.argument('prefix')
@click.option('-k', '--keep', default=KEEP_COUNT, show_default=True, type=click.IntRange(min=0),
              help='Number of recent unaliased versions to keep per function')
@click.option('-n', '--dry-run', is_flag=True, default=False,
              help='Only show what would be deleted')
def prune(prefix, keep, dry_run):
    """Prune versions of every function whose name starts with PREFIX."""
    try:
        config = Config.from_env()
    except ConfigError as e:
        logger.error(f'{e}. Set them in the environment or in .env.private.')
        sys.exit(1)

    try:
        client = make_client(config)
        deleted = prune_functions(client, prefix, keep_count=keep, dry_run=dry_run)
    except Exception as e:
        logger.error('unhandled exception:', exc_info=e)
        sys.exit(1)

    verb = 'would delete' if dry_run else 'deleted'
    logger.info(f'done, {verb} {sum(deleted.values())} versions across {len(deleted)} functions')


def main():
    configure_logging()
    cli()


if __name__ == '__main__':
    main()
