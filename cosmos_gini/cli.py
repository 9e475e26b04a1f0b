#!/usr/bin/env python3
"""
cosmos-gini CLI Interface
"""

import click
import sys
import logging

from . import __version__
from .models import HeightSample
from .orchestrator import GiniRangeRunner, DEFAULT_CONCURRENCY, DEFAULT_STEP
from .rpc_client import DEFAULT_RPC_URL
from .utils import format_sample_line, format_average_line


def setup_logging(level=logging.INFO):
    """Set up logging configuration to stderr only"""
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
        force=True
    )


def echo_sample(sample: HeightSample):
    """Print a per-height result as soon as it is available"""
    click.echo(format_sample_line(sample.height, sample.coefficient))


@click.group()
@click.version_option(__version__, prog_name="cosmos-gini")
def cli():
    """cosmos-gini: validator voting power inequality for Cosmos SDK chains"""


@cli.command()
@click.option('--rpc', type=str, default=DEFAULT_RPC_URL, show_default=True,
              help='Tendermint RPC URL')
@click.option('--concurrency', type=click.IntRange(min=1), default=DEFAULT_CONCURRENCY, show_default=True,
              help='Maximum number of RPC requests concurrently pending')
@click.option('--startHeight', 'start_height', type=int, required=True,
              help='The starting block height to include in the average calculation')
@click.option('--endHeight', 'end_height', type=int, required=True,
              help='The ending block height to include in the average calculation')
@click.option('--step', type=click.IntRange(min=1), default=DEFAULT_STEP, show_default=True,
              help='The number of blocks to increase per iteration')
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.option('--quiet', is_flag=True, help='Suppress log output except errors')
def gini(rpc, concurrency, start_height, end_height, step, debug, quiet):
    """Calculate the Gini coefficient for apps built with Cosmos SDK"""

    if debug:
        setup_logging(logging.DEBUG)
    elif quiet:
        setup_logging(logging.ERROR)
    else:
        setup_logging(logging.INFO)

    if start_height >= end_height:
        raise click.BadParameter('Start height must be less than end height',
                                 param_hint="'--startHeight' / '--endHeight'")

    runner = GiniRangeRunner(rpc, concurrency)
    try:
        result = runner.run(start_height, end_height, step, on_sample=echo_sample)
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    finally:
        runner.close()

    click.echo(format_average_line(result.average, start_height, end_height))


if __name__ == '__main__':
    cli()
