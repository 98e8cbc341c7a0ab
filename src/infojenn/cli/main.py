"""Main CLI entry point for infojenn.

Provides command group with global options and subcommands for IC and
similarity computation.
"""

import logging
from pathlib import Path

import click

from infojenn import __version__
from infojenn.cli.ic_cmd import ic
from infojenn.cli.similarity_cmd import similarity
from infojenn.cli.common import load_cli_config


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


@click.group()
@click.option(
    '--config',
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help='Path to configuration YAML file (defaults apply if omitted)'
)
@click.option(
    '--verbose',
    is_flag=True,
    help='Enable verbose logging (DEBUG level)'
)
@click.pass_context
def cli(ctx, config, verbose):
    """infojenn: information content and semantic similarity of ontology terms in a cohort.

    Computes per-term present/excluded information content from cohort
    observations and MICA-based similarity between observed terms.
    """
    ctx.ensure_object(dict)
    ctx.obj['config_path'] = config
    ctx.obj['verbose'] = verbose

    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logging.debug("Verbose logging enabled")


@cli.command()
@click.pass_context
def info(ctx):
    """Display version and configuration summary."""
    config_path = ctx.obj['config_path']

    click.echo(f"infojenn v{__version__}")
    click.echo(f"Config: {config_path or '(defaults)'}")
    click.echo()

    try:
        config = load_cli_config(config_path)

        config_hash = config.config_hash()
        click.echo(f"Config Hash: {config_hash[:16]}...")
        click.echo()

        click.echo(click.style("IC Calculation:", bold=True))
        click.echo(f"  Module Root:         {config.ic.module_root}")
        click.echo(f"  Unknown Term Policy: {config.ic.unknown_term_policy.value}")
        click.echo(f"  Ordered Container:   {config.ic.ordered_container}")
        click.echo()

        click.echo(click.style("Similarity:", bold=True))
        click.echo(f"  MICA Threshold:  {config.similarity.mica_threshold:g}")
        click.echo(f"  Max Workers:     {config.similarity.max_workers or 'auto'}")
        click.echo(f"  Chunk Size:      {config.similarity.chunk_size}")
        click.echo(f"  Excluded Policy: {config.similarity.excluded_policy.value}")

    except Exception as e:
        click.echo(click.style(f"Error loading config: {e}", fg='red'), err=True)
        ctx.exit(1)


# Register commands
cli.add_command(ic)
cli.add_command(similarity)


if __name__ == '__main__':
    cli()
