"""IC command: compute present/excluded information content of cohort terms."""

import logging
import sys
from pathlib import Path

import click
import polars as pl

from infojenn.cli.common import load_inputs

logger = logging.getLogger(__name__)


@click.command('ic')
@click.option(
    '--ontology',
    'ontology_path',
    type=click.Path(exists=True, path_type=Path),
    required=True,
    help='Ontology file (.obo, or obographs JSON such as hp.json)'
)
@click.option(
    '--cohort',
    'cohort_path',
    type=click.Path(exists=True, path_type=Path),
    required=True,
    help='Cohort YAML/JSON file'
)
@click.option(
    '--top',
    type=click.IntRange(min=1),
    default=20,
    show_default=True,
    help='Number of terms to display'
)
@click.option(
    '--sort-by',
    type=click.Choice(['present', 'excluded']),
    default='present',
    show_default=True,
    help='IC column used to rank terms (descending)'
)
@click.option(
    '--module-root',
    default=None,
    help='Override ic.module_root (CURIE of the sub-ontology root)'
)
@click.option(
    '--unknown-term-policy',
    type=click.Choice(['error', 'skip']),
    default=None,
    help='Override ic.unknown_term_policy'
)
@click.pass_context
def ic(ctx, ontology_path, cohort_path, top, sort_by, module_root, unknown_term_policy):
    """Compute information content of the terms observed in a cohort.

    Present observations propagate to ancestors and excluded observations
    to descendants of the annotated term, within the configured module root.

    Examples:

        infojenn ic --ontology hp.json --cohort cohort.yaml

        infojenn --config config/default.yaml ic --ontology hp.obo --cohort cohort.json --top 50

        infojenn ic --ontology hp.json --cohort cohort.yaml --module-root HP:0000478
    """
    config_path = ctx.obj['config_path']

    click.echo(click.style("=== Cohort Information Content ===", bold=True))
    click.echo()

    try:
        overrides = {
            "ic.module_root": module_root,
            "ic.unknown_term_policy": unknown_term_policy,
        }
        config, _, cohort, calculator = load_inputs(
            config_path, ontology_path, cohort_path, overrides
        )

        click.echo(f"Computing IC under module root {config.ic.module_root}...")
        container = calculator.compute_ic(cohort)
        click.echo(click.style(f"  IC computed for {len(container)} terms", fg='green'))
        click.echo()

        if container.is_empty():
            click.echo(click.style(
                "No annotation fell within the module root; nothing to report.",
                fg='yellow'
            ))
            return

        column = f"{sort_by}_ic"
        df = container.to_frame().sort([column, "term_id"], descending=[True, False])
        echo_ic_table(df.head(top))

    except Exception as e:
        click.echo(click.style(f"Error: {e}", fg='red'), err=True)
        logger.exception("IC command failed")
        sys.exit(1)


def echo_ic_table(df: pl.DataFrame) -> None:
    """Print term ICs as an aligned text table."""
    click.echo(f"{'Term':<14}{'Present IC':>12}{'Excluded IC':>13}")
    for term_id, present_ic, excluded_ic in df.iter_rows():
        click.echo(f"{term_id:<14}{present_ic:>12.4f}{excluded_ic:>13.4f}")
