"""Similarity command: MICA-based similarity of two terms in a cohort."""

import logging
import sys
from pathlib import Path

import click

from infojenn.cli.common import load_inputs
from infojenn.model import IndividualFeature
from infojenn.semsim import IcSimilarityMeasureFactory

logger = logging.getLogger(__name__)


@click.command('similarity')
@click.argument('left')
@click.argument('right')
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
    '--left-excluded',
    is_flag=True,
    help='Treat LEFT as an excluded feature'
)
@click.option(
    '--right-excluded',
    is_flag=True,
    help='Treat RIGHT as an excluded feature'
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
@click.option(
    '--workers',
    type=click.IntRange(min=1),
    default=None,
    help='Override similarity.max_workers'
)
@click.option(
    '--excluded-policy',
    type=click.Choice(['shared_exclusion', 'zero', 'unsupported']),
    default=None,
    help='Override similarity.excluded_policy'
)
@click.pass_context
def similarity(
    ctx, left, right, ontology_path, cohort_path, left_excluded, right_excluded,
    module_root, unknown_term_policy, workers, excluded_policy,
):
    """Compute similarity of two terms (CURIEs) from the cohort's term ICs.

    Precomputes the IC of the most informative common ancestor for all pairs
    of cohort terms, then scores LEFT against RIGHT.

    Examples:

        infojenn similarity HP:0000545 HP:0001083 --ontology hp.json --cohort cohort.yaml

        infojenn similarity HP:0000545 HP:0000541 --left-excluded --right-excluded --excluded-policy zero --ontology hp.json --cohort cohort.yaml
    """
    config_path = ctx.obj['config_path']

    click.echo(click.style("=== Term Similarity ===", bold=True))
    click.echo()

    try:
        left_feature = IndividualFeature.of(left, is_present=not left_excluded)
        right_feature = IndividualFeature.of(right, is_present=not right_excluded)

        overrides = {
            "ic.module_root": module_root,
            "ic.unknown_term_policy": unknown_term_policy,
            "similarity.max_workers": workers,
            "similarity.excluded_policy": excluded_policy,
        }
        config, hierarchy, cohort, calculator = load_inputs(
            config_path, ontology_path, cohort_path, overrides
        )

        click.echo("Precomputing pairwise MICA similarity...")
        factory = IcSimilarityMeasureFactory.from_config(hierarchy, calculator, config.similarity)
        measure = factory.create_measure(cohort)
        click.echo(click.style(f"  {len(measure)} term pairs stored", fg='green'))
        click.echo()

        score = measure.compute(left_feature, right_feature)
        click.echo(f"Similarity({left}, {right}) = {score:.6f}")

    except Exception as e:
        click.echo(click.style(f"Error: {e}", fg='red'), err=True)
        logger.exception("Similarity command failed")
        sys.exit(1)
