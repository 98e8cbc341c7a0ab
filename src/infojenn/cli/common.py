"""Loading helpers shared by CLI commands."""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import click

from infojenn.config import InfojennConfig, apply_overrides, load_config
from infojenn.ic import CohortIcCalculator
from infojenn.io import load_cohort
from infojenn.model import SubjectCohort
from infojenn.ontology import Hierarchy, load_hierarchy


def load_cli_config(
    config_path: Path | None,
    overrides: Mapping[str, Any] | None = None,
) -> InfojennConfig:
    """Load the config given on the command line (or the defaults) and apply option overrides."""
    config = InfojennConfig() if config_path is None else load_config(config_path)
    if overrides:
        config = apply_overrides(config, overrides)
    return config


def load_inputs(
    config_path: Path | None,
    ontology_path: Path,
    cohort_path: Path,
    overrides: Mapping[str, Any] | None = None,
) -> tuple[InfojennConfig, Hierarchy, SubjectCohort, CohortIcCalculator]:
    """Load config, ontology and cohort, echoing progress, and build the IC calculator."""
    click.echo("Loading configuration...")
    config = load_cli_config(config_path, overrides)
    click.echo(click.style(f"  Config loaded: {config_path or '(defaults)'}", fg='green'))
    applied = {key: value for key, value in (overrides or {}).items() if value is not None}
    for key, value in applied.items():
        click.echo(f"  Override: {key} = {value}")

    click.echo("Loading ontology...")
    hierarchy = load_hierarchy(ontology_path)
    click.echo(click.style(f"  Ontology loaded: {ontology_path}", fg='green'))

    click.echo("Loading cohort...")
    cohort = load_cohort(cohort_path)
    click.echo(click.style(f"  Cohort loaded: {len(cohort)} subjects", fg='green'))
    click.echo()

    calculator = CohortIcCalculator.from_config(hierarchy, config.ic)
    return config, hierarchy, cohort, calculator
