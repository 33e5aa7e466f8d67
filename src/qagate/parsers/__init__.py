"""Format parsers: one per test layer."""

from qagate.parsers.api import parse_api
from qagate.parsers.bdd import parse_bdd
from qagate.parsers.ui import parse_ui
from qagate.parsers.unit import parse_unit
from qagate.results.models import LayerResults
from qagate.results.readers import RawArtifacts


def parse_artifacts(artifacts: RawArtifacts) -> LayerResults:
    """Parse every layer's raw artifacts into normalized results."""
    return LayerResults(
        unit=parse_unit(artifacts.unit, artifacts.lcov),
        bdd=parse_bdd(artifacts.bdd),
        api=parse_api(artifacts.api, artifacts.api_json),
        ui=parse_ui(artifacts.ui),
    )


__all__ = ["parse_api", "parse_artifacts", "parse_bdd", "parse_ui", "parse_unit"]
