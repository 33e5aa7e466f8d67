"""Raw artifact loading and normalized result models."""

from qagate.results.models import (
    Category,
    Counts,
    Defect,
    Layer,
    LayerResults,
    NormalizedResult,
    Severity,
)
from qagate.results.readers import (
    ArtifactPaths,
    RawArtifacts,
    load_artifacts,
    read_json_artifact,
    read_text_artifact,
)

__all__ = [
    "ArtifactPaths",
    "Category",
    "Counts",
    "Defect",
    "Layer",
    "LayerResults",
    "NormalizedResult",
    "RawArtifacts",
    "Severity",
    "load_artifacts",
    "read_json_artifact",
    "read_text_artifact",
]
