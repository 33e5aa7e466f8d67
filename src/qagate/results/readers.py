"""Artifact readers: load raw test-run outputs from disk.

Readers never raise: a missing, unreadable or malformed artifact is
returned as None so the pipeline can run with any subset of layers.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import BaseModel, ConfigDict


class ArtifactPaths(BaseModel):
    """Locations of the raw test-run artifacts.

    Relative paths are resolved against the project root.
    """

    unit: Path = Path("backend/unit-test-results.txt")
    lcov: Path = Path("backend/coverage/lcov.info")
    coverage_html: Path = Path("backend/coverage/lcov-report/index.html")
    bdd: Path = Path("backend/bdd-test-results.txt")
    api: Path = Path("backend/api-test-results.txt")
    api_json: Path = Path("backend/api-test-results.json")
    ui: Path = Path("ui-tests/ui-test-results.txt")

    model_config = ConfigDict(frozen=True)

    def resolve(self, project_root: Path) -> ArtifactPaths:
        """Return a copy with every path anchored at project_root."""
        return ArtifactPaths(
            **{name: project_root / path for name, path in self.model_dump().items()}
        )


class RawArtifacts(BaseModel):
    """Raw artifact contents; None marks an absent artifact."""

    unit: str | None = None
    lcov: str | None = None
    bdd: str | None = None
    api: str | None = None
    api_json: dict[str, Any] | None = None
    ui: str | None = None

    model_config = ConfigDict(frozen=True)


def read_text_artifact(path: Path) -> str | None:
    """Read a text artifact.

    Args:
        path: File to read

    Returns:
        File contents, or None if the file is missing, empty or unreadable
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (FileNotFoundError, NotADirectoryError):
        logger.debug(f"Artifact not found: {path}")
        return None
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Error reading {path}: {e}")
        return None

    if not content:
        logger.debug(f"Artifact is empty: {path}")
        return None
    return content


def read_json_artifact(path: Path) -> dict[str, Any] | None:
    """Read and parse a JSON object artifact.

    Args:
        path: File to read

    Returns:
        Parsed JSON object, or None if absent or not a valid JSON object
    """
    content = read_text_artifact(path)
    if content is None:
        return None

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        logger.warning(f"Error parsing JSON from {path}: {e}")
        return None

    if not isinstance(data, dict):
        logger.warning(f"Expected a JSON object in {path}, got {type(data).__name__}")
        return None
    return data


def load_artifacts(paths: ArtifactPaths, project_root: Path) -> RawArtifacts:
    """Load every known artifact for one run.

    Args:
        paths: Artifact locations (relative paths resolve against project_root)
        project_root: Root directory of the project under test

    Returns:
        RawArtifacts with None for each artifact that could not be loaded
    """
    resolved = paths.resolve(project_root)
    return RawArtifacts(
        unit=read_text_artifact(resolved.unit),
        lcov=read_text_artifact(resolved.lcov),
        bdd=read_text_artifact(resolved.bdd),
        api=read_text_artifact(resolved.api),
        api_json=read_json_artifact(resolved.api_json),
        ui=read_text_artifact(resolved.ui),
    )
