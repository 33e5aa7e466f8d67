"""Configuration for a metrics run.

Loaded from the ``[tool.qagate]`` table of the project's pyproject.toml
(or an explicit TOML file). Every value has a default, so a project with
no configuration gets the standard thresholds and artifact layout.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import BaseModel, ConfigDict

from qagate.gates.models import QualityThresholds
from qagate.results.readers import ArtifactPaths


class QAGateConfig(BaseModel):
    """Thresholds, artifact locations and output directory."""

    thresholds: QualityThresholds = QualityThresholds()
    artifacts: ArtifactPaths = ArtifactPaths()
    results_dir: Path = Path("test-results")

    model_config = ConfigDict(frozen=True)

    def with_overrides(
        self,
        coverage: float | None = None,
        pass_rate: float | None = None,
        max_duration_ms: float | None = None,
        results_dir: Path | None = None,
    ) -> QAGateConfig:
        """Return a copy with the given values replaced (None keeps the current value)."""
        threshold_updates = {
            key: value
            for key, value in {
                "coverage": coverage,
                "pass_rate": pass_rate,
                "max_duration_ms": max_duration_ms,
            }.items()
            if value is not None
        }
        thresholds = QualityThresholds.model_validate(
            self.thresholds.model_dump() | threshold_updates
        )
        return QAGateConfig(
            thresholds=thresholds,
            artifacts=self.artifacts,
            results_dir=results_dir if results_dir is not None else self.results_dir,
        )


def _read_table(path: Path, nested: bool) -> dict[str, Any] | None:
    """Read the qagate table from a TOML file.

    Args:
        path: TOML file
        nested: True for pyproject.toml ([tool.qagate]), False for a
            dedicated file whose top level is the table

    Returns:
        The table, or None if the file does not exist

    Raises:
        ValueError: If the file cannot be read or is not valid TOML
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as e:
        msg = f"Could not read config file {path}: {e}"
        raise ValueError(msg) from e
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {path}: {e}"
        raise ValueError(msg) from e

    if not nested:
        return data
    tool = data.get("tool", {})
    if not isinstance(tool, dict):
        msg = f"[tool] in {path} must be a table"
        raise ValueError(msg)
    table = tool.get("qagate", {})
    if not isinstance(table, dict):
        msg = f"[tool.qagate] in {path} must be a table"
        raise ValueError(msg)
    return table


def load_config(project_root: Path, config_file: Path | None = None) -> QAGateConfig:
    """Load configuration for a project.

    Args:
        project_root: Root directory of the project
        config_file: Optional dedicated TOML file; defaults to the
            [tool.qagate] table of project_root/pyproject.toml

    Returns:
        QAGateConfig (defaults when nothing is configured)

    Raises:
        ValueError: If the configuration file is missing, unreadable,
            malformed or invalid
    """
    if config_file is not None:
        table = _read_table(config_file, nested=False)
        if table is None:
            msg = f"Config file does not exist: {config_file}"
            raise ValueError(msg)
    else:
        table = _read_table(project_root / "pyproject.toml", nested=True)
        if table is None:
            return QAGateConfig()

    if table:
        logger.debug(f"Loaded qagate config keys: {sorted(table)}")
    return QAGateConfig.model_validate(table)
