"""Normalized test result models.

Every test layer's raw output is reduced to a NormalizedResult so the
aggregator never needs to know which tool produced it.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Layer(StrEnum):
    """Test layers, in aggregation order."""

    UNIT = "unit"
    BDD = "bdd"
    API = "api"
    UI = "ui"

    @property
    def label(self) -> str:
        """Human-readable layer name."""
        return _LAYER_LABELS[self]


_LAYER_LABELS = {
    Layer.UNIT: "Unit Tests",
    Layer.BDD: "BDD Scenarios",
    Layer.API: "API Assertions",
    Layer.UI: "UI Tests",
}


class Severity(StrEnum):
    """Defect severity."""

    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class Category(StrEnum):
    """Known defect categories."""

    FUNCTIONAL = "Functional"
    INTEGRATION = "Integration"
    API = "API"
    UI = "UI"


class Counts(BaseModel):
    """Passed/failed/total test counts.

    Invariant: total == passed + failed.
    """

    passed: int = Field(default=0, ge=0)
    failed: int = Field(default=0, ge=0)
    total: int = Field(default=0, ge=0)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_total(self) -> Counts:
        if self.total != self.passed + self.failed:
            msg = f"total ({self.total}) must equal passed + failed ({self.passed + self.failed})"
            raise ValueError(msg)
        return self

    @classmethod
    def reconcile(
        cls,
        passed: int | None = None,
        failed: int | None = None,
        total: int | None = None,
    ) -> Counts:
        """Build consistent counts from whichever fields a report carried.

        Args:
            passed: Reported passed count, if found
            failed: Reported failed count, if found
            total: Reported total count, if found

        Returns:
            Counts with total == passed + failed
        """
        if passed is not None and failed is not None:
            return cls(passed=passed, failed=failed, total=passed + failed)
        if passed is not None and total is not None:
            failed = max(total - passed, 0)
            return cls(passed=passed, failed=failed, total=passed + failed)
        if failed is not None and total is not None:
            passed = max(total - failed, 0)
            return cls(passed=passed, failed=failed, total=passed + failed)
        if total is not None:
            return cls(passed=total, failed=0, total=total)
        passed = passed or 0
        failed = failed or 0
        return cls(passed=passed, failed=failed, total=passed + failed)

    @property
    def pass_rate(self) -> float:
        """Percentage of passing tests, 0.0 when there are none."""
        if self.total == 0:
            return 0.0
        return self.passed / self.total * 100


class Defect(BaseModel):
    """A single failing test or assertion extracted from a raw report.

    Category is a free label; only the four Category values are tallied.
    """

    type: str
    name: str
    severity: Severity
    category: str
    details: str | None = None

    model_config = ConfigDict(frozen=True)


class NormalizedResult(BaseModel):
    """Results of one test layer in a tool-independent shape."""

    layer: Layer
    counts: Counts = Counts()
    duration_ms: float = Field(default=0.0, ge=0)
    coverage_percent: float | None = Field(default=None, ge=0, le=100)
    defects: tuple[Defect, ...] = ()
    steps: Counts | None = None
    requests: Counts | None = None
    coverage_details: str | None = None
    source: str | None = None

    model_config = ConfigDict(frozen=True)


class LayerResults(BaseModel):
    """The four optional layer results of one run."""

    unit: NormalizedResult | None = None
    bdd: NormalizedResult | None = None
    api: NormalizedResult | None = None
    ui: NormalizedResult | None = None

    model_config = ConfigDict(frozen=True)

    def get(self, layer: Layer) -> NormalizedResult | None:
        """Get the result for a layer, or None if it did not run."""
        result: NormalizedResult | None = getattr(self, layer.value)
        return result

    def present(self) -> list[NormalizedResult]:
        """Present results in fixed layer order (Unit, BDD, API, UI)."""
        return [r for layer in Layer if (r := self.get(layer)) is not None]
