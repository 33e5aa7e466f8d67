"""Quality gate models."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

PASSING_HEALTH_SCORE = 98
HEALTH_POINTS_PER_GATE = 20


class GateName(StrEnum):
    """Quality gates, in evaluation order."""

    COVERAGE = "coverage"
    PASS_RATE = "pass_rate"
    DURATION = "duration"
    DEFECTS = "defects"


class GateStatus(StrEnum):
    """Verdict of a single gate or of the whole run."""

    PASS = "pass"
    FAIL = "fail"
    WARN = "warn"

    @property
    def icon(self) -> str:
        """Status glyph used in reports."""
        return {"pass": "✅", "fail": "❌", "warn": "⚠️"}[self.value]


class QualityThresholds(BaseModel):
    """Configured gate thresholds."""

    coverage: float = Field(default=75.0, ge=0, le=100)
    pass_rate: float = Field(default=95.0, ge=0, le=100)
    max_duration_ms: float = Field(default=300_000, ge=0)

    model_config = ConfigDict(frozen=True)


class GateCheck(BaseModel):
    """Result of evaluating one gate."""

    gate: GateName
    status: GateStatus
    threshold: float
    actual: float

    model_config = ConfigDict(frozen=True)


class GateResult(BaseModel):
    """Verdicts for every gate plus the overall verdict and health score.

    Overall status is pass only when every gate passes; a warning counts
    against both the overall status and the health score.
    """

    checks: list[GateCheck]
    status: GateStatus
    health_score: int = Field(ge=0, le=100)

    model_config = ConfigDict(frozen=True)

    @property
    def passed(self) -> bool:
        """True when every gate passed."""
        return self.status == GateStatus.PASS

    @property
    def exit_code(self) -> int:
        """Process exit code: 0 when every gate passed, 1 otherwise."""
        return 0 if self.passed else 1

    @property
    def passed_checks(self) -> list[GateCheck]:
        """Get list of gates that passed."""
        return [c for c in self.checks if c.status == GateStatus.PASS]

    @property
    def failed_checks(self) -> list[GateCheck]:
        """Get list of gates that failed hard."""
        return [c for c in self.checks if c.status == GateStatus.FAIL]

    @property
    def warned_checks(self) -> list[GateCheck]:
        """Get list of gates that produced a warning."""
        return [c for c in self.checks if c.status == GateStatus.WARN]

    def check(self, gate: GateName) -> GateCheck:
        """Get the check for a gate.

        Raises:
            KeyError: If the gate was not evaluated
        """
        for c in self.checks:
            if c.gate == gate:
                return c
        raise KeyError(gate)
