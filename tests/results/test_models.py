"""Tests for normalized result models."""

import pytest
from pydantic import ValidationError

from qagate.results.models import (
    Category,
    Counts,
    Defect,
    Layer,
    LayerResults,
    NormalizedResult,
    Severity,
)


class TestCounts:
    """Test Counts model and reconciliation."""

    def test_defaults_are_zero(self) -> None:
        counts = Counts()
        assert (counts.passed, counts.failed, counts.total) == (0, 0, 0)

    def test_inconsistent_total_rejected(self) -> None:
        """total must equal passed + failed."""
        with pytest.raises(ValidationError):
            Counts(passed=3, failed=1, total=5)

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Counts(passed=-1, failed=1, total=0)

    @pytest.mark.parametrize(("passed", "failed"), [(0, 0), (16, 0), (7, 3), (0, 4)])
    def test_reconcile_all_reported(self, passed: int, failed: int) -> None:
        """Reported pass/fail/tests are kept as-is when consistent."""
        counts = Counts.reconcile(passed=passed, failed=failed, total=passed + failed)
        assert counts == Counts(passed=passed, failed=failed, total=passed + failed)

    def test_reconcile_prefers_pass_fail_over_total(self) -> None:
        """Skipped tests in the reported total do not break the invariant."""
        counts = Counts.reconcile(passed=15, failed=0, total=16)
        assert counts.total == 15

    def test_reconcile_passed_and_total(self) -> None:
        assert Counts.reconcile(passed=8, total=10) == Counts(passed=8, failed=2, total=10)

    def test_reconcile_failed_and_total(self) -> None:
        assert Counts.reconcile(failed=2, total=10) == Counts(passed=8, failed=2, total=10)

    def test_reconcile_only_total(self) -> None:
        assert Counts.reconcile(total=4) == Counts(passed=4, failed=0, total=4)

    def test_reconcile_only_failed(self) -> None:
        assert Counts.reconcile(failed=2) == Counts(passed=0, failed=2, total=2)

    def test_reconcile_nothing(self) -> None:
        assert Counts.reconcile() == Counts()

    def test_reconcile_failed_exceeds_total(self) -> None:
        """Never produces negative counts."""
        counts = Counts.reconcile(failed=5, total=3)
        assert counts.passed == 0
        assert counts.total == counts.passed + counts.failed

    def test_pass_rate(self) -> None:
        assert Counts(passed=3, failed=1, total=4).pass_rate == 75.0
        assert Counts().pass_rate == 0.0


class TestDefect:
    """Test Defect model."""

    def test_creation(self) -> None:
        defect = Defect(
            type="UI Test Failure",
            name="logs in",
            severity=Severity.CRITICAL,
            category=Category.UI,
            details="TimeoutError",
        )
        assert defect.severity == Severity.CRITICAL
        assert defect.category == "UI"

    def test_is_immutable(self) -> None:
        defect = Defect(type="t", name="n", severity=Severity.LOW, category="Other")
        with pytest.raises(ValidationError):
            defect.name = "changed"  # type: ignore[misc]

    def test_details_optional(self) -> None:
        defect = Defect(type="t", name="n", severity=Severity.HIGH, category=Category.API)
        assert defect.details is None


class TestNormalizedResult:
    """Test NormalizedResult model."""

    def test_defaults(self) -> None:
        result = NormalizedResult(layer=Layer.UI)
        assert result.counts == Counts()
        assert result.duration_ms == 0.0
        assert result.coverage_percent is None
        assert result.defects == ()

    def test_coverage_out_of_range_rejected(self) -> None:
        with pytest.raises(ValidationError):
            NormalizedResult(layer=Layer.UNIT, coverage_percent=101.0)

    def test_negative_duration_rejected(self) -> None:
        with pytest.raises(ValidationError):
            NormalizedResult(layer=Layer.UNIT, duration_ms=-1)


class TestLayerResults:
    """Test LayerResults container."""

    def test_present_is_in_layer_order(self) -> None:
        results = LayerResults(
            ui=NormalizedResult(layer=Layer.UI),
            unit=NormalizedResult(layer=Layer.UNIT),
        )
        assert [r.layer for r in results.present()] == [Layer.UNIT, Layer.UI]

    def test_get(self) -> None:
        bdd = NormalizedResult(layer=Layer.BDD)
        results = LayerResults(bdd=bdd)
        assert results.get(Layer.BDD) is bdd
        assert results.get(Layer.API) is None

    def test_empty(self) -> None:
        assert LayerResults().present() == []

    def test_layer_labels(self) -> None:
        assert Layer.UNIT.label == "Unit Tests"
        assert Layer.API.label == "API Assertions"
