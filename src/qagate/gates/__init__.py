"""Quality gates: threshold checks over aggregated metrics."""

from qagate.gates.evaluator import evaluate_gates
from qagate.gates.models import GateCheck, GateName, GateResult, GateStatus, QualityThresholds

__all__ = [
    "GateCheck",
    "GateName",
    "GateResult",
    "GateStatus",
    "QualityThresholds",
    "evaluate_gates",
]
