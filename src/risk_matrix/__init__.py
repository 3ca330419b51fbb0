"""Risk matrix module.

Provides severity classification, the 5x5 probability x impact grid,
and per-tier risk summaries.
"""

from src.risk_matrix.classifier import (
    build_risk_matrix,
    classify_severity,
    is_rated,
    summarize_risks,
)
from src.risk_matrix.schemas import (
    HIGH_THRESHOLD,
    MEDIUM_THRESHOLD,
    RATING_SCALE,
    RiskMatrixCell,
    RiskSummary,
    SeverityTier,
)

__all__ = [
    "HIGH_THRESHOLD",
    "MEDIUM_THRESHOLD",
    "RATING_SCALE",
    "RiskMatrixCell",
    "RiskSummary",
    "SeverityTier",
    "build_risk_matrix",
    "classify_severity",
    "is_rated",
    "summarize_risks",
]
