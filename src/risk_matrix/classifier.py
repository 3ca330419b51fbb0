"""Risk matrix classification.

Buckets risks into a fixed 5x5 probability x impact grid and derives a
severity tier from the product of the two ratings. Risks with missing
or out-of-range ratings fall into no cell; nothing here raises for
malformed risk data.
"""

from collections import Counter
from collections.abc import Sequence

import structlog

from src.models import Risk
from src.risk_matrix.schemas import (
    HIGH_THRESHOLD,
    MEDIUM_THRESHOLD,
    RATING_SCALE,
    RiskMatrixCell,
    RiskSummary,
    SeverityTier,
)

logger = structlog.get_logger()


def classify_severity(impact: int, probability: int) -> SeverityTier:
    """Classify a rating pair into a severity tier.

    Scores 16-25 are High, 9-15 Medium, anything lower Low.

    Examples:
        >>> classify_severity(4, 4)
        <SeverityTier.HIGH: 'High'>
        >>> classify_severity(2, 2)
        <SeverityTier.LOW: 'Low'>
    """
    score = impact * probability
    if score >= HIGH_THRESHOLD:
        return SeverityTier.HIGH
    if score >= MEDIUM_THRESHOLD:
        return SeverityTier.MEDIUM
    return SeverityTier.LOW


def is_rated(risk: Risk) -> bool:
    """Check whether both ratings fall on the 1-5 scale."""
    return risk.impact in RATING_SCALE and risk.probability in RATING_SCALE


def build_risk_matrix(risks: Sequence[Risk]) -> list[list[RiskMatrixCell]]:
    """Partition risks into the 5x5 matrix.

    Rows run probability 5 down to 1 and columns impact 1 up to 5, the
    order the grid is displayed in. All 25 cells are always present.

    Args:
        risks: Risks to place

    Returns:
        Rows of cells; non-empty cells carry their severity tier
    """
    matrix: list[list[RiskMatrixCell]] = []
    for probability in reversed(RATING_SCALE):
        row: list[RiskMatrixCell] = []
        for impact in RATING_SCALE:
            cell_risks = [
                risk
                for risk in risks
                if risk.probability == probability and risk.impact == impact
            ]
            row.append(
                RiskMatrixCell(
                    probability=probability,
                    impact=impact,
                    risks=cell_risks,
                    severity=classify_severity(impact, probability) if cell_risks else None,
                )
            )
        matrix.append(row)

    unrated = sum(1 for risk in risks if not is_rated(risk))
    if unrated:
        logger.debug("risks outside matrix", unrated=unrated, total=len(risks))
    return matrix


def summarize_risks(risks: Sequence[Risk]) -> RiskSummary:
    """Count risks per severity tier and per status.

    Severity counts cover rated risks only; every tier key is present.
    """
    rated = [risk for risk in risks if is_rated(risk)]
    severity_counts = Counter(
        classify_severity(risk.impact, risk.probability).value for risk in rated
    )
    status_counts = Counter(risk.status.value for risk in risks)

    return RiskSummary(
        total=len(risks),
        rated=len(rated),
        unrated=len(risks) - len(rated),
        by_severity={tier.value: severity_counts.get(tier.value, 0) for tier in SeverityTier},
        by_status=dict(status_counts),
    )
