"""Risk matrix API endpoints."""

from fastapi import APIRouter, Query
from pydantic import BaseModel, Field

from src.models import RecordModel, Risk
from src.risk_matrix import (
    RiskMatrixCell,
    RiskSummary,
    SeverityTier,
    build_risk_matrix,
    classify_severity,
    summarize_risks,
)

router = APIRouter(prefix="/risks", tags=["risks"])


class RiskListRequest(RecordModel):
    """Request body carrying project risks."""

    risks: list[Risk] = Field(default_factory=list)


class RiskMatrixResponse(BaseModel):
    """5x5 matrix, rows from probability 5 down to 1."""

    rows: list[list[RiskMatrixCell]]


class SeverityResponse(BaseModel):
    """Severity of a single rating pair."""

    impact: int
    probability: int
    score: int
    severity: SeverityTier


@router.post("/matrix", response_model=RiskMatrixResponse)
async def risk_matrix(body: RiskListRequest) -> RiskMatrixResponse:
    """Place risks into the probability x impact matrix."""
    return RiskMatrixResponse(rows=build_risk_matrix(body.risks))


@router.post("/summary", response_model=RiskSummary)
async def risk_summary(body: RiskListRequest) -> RiskSummary:
    """Count risks by severity tier and status."""
    return summarize_risks(body.risks)


@router.get("/severity", response_model=SeverityResponse)
async def severity(
    impact: int = Query(..., ge=1, le=5, description="Impact rating"),
    probability: int = Query(..., ge=1, le=5, description="Probability rating"),
) -> SeverityResponse:
    """Classify one impact/probability pair, as used for risk badges."""
    return SeverityResponse(
        impact=impact,
        probability=probability,
        score=impact * probability,
        severity=classify_severity(impact, probability),
    )
