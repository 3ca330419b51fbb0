"""Pytest configuration and fixtures."""

from collections.abc import AsyncIterator

import pytest
from httpx import ASGITransport, AsyncClient

from src.config import Settings
from src.formatting import Formatter
from src.main import app
from src.models import Activity, DecisionGate, Deliverable, Risk, Task


@pytest.fixture
def test_settings() -> Settings:
    """Settings with fixed formatting values."""
    return Settings(
        currency_symbol="$",
        currency_decimals=2,
        task_bar_color="#2ECC71",
        deliverable_color="#606C38",
        decision_gate_color="#BC6C25",
        timeline_padding_days=1,
    )


@pytest.fixture
async def client(test_settings: Settings) -> AsyncIterator[AsyncClient]:
    """Create async test client for FastAPI app with a formatter."""
    app.state.formatter = Formatter(test_settings)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    # Clean up app state
    del app.state.formatter


@pytest.fixture
def activities() -> list[Activity]:
    """Two activities: a survey and a build-out."""
    return [
        Activity(id="a1", name="Survey", created_at="2025-01-01T09:00:00Z"),
        Activity(id="a2", name="Construction", created_at="2024-12-15T09:00:00Z"),
    ]


@pytest.fixture
def tasks() -> list[Task]:
    """Tasks across both activities, deliberately out of date order."""
    return [
        Task(
            id="t3",
            activity_id="a2",
            name="Lay foundation",
            start_date="2025-02-01",
            end_date="2025-02-10",
        ),
        Task(
            id="t1",
            activity_id="a1",
            name="Site visit",
            start_date="2025-01-01",
            end_date="2025-01-03",
        ),
        Task(
            id="t2",
            activity_id="a1",
            name="Report",
            start_date="2025-01-04",
            end_date="2025-01-06",
        ),
    ]


@pytest.fixture
def deliverables() -> list[Deliverable]:
    """One deliverable due mid-January."""
    return [Deliverable(id="d1", name="Survey report", deadline="2025-01-15")]


@pytest.fixture
def decision_gates() -> list[DecisionGate]:
    """One decision gate before construction starts."""
    return [
        DecisionGate(id="g1", name="Go / no-go", date_time="2025-01-20T14:00:00"),
    ]


@pytest.fixture
def risks() -> list[Risk]:
    """Risks across tiers, plus one rated off the scale."""
    return [
        Risk(id="r1", name="Supplier delay", impact=4, probability=4),
        Risk(id="r2", name="Rain", impact=3, probability=3),
        Risk(id="r3", name="Staff turnover", impact=2, probability=2),
        Risk(id="r4", name="Permit refused", impact=4, probability=4, status="Mitigated"),
        Risk(id="r5", name="Mis-rated", impact=6, probability=1),
    ]
