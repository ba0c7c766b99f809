from __future__ import annotations

import copy

import pytest
from httpx import ASGITransport, AsyncClient

from docgen.main import app
from docgen.models.document import DocumentStructure


@pytest.fixture(autouse=True)
def _reset_rate_limiter():
    """Clear the in-memory rate limiter between tests to prevent 429s."""
    from docgen.middleware.rate_limit import RateLimitMiddleware

    obj = getattr(app, "middleware_stack", None)
    while obj is not None:
        if isinstance(obj, RateLimitMiddleware):
            obj._requests.clear()
            break
        obj = getattr(obj, "app", None)
    yield


@pytest.fixture
async def client() -> AsyncClient:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


SAMPLE_DOCUMENT = {
    "title": "Sprint 0 Summary",
    "metadata": {
        "project": "Atlas Onboarding",
        "client": "Northwind",
        "version": "1.0",
        "status": "Draft",
    },
    "summary": "Stakeholders agree onboarding is too slow.",
    "sections": [
        {
            "heading": "Findings",
            "summary": "Key themes from interviews.",
            "callout": {"type": "warning", "content": "Two teams disagree on scope."},
            "content": "Interviews covered five departments.",
            "table": {
                "headers": ["Team", "Pain point"],
                "rows": [["Sales", "Slow quotes"], ["Ops", "Manual handoffs"]],
            },
            "items": [
                "Onboarding takes three weeks",
                {
                    "title": "Automate account setup",
                    "description": "Provisioning is manual, error-prone",
                    "priority": "High",
                    "status": "Proposed",
                    "tags": ["automation", "it"],
                    "details": ["Affects every new hire", "Owned by IT"],
                },
            ],
            "subsections": [
                {
                    "title": "Quick wins",
                    "content": "Low effort improvements.",
                    "table": {"headers": ["Item", "Effort"], "rows": [["Checklist", "Low"]]},
                    "items": ["Shared checklist", {"title": "Welcome email", "priority": "Low"}],
                }
            ],
        },
        {"heading": "Next Steps", "content": "Schedule follow-up interviews."},
    ],
    "appendix": [
        {"title": "Interview list", "content": "Twelve stakeholders."},
        {"title": "Glossary", "content": "SLA: service level agreement."},
    ],
    "references": ["Kickoff notes", "HR onboarding policy"],
}


@pytest.fixture
def sample_payload() -> dict:
    return copy.deepcopy(SAMPLE_DOCUMENT)


@pytest.fixture
def sample_document(sample_payload: dict) -> DocumentStructure:
    return DocumentStructure.model_validate(sample_payload)


@pytest.fixture
def minimal_document() -> DocumentStructure:
    return DocumentStructure(title="T")
