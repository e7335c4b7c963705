"""
Tests for the HTTP API, backed by a temporary SQLite database.
"""

import asyncio

import pytest
from fastapi.testclient import TestClient

from underwriting.catalog import seed_products
from underwriting.db.models import Base
from underwriting.db.session import build_engine, build_sessionmaker
from underwriting.main import create_app
from underwriting.repositories.products import save_product
from underwriting.repositories.profiles import create_profile

from conftest import VALID_DRAFTS


async def _seed(url: str) -> None:
    engine = build_engine(url)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    async with build_sessionmaker(engine)() as session:
        for config in seed_products():
            await save_product(session, config)
        await create_profile(
            session, profile_id="agent-001", full_name="Agente Demo", email="agente@example.com", role="agent",
        )
        await create_profile(
            session, profile_id="client-001", full_name="Cliente Demo", email="cliente@example.com",
        )
        await session.commit()
    await engine.dispose()


@pytest.fixture
def client(tmp_path):
    """Test client over a seeded database file."""
    url = f"sqlite+aiosqlite:///{tmp_path / 'underwriting.db'}"
    asyncio.run(_seed(url))
    with TestClient(create_app(url)) as test_client:
        yield test_client


def _body(product_id, as_of="2024-06-01", **overrides):
    return {"product_id": product_id, "draft": {**VALID_DRAFTS[product_id], **overrides}, "as_of": as_of}


class TestHealthEndpoint:

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"


class TestSelectionLists:
    """Products and profiles for the intake form."""

    def test_products(self, client):
        response = client.get("/api/v1/products")
        assert response.status_code == 200
        ids = {p["id"] for p in response.json()}
        assert ids == {p.id for p in seed_products()}

    def test_profiles_by_role(self, client):
        response = client.get("/api/v1/profiles", params={"role": "agent"})
        assert response.status_code == 200
        assert [p["id"] for p in response.json()] == ["agent-001"]

    def test_unknown_role_rejected(self, client):
        response = client.get("/api/v1/profiles", params={"role": "broker"})
        assert response.status_code == 422


class TestEvaluateEndpoint:

    def test_clean_draft(self, client):
        response = client.post("/api/v1/policies/evaluate", json=_body("prod-life-basic"))
        assert response.status_code == 200
        data = response.json()
        assert data == {"premium": 120.0, "violations": [], "passed": True}

    def test_violations_are_returned(self, client):
        response = client.post(
            "/api/v1/policies/evaluate",
            json=_body("prod-add-standalone", coverage_amount=5000, age_at_inscription=18),
        )
        data = response.json()
        assert response.status_code == 200
        assert data["passed"] is False
        assert [(v["field"], v["rule"]) for v in data["violations"]] == [("premium_amount", "premium_floor")]

    def test_single_field(self, client):
        body = {**_body("prod-health-basic", deductible=100, premium_amount=1), "field": "deductible"}
        response = client.post("/api/v1/policies/evaluate", json=body)
        assert [v["rule"] for v in response.json()["violations"]] == ["out_of_range"]

    def test_unknown_product(self, client):
        response = client.post(
            "/api/v1/policies/evaluate",
            json={"product_id": "prod-unknown", "draft": {}},
        )
        assert response.status_code == 404
        assert response.json()["detail"]["product_id"] == "prod-unknown"


class TestBuildEndpoint:

    def test_payload(self, client):
        response = client.post("/api/v1/policies/build", json=_body("prod-health-premier"))
        assert response.status_code == 200
        payload = response.json()["payload"]
        assert payload["premium_amount"] == 500.0
        assert payload["status"] == "pending"
        assert payload["beneficiaries"] is None

    def test_rejected(self, client):
        response = client.post("/api/v1/policies/build", json=_body("prod-health-basic", premium_amount=500))
        assert response.status_code == 422
        violations = response.json()["detail"]["violations"]
        assert [(v["field"], v["rule"]) for v in violations] == [("premium_amount", "out_of_range")]


class TestCreateEndpoint:
    """Persisting re-evaluates on the server."""

    def test_create_and_fetch(self, client):
        body = {"product_id": "prod-life-basic", "draft": VALID_DRAFTS["prod-life-basic"]}
        response = client.post("/api/v1/policies", json=body)
        assert response.status_code == 201
        created = response.json()
        assert created["status"] == "pending"
        assert created["premium_amount"] == 120.0
        assert created["policy_number"].startswith("POL-")

        fetched = client.get(f"/api/v1/policies/{created['id']}")
        assert fetched.status_code == 200
        assert fetched.json()["policy_number"] == created["policy_number"]
        assert fetched.json()["end_date"] == "2025-06-01"

    def test_client_premium_not_trusted(self, client):
        draft = {**VALID_DRAFTS["prod-life-basic"], "premium_amount": 1}
        response = client.post("/api/v1/policies", json={"product_id": "prod-life-basic", "draft": draft})
        assert response.status_code == 422

    def test_missing_policy(self, client):
        response = client.get("/api/v1/policies/00000000-0000-0000-0000-000000000000")
        assert response.status_code == 404
