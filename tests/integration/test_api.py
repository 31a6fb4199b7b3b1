"""
Integration Tests for FastAPI Backend

Tests for API endpoints: health checks, calculator catalog and invocation,
audit trail.
Uses async httpx for ASGI app testing.
"""
import pytest
import httpx

from medcalc.main import app, _audit_log


@pytest.fixture
async def async_client():
    """Create async test client."""
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://test"
    ) as client:
        yield client


@pytest.fixture(autouse=True)
def empty_audit_log():
    """The application audit log is process-wide; start every test empty."""
    _audit_log.clear()
    yield
    _audit_log.clear()


@pytest.mark.asyncio
class TestHealthEndpoints:
    """Tests for health check endpoints."""

    async def test_root_endpoint(self, async_client):
        """Test root endpoint returns health info."""
        response = await async_client.get("/")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "healthy"
        assert "version" in data
        assert data["calculators"] == 19

    async def test_health_endpoint(self, async_client):
        response = await async_client.get("/health")
        assert response.status_code == 200
        assert response.json()["uptime_seconds"] >= 0


@pytest.mark.asyncio
class TestCalculatorEndpoints:
    """Tests for calculator catalog and invocation."""

    async def test_list_calculators(self, async_client):
        response = await async_client.get("/api/v1/calculators")
        assert response.status_code == 200

        data = response.json()
        assert data["count"] == 19
        keys = [c["calculator_type"] for c in data["calculators"]]
        assert "bmi" in keys
        assert "parkland-formula" in keys

    async def test_run_bmi(self, async_client):
        response = await async_client.post(
            "/api/v1/calculators/bmi",
            json={"parameters": {"weight": 70, "height": 175}},
        )
        assert response.status_code == 200

        data = response.json()
        assert data["calculator_type"] == "bmi"
        assert data["result"]["value"] == 22.9
        assert data["result"]["interpretation"] == "Normal weight"
        assert "FOR EDUCATIONAL USE ONLY" in data["formatted_output"]

    async def test_critical_advisory_is_not_an_error(self, async_client):
        response = await async_client.post(
            "/api/v1/calculators/qtc-correction",
            json={"parameters": {"qt": 450, "heartRate": 80}},
        )
        assert response.status_code == 200

        result = response.json()["result"]
        assert result["value"] == 520
        assert any(w["level"] == "error" for w in result["warnings"])

    async def test_unknown_calculator(self, async_client):
        response = await async_client.post(
            "/api/v1/calculators/apache-ii",
            json={"parameters": {"age": 50}},
        )
        assert response.status_code == 404
        assert response.json()["error"] == "UNKNOWN_CALCULATOR"

    async def test_validation_error(self, async_client):
        response = await async_client.post(
            "/api/v1/calculators/bmi",
            json={"parameters": {"weight": -70, "height": 175}},
        )
        assert response.status_code == 422

        data = response.json()
        assert data["error"] == "VALIDATION_ERROR"
        assert data["message"].startswith("Validation errors:")

    async def test_missing_parameter(self, async_client):
        response = await async_client.post(
            "/api/v1/calculators/bmi",
            json={"parameters": {"weight": 70}},
        )
        assert response.status_code == 422
        assert response.json()["error"] == "MISSING_PARAMETER"

    async def test_domain_error(self, async_client):
        response = await async_client.post(
            "/api/v1/calculators/ibw",
            json={"parameters": {"height": 150}},
        )
        assert response.status_code == 422
        assert response.json()["error"] == "DOMAIN_ERROR"


@pytest.mark.asyncio
class TestAuditEndpoints:
    """Tests for audit trail inspection."""

    async def test_invocations_recorded(self, async_client):
        await async_client.post(
            "/api/v1/calculators/bmi",
            json={"parameters": {"weight": 70, "height": 175, "patientId": "P-1"},
                  "session_id": "session-1"},
        )
        await async_client.post("/api/v1/calculators/apache-ii", json={"parameters": {}})

        response = await async_client.get("/api/v1/audit")
        assert response.status_code == 200

        data = response.json()
        assert data["count"] == 2
        first, second = data["entries"]
        assert first["session_id"] == "session-1"
        assert "patientId" not in first["inputs"]
        assert first["error"] is None
        assert second["error"] == "Unknown calculator type: apache-ii"

    async def test_limit(self, async_client):
        for weight in (60, 70, 80):
            await async_client.post(
                "/api/v1/calculators/bmi",
                json={"parameters": {"weight": weight, "height": 175}},
            )
        response = await async_client.get("/api/v1/audit", params={"limit": 1})
        entries = response.json()["entries"]
        assert [e["inputs"]["weight"] for e in entries] == [80]

    async def test_clear(self, async_client):
        await async_client.post(
            "/api/v1/calculators/gcs-typo", json={"parameters": {}}
        )
        response = await async_client.delete("/api/v1/audit")
        assert response.status_code == 200
        assert response.json() == {"cleared": 1}

        response = await async_client.get("/api/v1/audit")
        assert response.json()["count"] == 0
