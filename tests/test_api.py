"""
Tests for the calculation API endpoints.
"""

import pytest
from fastapi.testclient import TestClient

from rent_vs_invest.config import Settings, get_settings
from rent_vs_invest.main import app


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def strict_client(client):
    """Client with strict assumption validation enabled."""
    app.dependency_overrides[get_settings] = lambda: Settings(strict_validation=True)
    yield client
    app.dependency_overrides.pop(get_settings, None)


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestDefaultsAPI:
    """Test the defaults endpoint."""

    def test_defaults_use_camel_case(self, client):
        response = client.get("/api/calculate/defaults")
        assert response.status_code == 200
        data = response.json()
        assert data["purchasePrice"] == 450000
        assert data["interestRate"] == 3.25
        assert data["isARM"] is False
        assert len(data) == 24


class TestFinancialsAPI:
    """Test the financials endpoint."""

    def test_empty_body_uses_defaults(self, client):
        response = client.post("/api/calculate/financials", json={})
        assert response.status_code == 200
        data = response.json()
        results = data["results"]
        assert results["loan_amount"] == pytest.approx(360000)
        assert results["net_proceeds"] == pytest.approx(128800)
        assert results["rental_roe"] == pytest.approx(14.02795, abs=1e-4)
        assert results["stock_roe"] == 8
        assert results["bond_roe"] == 4.5
        assert data["warnings"] == []

    def test_formatted_values(self, client):
        data = client.post("/api/calculate/financials", json={}).json()
        formatted = data["formatted"]
        assert formatted["monthly_cash_flow"] == "$47"
        assert formatted["net_proceeds"] == "$128,800"
        assert formatted["rental_roe"] == "14.03%"
        assert formatted["stock_roe"] == "8.00%"
        assert formatted["leverage_ratio"] == "4.0x"

    def test_camel_and_snake_keys_agree(self, client):
        camel = client.post("/api/calculate/financials", json={"monthlyRent": 4000})
        snake = client.post("/api/calculate/financials", json={"monthly_rent": 4000})
        assert camel.status_code == 200
        assert camel.json()["results"] == snake.json()["results"]
        assert camel.json()["results"]["monthly_cash_flow"] > 47

    def test_non_numeric_rejected(self, client):
        response = client.post(
            "/api/calculate/financials", json={"monthlyRent": "lots"}
        )
        assert response.status_code == 422

    def test_lenient_mode_warns(self, client):
        response = client.post("/api/calculate/financials", json={"vacancyRate": 150})
        assert response.status_code == 200
        assert "vacancy_rate must be between 0 and 100" in response.json()["warnings"]

    def test_strict_mode_rejects(self, strict_client):
        response = strict_client.post(
            "/api/calculate/financials", json={"vacancyRate": 150, "loanTermYears": 0}
        )
        assert response.status_code == 422
        problems = response.json()["detail"]["problems"]
        assert "vacancy_rate must be between 0 and 100" in problems
        assert "loan_term_years must be positive" in problems

    def test_strict_mode_accepts_valid(self, strict_client):
        response = strict_client.post("/api/calculate/financials", json={})
        assert response.status_code == 200

    def test_zero_net_proceeds_flagged(self, client):
        response = client.post(
            "/api/calculate/financials",
            json={"downPaymentPercent": 0, "marketValue": 400000},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["results"]["net_proceeds"] == 0
        assert data["results"]["roe_denominator_guarded"] is True
        assert any("Net proceeds are zero" in w for w in data["warnings"])


class TestCompareAPI:
    """Test the comparison endpoint."""

    def test_compare_stocks(self, client):
        response = client.post("/api/calculate/compare?mode=stock", json={})
        assert response.status_code == 200
        data = response.json()
        assert data["mode"] == "stock"
        assert data["alternative"]["cash_income"] == pytest.approx(1932.0)
        assert data["rental"]["mode"] == "rent"
        assert data["rental_wins"] is True
        assert data["ranking"] == ["rent", "stock", "bond"]

    def test_compare_defaults_to_stocks(self, client):
        data = client.post("/api/calculate/compare", json={}).json()
        assert data["mode"] == "stock"

    def test_compare_bonds(self, client):
        data = client.post("/api/calculate/compare?mode=bond", json={}).json()
        assert data["alternative"]["annual_return"] == pytest.approx(5796.0)
        assert data["alternative"]["growth"] == 0

    def test_compare_rent_rejected(self, client):
        response = client.post("/api/calculate/compare?mode=rent", json={})
        assert response.status_code == 400

    def test_compare_unknown_mode(self, client):
        response = client.post("/api/calculate/compare?mode=crypto", json={})
        assert response.status_code == 422


class TestRateLockAPI:
    """Test the rate lock endpoint."""

    def test_rate_lock_defaults(self, client):
        response = client.post("/api/calculate/rate-lock", json={})
        assert response.status_code == 200
        data = response.json()
        assert data["rate_lock"]["market_rate"] == 7.12
        assert data["rate_lock"]["monthly_savings"] == pytest.approx(857.43, abs=0.01)
        assert data["arm_warning"] is None

    def test_rate_lock_custom_market_rate(self, client):
        data = client.post(
            "/api/calculate/rate-lock?market_rate=3.25", json={}
        ).json()
        assert data["rate_lock"]["monthly_savings"] == pytest.approx(0)

    def test_rate_lock_returns_warnings(self, client):
        response = client.post("/api/calculate/rate-lock", json={"vacancyRate": 150})
        assert response.status_code == 200
        assert "vacancy_rate must be between 0 and 100" in response.json()["warnings"]

    def test_rate_lock_no_warnings_for_defaults(self, client):
        data = client.post("/api/calculate/rate-lock", json={}).json()
        assert data["warnings"] == []

    def test_arm_warning(self, client):
        data = client.post("/api/calculate/rate-lock", json={"isARM": True}).json()
        assert data["arm_warning"]["fully_indexed_rate"] == pytest.approx(6.75)
