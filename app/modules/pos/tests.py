"""
Tests para el módulo POS

- Tasa BCV (lectura, valor por defecto y validación)
- Cierre de caja diario (totales congelados, un cierre por día y sede)
"""

from datetime import date

import pytest

from app.core.config import settings


@pytest.fixture
def paid_ticket(client, locations):
    params = {"location": "MAGALLANES"}
    barber = client.post("/api/v1/staff/", params=params, json={"name": "Luis"}).json()
    service = client.post("/api/v1/catalog/services", params=params,
                          json={"name": "Corte", "price": 10.0, "category": "barberia"}).json()
    ticket = client.post("/api/v1/sales/tickets", params=params, json={
        "customer_name": "Carlos", "barber_id": barber["id"],
        "items": [{"item_id": service["id"], "type": "service"}]
    }).json()
    return client.post(f"/api/v1/sales/tickets/{ticket['id']}/pay", params=params,
                       json={"payment_method": "Efectivo BS"}).json()


class TestBcvRate:
    """Tests para la tasa BCV"""

    def test_default_rate(self, client, locations):
        response = client.get("/api/v1/settings/bcv-rate")
        assert response.status_code == 200
        assert response.json()["bcv_rate"] == settings.DEFAULT_BCV_RATE

    def test_update_rate(self, client, locations):
        response = client.put("/api/v1/settings/bcv-rate", json={"bcv_rate": 40.25})
        assert response.status_code == 200
        assert client.get("/api/v1/settings/bcv-rate").json()["bcv_rate"] == 40.25

    @pytest.mark.parametrize("rate", [0, -5])
    def test_invalid_rate(self, client, locations, rate):
        response = client.put("/api/v1/settings/bcv-rate", json={"bcv_rate": rate})
        assert response.status_code == 422
        assert response.json()["detail"] == "Ingrese una tasa válida"


class TestDailyClose:
    """Tests para el cierre de caja"""

    def test_close_day_snapshots_totals(self, client, paid_ticket):
        params = {"location": "MAGALLANES"}
        client.put("/api/v1/settings/bcv-rate", json={"bcv_rate": 40.0})
        client.post("/api/v1/expenses/", params=params,
                    json={"description": "Toallas", "amount": 4.0, "category": "Suministros"})

        response = client.post("/api/v1/daily-closes/", params=params, json={"notes": "Sin novedad"})
        assert response.status_code == 201
        data = response.json()
        assert data["close_date"] == date.today().isoformat()
        assert data["total_income"] == 10.0
        assert data["total_expenses"] == 4.0
        assert data["net_profit"] == 6.0
        assert data["transactions_count"] == 1
        assert data["transactions"][0]["id"] == paid_ticket["id"]
        assert data["income_by_payment_method"][0]["amount_bs"] == 400.0

    def test_one_close_per_day(self, client, paid_ticket):
        params = {"location": "MAGALLANES"}
        assert client.post("/api/v1/daily-closes/", params=params, json={}).status_code == 201
        assert client.post("/api/v1/daily-closes/", params=params, json={}).status_code == 409
        # Otra sede puede cerrar el mismo día
        assert client.post("/api/v1/daily-closes/", params={"location": "SARRIAS"}, json={}).status_code == 201

    def test_close_history(self, client, paid_ticket):
        params = {"location": "MAGALLANES"}
        client.post("/api/v1/daily-closes/", params=params, json={"close_date": "2024-03-01"})
        latest = client.post("/api/v1/daily-closes/", params=params, json={}).json()

        history = client.get("/api/v1/daily-closes/", params=params).json()
        assert history["total"] == 2
        assert history["closes"][0]["id"] == latest["id"]
        assert history["closes"][1]["total_income"] == 0

        limited = client.get("/api/v1/daily-closes/", params={**params, "limit": 1}).json()
        assert limited["total"] == 1

        assert client.get(f"/api/v1/daily-closes/{latest['id']}", params=params).status_code == 200
        assert client.get(f"/api/v1/daily-closes/{latest['id']}", params={"location": "SARRIAS"}).status_code == 404
