"""
Tests para el módulo de Gastos y Otros Ingresos

- Créditos a empleados (requieren empleado de la misma sede)
- Separación de créditos y demás gastos
- Filtro por periodo
- CRUD de otros ingresos
"""

import pytest

from app.modules.expenses.models import ExpenseCategory
from app.modules.expenses.schemas import ExpenseCreate


class TestExpenseSchemas:
    def test_employee_credit_requires_staff(self):
        with pytest.raises(ValueError):
            ExpenseCreate(description="Adelanto", amount=20, category=ExpenseCategory.EMPLOYEE_CREDIT)

    def test_regular_expense_without_staff(self):
        expense = ExpenseCreate(description="Luz", amount=35, category=ExpenseCategory.UTILITIES)
        assert expense.staff_id is None


class TestExpenseEndpoints:
    """Tests de integración de gastos"""

    def test_expenses_split(self, client, locations):
        params = {"location": "MAGALLANES"}
        member = client.post("/api/v1/staff/", params=params, json={"name": "Luis"}).json()

        credit = client.post("/api/v1/expenses/", params=params, json={
            "description": "Adelanto", "amount": 20.0, "category": "Crédito a Empleado", "staff_id": member["id"]
        })
        assert credit.status_code == 201
        client.post("/api/v1/expenses/", params=params,
                    json={"description": "Champú", "amount": 15.0, "category": "Suministros"})

        data = client.get("/api/v1/expenses/", params=params).json()
        assert len(data["employee_credits"]) == 1
        assert data["total_employee_credits"] == 20.0
        assert len(data["other_expenses"]) == 1
        assert data["total_other_expenses"] == 15.0

    def test_credit_for_staff_of_other_location(self, client, locations):
        member = client.post("/api/v1/staff/", params={"location": "SARRIAS"}, json={"name": "Pedro"}).json()
        response = client.post("/api/v1/expenses/", params={"location": "MAGALLANES"}, json={
            "description": "Adelanto", "amount": 20.0, "category": "Crédito a Empleado", "staff_id": member["id"]
        })
        assert response.status_code == 404

    def test_expenses_period_filter(self, client, locations):
        params = {"location": "MAGALLANES"}
        client.post("/api/v1/expenses/", params=params, json={
            "description": "Alquiler", "amount": 300.0, "category": "Alquiler",
            "timestamp": "2024-03-31T23:59:59.999000"
        })
        client.post("/api/v1/expenses/", params=params, json={
            "description": "Alquiler", "amount": 300.0, "category": "Alquiler",
            "timestamp": "2024-04-01T00:00:00"
        })

        march = client.get("/api/v1/expenses/", params={**params, "start_date": "2024-03-01",
                                                        "end_date": "2024-03-31"}).json()
        assert march["total_other_expenses"] == 300.0

    def test_get_and_delete_expense(self, client, locations):
        params = {"location": "MAGALLANES"}
        expense = client.post("/api/v1/expenses/", params=params,
                              json={"description": "Toallas", "amount": 12.0, "category": "Suministros"}).json()

        assert client.get(f"/api/v1/expenses/{expense['id']}", params=params).status_code == 200
        assert client.get(f"/api/v1/expenses/{expense['id']}", params={"location": "SARRIAS"}).status_code == 404
        assert client.delete(f"/api/v1/expenses/{expense['id']}", params=params).status_code == 204
        assert client.get(f"/api/v1/expenses/{expense['id']}", params=params).status_code == 404


class TestOtherIncomeEndpoints:
    """Tests de integración de otros ingresos"""

    def test_income_crud(self, client, locations):
        params = {"location": "PSYFN"}
        created = client.post("/api/v1/other-incomes/", params=params,
                              json={"description": "Venta de sillón", "amount": 150.0, "category": "Venta de Activo"})
        assert created.status_code == 201
        income_id = created.json()["id"]

        updated = client.patch(f"/api/v1/other-incomes/{income_id}", params=params, json={"amount": 175.0})
        assert updated.json()["amount"] == 175.0

        listed = client.get("/api/v1/other-incomes/", params=params).json()
        assert listed["total"] == 1
        assert listed["total_amount"] == 175.0

        assert client.delete(f"/api/v1/other-incomes/{income_id}", params=params).status_code == 204
        assert client.get("/api/v1/other-incomes/", params=params).json()["total"] == 0

    def test_other_income_not_in_net_profit(self, client, locations):
        client.post("/api/v1/other-incomes/", params={"location": "MAGALLANES"},
                    json={"description": "Intereses", "amount": 50.0, "category": "Intereses"})
        summary = client.get("/api/v1/reports/financial/cash-register",
                             params={"location": "MAGALLANES", "preset": "today"}).json()
        assert summary["net_profit"] == 0
