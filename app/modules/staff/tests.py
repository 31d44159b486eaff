"""
Tests para el módulo de Personal

- Alta de barberos, barbero principal y personal de apoyo
- Filtros por rol y sede
- Actualización y soft delete
"""

import pytest

from app.modules.staff.models import Staff, StaffRole
from app.modules.staff.schemas import StaffCreate
from app.modules.staff.service import StaffService


@pytest.fixture
def staff_payload():
    return {
        "name": "  José Gómez ",
        "role": "head_barber",
        "phone": "0414-5551234",
        "commission_percentage": 70,
        "rent_amount": 40.0,
    }


class TestStaffModel:
    """Tests para el modelo Staff"""

    def test_is_barber(self):
        assert Staff(name="A", role=StaffRole.BARBER).is_barber
        assert Staff(name="B", role=StaffRole.HEAD_BARBER).is_barber
        assert not Staff(name="C", role=StaffRole.RECEPTIONIST).is_barber

    def test_soft_delete_hides_member(self, db_session, locations):
        service = StaffService(db_session)
        member = service.create_staff(StaffCreate(name="Luis"), locations["MAGALLANES"].id)
        service.delete_staff(member.id)

        result = service.get_staff(locations["MAGALLANES"].id)
        assert result["total"] == 0
        assert member.deleted_at is not None


class TestStaffSchemas:
    def test_blank_name_rejected(self):
        with pytest.raises(ValueError):
            StaffCreate(name="   ")

    def test_commission_bounds(self):
        with pytest.raises(ValueError):
            StaffCreate(name="Luis", commission_percentage=120)


class TestStaffEndpoints:
    """Tests de integración de los endpoints de personal"""

    def test_create_staff(self, client, locations, staff_payload):
        response = client.post("/api/v1/staff/", params={"location": "MAGALLANES"}, json=staff_payload)
        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "José Gómez"
        assert data["role"] == "head_barber"
        assert data["commission_percentage"] == 70
        assert data["location_id"] == locations["MAGALLANES"].id
        assert data["is_active"] is True

    def test_create_staff_requires_location(self, client, locations, staff_payload):
        assert client.post("/api/v1/staff/", json=staff_payload).status_code == 422
        response = client.post("/api/v1/staff/", params={"location": "NOPE"}, json=staff_payload)
        assert response.status_code == 404

    def test_list_staff_by_location_and_role(self, client, locations):
        client.post("/api/v1/staff/", params={"location": "MAGALLANES"}, json={"name": "Ana", "role": "recepcionista"})
        client.post("/api/v1/staff/", params={"location": "MAGALLANES"}, json={"name": "Luis"})
        client.post("/api/v1/staff/", params={"location": "SARRIAS"}, json={"name": "Pedro"})

        response = client.get("/api/v1/staff/", params={"location": "MAGALLANES"})
        assert response.json()["total"] == 2

        response = client.get("/api/v1/staff/", params={"location": "MAGALLANES", "role": "barber"})
        data = response.json()
        assert data["total"] == 1
        assert data["staff"][0]["name"] == "Luis"

    def test_update_and_active_filter(self, client, locations):
        member = client.post("/api/v1/staff/", params={"location": "MAGALLANES"}, json={"name": "Luis"}).json()
        response = client.patch(f"/api/v1/staff/{member['id']}", json={"is_active": False})
        assert response.status_code == 200
        assert response.json()["is_active"] is False

        response = client.get("/api/v1/staff/", params={"location": "MAGALLANES", "active_only": True})
        assert response.json()["total"] == 0

    def test_delete_staff(self, client, locations):
        member = client.post("/api/v1/staff/", params={"location": "MAGALLANES"}, json={"name": "Luis"}).json()
        assert client.delete(f"/api/v1/staff/{member['id']}").status_code == 204
        assert client.get(f"/api/v1/staff/{member['id']}").status_code == 404
