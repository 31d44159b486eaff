"""
Tests para el módulo de Sedes

- Siembra de las sedes de la cadena
- Consulta por código (sin distinguir mayúsculas)
- Alta y actualización de sedes
"""

from app.modules.locations.models import Location, LocationKind
from app.modules.locations.seed_data import CHAIN_LOCATIONS, populate_locations


class TestLocationKind:
    """Tests para el tipo de sede"""

    def test_branches(self):
        assert LocationKind.STANDARD_BRANCH.is_branch
        assert LocationKind.SECONDARY_BRANCH.is_branch
        assert not LocationKind.CENTRAL_PLANT.is_branch


class TestSeedData:
    """Tests para la siembra de sedes"""

    def test_populate_locations_once(self, db_session):
        assert populate_locations(db_session) == len(CHAIN_LOCATIONS)
        assert populate_locations(db_session) == 0
        assert db_session.query(Location).count() == len(CHAIN_LOCATIONS)

    def test_plant_kind(self, locations):
        assert locations["PSYFN"].kind == LocationKind.CENTRAL_PLANT
        assert locations["SARRIAS"].kind == LocationKind.SECONDARY_BRANCH


class TestLocationEndpoints:
    """Tests de integración de los endpoints de sedes"""

    def test_list_locations(self, client, locations):
        response = client.get("/api/v1/locations/")
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 3
        assert {loc["code"] for loc in data["locations"]} == {"MAGALLANES", "SARRIAS", "PSYFN"}

    def test_get_location_case_insensitive(self, client, locations):
        response = client.get("/api/v1/locations/magallanes")
        assert response.status_code == 200
        assert response.json()["kind"] == "standard_branch"

    def test_get_location_not_found(self, client, locations):
        assert client.get("/api/v1/locations/NOPE").status_code == 404

    def test_create_location(self, client, locations):
        response = client.post("/api/v1/locations/", json={"code": " chacao ", "name": "Chacao",
                                                            "kind": "secondary_branch"})
        assert response.status_code == 201
        assert response.json()["code"] == "CHACAO"

    def test_create_duplicate_location(self, client, locations):
        response = client.post("/api/v1/locations/", json={"code": "SARRIAS", "name": "Otra"})
        assert response.status_code == 409

    def test_update_location(self, client, locations):
        response = client.patch("/api/v1/locations/SARRIAS", json={"kind": "standard_branch"})
        assert response.status_code == 200
        assert response.json()["kind"] == "standard_branch"
        assert response.json()["name"] == "Sarrias"

    def test_response_headers(self, client, locations):
        response = client.get("/api/v1/locations/")
        assert "X-Process-Time" in response.headers
        assert response.headers["X-Content-Type-Options"] == "nosniff"
