"""
Tests para el módulo de Catálogo

- Rubros de ingreso por categoría
- Validación de categorías de servicios y productos
- CRUD por sede
"""

import pytest

from app.modules.catalog.models import ItemCategory, IncomeBucket, income_bucket_for
from app.modules.catalog.schemas import ServiceCreate, ProductCreate


class TestIncomeBuckets:
    """Tests para el rubro de cada categoría"""

    @pytest.mark.parametrize("category,bucket", [
        ("barberia", IncomeBucket.BARBERSHOP_SERVICE),
        ("nordico", IncomeBucket.BARBERSHOP_SERVICE),
        ("zona gamer", IncomeBucket.GAMER_ZONE),
        ("Snack", IncomeBucket.SNACKS),
        ("retail", IncomeBucket.PRODUCTS),
        ("Cortesía", None),
        ("Snack de Cortesía", None),
    ])
    def test_bucket_for_category(self, category, bucket):
        assert income_bucket_for(category) == bucket

    def test_unknown_category(self):
        with pytest.raises(ValueError):
            income_bucket_for("peluquería canina")

    def test_every_category_has_a_bucket_entry(self):
        for category in ItemCategory:
            income_bucket_for(category)

    def test_only_plain_courtesy_skips_stock(self):
        assert not ItemCategory.COURTESY.tracks_stock
        assert ItemCategory.COURTESY_SNACK.tracks_stock
        assert ItemCategory.SNACK.tracks_stock


class TestCatalogSchemas:
    def test_service_rejects_product_category(self):
        with pytest.raises(ValueError):
            ServiceCreate(name="Corte", price=10, category=ItemCategory.SNACK)

    def test_product_rejects_service_category(self):
        with pytest.raises(ValueError):
            ProductCreate(name="Cera", price=10, category=ItemCategory.BARBERIA)

    def test_negative_price(self):
        with pytest.raises(ValueError):
            ServiceCreate(name="Corte", price=-1)


class TestCatalogEndpoints:
    """Tests de integración del catálogo"""

    def test_service_crud(self, client, locations):
        params = {"location": "MAGALLANES"}
        created = client.post("/api/v1/catalog/services", params=params,
                              json={"name": "Corte Clásico", "price": 10.0, "category": "barberia"})
        assert created.status_code == 201
        service_id = created.json()["id"]

        updated = client.patch(f"/api/v1/catalog/services/{service_id}", params=params, json={"price": 12.5})
        assert updated.status_code == 200
        assert updated.json()["price"] == 12.5

        listed = client.get("/api/v1/catalog/services", params=params).json()
        assert listed["total"] == 1

        assert client.delete(f"/api/v1/catalog/services/{service_id}", params=params).status_code == 204
        assert client.get("/api/v1/catalog/services", params=params).json()["total"] == 0

    def test_catalog_is_scoped_by_location(self, client, locations):
        created = client.post("/api/v1/catalog/products", params={"location": "MAGALLANES"},
                              json={"name": "Refresco", "price": 2.0, "cost": 0.8, "stock": 24, "category": "Snack"})
        product_id = created.json()["id"]

        assert client.get("/api/v1/catalog/products", params={"location": "SARRIAS"}).json()["total"] == 0
        response = client.patch(f"/api/v1/catalog/products/{product_id}", params={"location": "SARRIAS"},
                                json={"stock": 10})
        assert response.status_code == 404

    def test_filter_products_by_category(self, client, locations):
        params = {"location": "MAGALLANES"}
        client.post("/api/v1/catalog/products", params=params,
                    json={"name": "Café", "price": 0, "category": "Cortesía"})
        client.post("/api/v1/catalog/products", params=params,
                    json={"name": "Cera", "price": 8, "category": "retail"})

        response = client.get("/api/v1/catalog/products", params={**params, "category": "Cortesía"})
        data = response.json()
        assert data["total"] == 1
        assert data["products"][0]["name"] == "Café"
