"""
Endpoints del catálogo de servicios y productos
"""
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Query, status

from app.dependencies.dbDependecies import db_dependency
from app.dependencies.locationDependencies import LocationContext
from .models import ItemCategory
from . import schemas
from .crud import ServicesCRUD, ProductsCRUD

router = APIRouter(prefix="/catalog", tags=["Catalog"])


# ===== SERVICIOS =====

@router.get("/services", response_model=schemas.ServiceList)
async def list_services(
    location: LocationContext,
    db: db_dependency,
    category: Optional[ItemCategory] = Query(None, description="Filtrar por categoría")
):
    """Listar servicios de la sede"""
    services = ServicesCRUD.get_services(db, location.id, category)
    return schemas.ServiceList(
        services=[schemas.ServiceOut.model_validate(s) for s in services],
        total=len(services)
    )


@router.post("/services", response_model=schemas.ServiceOut, status_code=status.HTTP_201_CREATED)
async def create_service(data: schemas.ServiceCreate, location: LocationContext, db: db_dependency):
    return ServicesCRUD.create_service(db, data, location.id)


@router.patch("/services/{service_id}", response_model=schemas.ServiceOut)
async def update_service(service_id: UUID, data: schemas.ServiceUpdate, location: LocationContext, db: db_dependency):
    return ServicesCRUD.update_service(db, service_id, data, location.id)


@router.delete("/services/{service_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_service(service_id: UUID, location: LocationContext, db: db_dependency):
    ServicesCRUD.delete_service(db, service_id, location.id)


# ===== PRODUCTOS =====

@router.get("/products", response_model=schemas.ProductList)
async def list_products(
    location: LocationContext,
    db: db_dependency,
    category: Optional[ItemCategory] = Query(None, description="Filtrar por categoría")
):
    """Listar productos de la sede con su inventario"""
    products = ProductsCRUD.get_products(db, location.id, category)
    return schemas.ProductList(
        products=[schemas.ProductOut.model_validate(p) for p in products],
        total=len(products)
    )


@router.post("/products", response_model=schemas.ProductOut, status_code=status.HTTP_201_CREATED)
async def create_product(data: schemas.ProductCreate, location: LocationContext, db: db_dependency):
    return ProductsCRUD.create_product(db, data, location.id)


@router.patch("/products/{product_id}", response_model=schemas.ProductOut)
async def update_product(product_id: UUID, data: schemas.ProductUpdate, location: LocationContext, db: db_dependency):
    return ProductsCRUD.update_product(db, product_id, data, location.id)


@router.delete("/products/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(product_id: UUID, location: LocationContext, db: db_dependency):
    ProductsCRUD.delete_product(db, product_id, location.id)
