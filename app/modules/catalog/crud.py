"""
Operaciones CRUD del catálogo
"""
import logging
from typing import List, Optional
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from .models import CatalogService, Product, ItemCategory
from .schemas import ServiceCreate, ServiceUpdate, ProductCreate, ProductUpdate

logger = logging.getLogger(__name__)


class ServicesCRUD:
    """CRUD de servicios por sede"""

    @staticmethod
    def get_services(db: Session, location_id: int, category: Optional[ItemCategory] = None) -> List[CatalogService]:
        query = db.query(CatalogService).filter(CatalogService.location_id == location_id)
        if category:
            query = query.filter(CatalogService.category == category)
        return query.order_by(CatalogService.name).all()

    @staticmethod
    def get_service(db: Session, service_id: UUID, location_id: int) -> CatalogService:
        service = db.query(CatalogService).filter(
            CatalogService.id == service_id,
            CatalogService.location_id == location_id
        ).first()
        if not service:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Servicio no encontrado")
        return service

    @staticmethod
    def create_service(db: Session, data: ServiceCreate, location_id: int) -> CatalogService:
        service = CatalogService(location_id=location_id, **data.model_dump())
        db.add(service)
        db.commit()
        db.refresh(service)
        logger.info(f"Service created: {service.name} ({service.category.value})")
        return service

    @staticmethod
    def update_service(db: Session, service_id: UUID, data: ServiceUpdate, location_id: int) -> CatalogService:
        service = ServicesCRUD.get_service(db, service_id, location_id)
        for field, value in data.model_dump(exclude_unset=True).items():
            setattr(service, field, value)
        db.commit()
        db.refresh(service)
        return service

    @staticmethod
    def delete_service(db: Session, service_id: UUID, location_id: int) -> None:
        service = ServicesCRUD.get_service(db, service_id, location_id)
        db.delete(service)
        db.commit()


class ProductsCRUD:
    """CRUD de productos por sede"""

    @staticmethod
    def get_products(db: Session, location_id: int, category: Optional[ItemCategory] = None) -> List[Product]:
        query = db.query(Product).filter(Product.location_id == location_id)
        if category:
            query = query.filter(Product.category == category)
        return query.order_by(Product.name).all()

    @staticmethod
    def get_product(db: Session, product_id: UUID, location_id: int) -> Product:
        product = db.query(Product).filter(
            Product.id == product_id,
            Product.location_id == location_id
        ).first()
        if not product:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Producto no encontrado")
        return product

    @staticmethod
    def create_product(db: Session, data: ProductCreate, location_id: int) -> Product:
        product = Product(location_id=location_id, **data.model_dump())
        db.add(product)
        db.commit()
        db.refresh(product)
        logger.info(f"Product created: {product.name} (stock {product.stock})")
        return product

    @staticmethod
    def update_product(db: Session, product_id: UUID, data: ProductUpdate, location_id: int) -> Product:
        product = ProductsCRUD.get_product(db, product_id, location_id)
        for field, value in data.model_dump(exclude_unset=True).items():
            setattr(product, field, value)
        db.commit()
        db.refresh(product)
        return product

    @staticmethod
    def delete_product(db: Session, product_id: UUID, location_id: int) -> None:
        product = ProductsCRUD.get_product(db, product_id, location_id)
        db.delete(product)
        db.commit()
