"""
Modelos SQLAlchemy del catálogo de servicios y productos
"""
import enum
from typing import Dict, Optional
from uuid import uuid4

from sqlalchemy import Column, String, Float, Integer, Enum, Uuid

from app.database.database import Base
from app.common.mixins import LocationMixin, TimestampMixin


class ItemType(str, enum.Enum):
    """Tipo de ítem vendible"""
    SERVICE = "service"
    PRODUCT = "product"


class ItemCategory(str, enum.Enum):
    """Categorías cerradas de servicios y productos"""
    # Servicios
    BARBERIA = "barberia"
    NORDICO = "nordico"
    GAMER_ZONE = "zona gamer"
    # Productos
    SNACK = "Snack"
    COURTESY = "Cortesía"
    COURTESY_SNACK = "Snack de Cortesía"
    RETAIL = "retail"

    @property
    def tracks_stock(self) -> bool:
        """Las bebidas de cortesía no descuentan inventario"""
        return self != ItemCategory.COURTESY


class IncomeBucket(str, enum.Enum):
    """Rubros del reporte de ingresos por categoría"""
    BARBERSHOP_SERVICE = "Servicio de Barberia"
    GAMER_ZONE = "Zona Gamer"
    SNACKS = "Snacks"
    PRODUCTS = "Productos"


# Tabla exhaustiva categoría -> rubro. None = no genera ingreso (cortesías)
INCOME_BUCKETS: Dict[ItemCategory, Optional[IncomeBucket]] = {
    ItemCategory.BARBERIA: IncomeBucket.BARBERSHOP_SERVICE,
    ItemCategory.NORDICO: IncomeBucket.BARBERSHOP_SERVICE,
    ItemCategory.GAMER_ZONE: IncomeBucket.GAMER_ZONE,
    ItemCategory.SNACK: IncomeBucket.SNACKS,
    ItemCategory.COURTESY: None,
    ItemCategory.COURTESY_SNACK: None,
    ItemCategory.RETAIL: IncomeBucket.PRODUCTS,
}

SERVICE_CATEGORIES = (ItemCategory.BARBERIA, ItemCategory.NORDICO, ItemCategory.GAMER_ZONE)
PRODUCT_CATEGORIES = (
    ItemCategory.SNACK,
    ItemCategory.COURTESY,
    ItemCategory.COURTESY_SNACK,
    ItemCategory.RETAIL,
)


def income_bucket_for(category) -> Optional[IncomeBucket]:
    """Rubro de ingreso de una categoría (acepta el enum o su valor en texto)"""
    return INCOME_BUCKETS[ItemCategory(category)]


class CatalogService(Base, LocationMixin, TimestampMixin):
    """Servicio ofrecido en una sede (corte, barba, tinte, zona gamer...)"""
    __tablename__ = "catalog_services"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4)
    name = Column(String(100), nullable=False, index=True)
    price = Column(Float, nullable=False, default=0)
    category = Column(Enum(ItemCategory), nullable=False, default=ItemCategory.BARBERIA)
    description = Column(String(255), nullable=True)


class Product(Base, LocationMixin, TimestampMixin):
    """Producto con costo e inventario"""
    __tablename__ = "catalog_products"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4)
    name = Column(String(100), nullable=False, index=True)
    price = Column(Float, nullable=False, default=0)   # Precio de venta
    cost = Column(Float, nullable=False, default=0)    # Costo unitario
    stock = Column(Integer, nullable=False, default=0)
    category = Column(Enum(ItemCategory), nullable=False, default=ItemCategory.RETAIL)
