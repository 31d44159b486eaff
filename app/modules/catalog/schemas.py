"""
Schemas Pydantic del catálogo
"""
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from .models import ItemCategory, SERVICE_CATEGORIES, PRODUCT_CATEGORIES


class ServiceCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100, description="Nombre del servicio")
    price: float = Field(..., ge=0, description="Precio")
    category: ItemCategory = Field(ItemCategory.BARBERIA, description="barberia, nordico o zona gamer")
    description: Optional[str] = Field(None, max_length=255)

    @field_validator('category')
    @classmethod
    def validate_category(cls, v: ItemCategory) -> ItemCategory:
        if v not in SERVICE_CATEGORIES:
            raise ValueError(f"Categoría de servicio inválida: {v.value}")
        return v


class ServiceUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    price: Optional[float] = Field(None, ge=0)
    category: Optional[ItemCategory] = None
    description: Optional[str] = Field(None, max_length=255)

    @field_validator('category')
    @classmethod
    def validate_category(cls, v: Optional[ItemCategory]) -> Optional[ItemCategory]:
        if v is not None and v not in SERVICE_CATEGORIES:
            raise ValueError(f"Categoría de servicio inválida: {v.value}")
        return v


class ServiceOut(BaseModel):
    id: UUID
    location_id: int
    name: str
    price: float
    category: ItemCategory
    description: Optional[str] = None

    class Config:
        from_attributes = True


class ProductCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100, description="Nombre del producto")
    price: float = Field(..., ge=0, description="Precio de venta")
    cost: float = Field(0, ge=0, description="Costo unitario")
    stock: int = Field(0, description="Existencias")
    category: ItemCategory = Field(ItemCategory.RETAIL, description="Snack, Cortesía, Snack de Cortesía o retail")

    @field_validator('category')
    @classmethod
    def validate_category(cls, v: ItemCategory) -> ItemCategory:
        if v not in PRODUCT_CATEGORIES:
            raise ValueError(f"Categoría de producto inválida: {v.value}")
        return v


class ProductUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    price: Optional[float] = Field(None, ge=0)
    cost: Optional[float] = Field(None, ge=0)
    stock: Optional[int] = None
    category: Optional[ItemCategory] = None

    @field_validator('category')
    @classmethod
    def validate_category(cls, v: Optional[ItemCategory]) -> Optional[ItemCategory]:
        if v is not None and v not in PRODUCT_CATEGORIES:
            raise ValueError(f"Categoría de producto inválida: {v.value}")
        return v


class ProductOut(BaseModel):
    id: UUID
    location_id: int
    name: str
    price: float
    cost: float
    stock: int
    category: ItemCategory

    class Config:
        from_attributes = True


class ServiceList(BaseModel):
    services: List[ServiceOut]
    total: int


class ProductList(BaseModel):
    products: List[ProductOut]
    total: int
