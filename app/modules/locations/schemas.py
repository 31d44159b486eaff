"""
Pydantic schemas for sedes.
"""
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator

from .models import LocationKind


class LocationBase(BaseModel):
    """Base schema para sedes."""
    code: str = Field(..., min_length=1, max_length=30, description="Código único de la sede")
    name: str = Field(..., min_length=1, max_length=100, description="Nombre de la sede")
    kind: LocationKind = Field(LocationKind.STANDARD_BRANCH, description="Tipo de sede")

    @field_validator('code')
    @classmethod
    def normalize_code(cls, v: str) -> str:
        cleaned = v.strip().upper()
        if not cleaned:
            raise ValueError('El código no puede estar vacío')
        return cleaned


class LocationCreate(LocationBase):
    """Schema para crear sedes."""
    pass


class LocationUpdate(BaseModel):
    """Schema para actualizar sedes."""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    kind: Optional[LocationKind] = None


class LocationOut(LocationBase):
    """Schema de salida para sedes."""
    id: int

    class Config:
        from_attributes = True


class LocationList(BaseModel):
    """Schema para lista de sedes."""
    locations: List[LocationOut] = Field(..., description="Lista de sedes")
    total: int = Field(..., description="Total de sedes")
