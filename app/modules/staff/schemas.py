"""
Schemas Pydantic para el personal
"""
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from .models import StaffRole


class StaffCreate(BaseModel):
    """Esquema para registrar personal"""
    name: str = Field(..., min_length=1, max_length=200, description="Nombre completo")
    role: StaffRole = Field(StaffRole.BARBER, description="Rol dentro de la sede")
    phone: Optional[str] = Field(None, max_length=50, description="Teléfono")
    commission_percentage: Optional[float] = Field(None, ge=0, le=100, description="Comisión fija en % (barbero principal)")
    rent_amount: Optional[float] = Field(None, ge=0, description="Alquiler semanal de silla")
    monthly_payment: Optional[float] = Field(None, ge=0, description="Pago mensual")

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        cleaned = v.strip()
        if not cleaned:
            raise ValueError('El nombre no puede estar vacío')
        return cleaned


class StaffUpdate(BaseModel):
    """Esquema para actualizar personal"""
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    role: Optional[StaffRole] = None
    phone: Optional[str] = Field(None, max_length=50)
    is_active: Optional[bool] = None
    commission_percentage: Optional[float] = Field(None, ge=0, le=100)
    rent_amount: Optional[float] = Field(None, ge=0)
    monthly_payment: Optional[float] = Field(None, ge=0)


class StaffOut(BaseModel):
    """Esquema de salida para personal"""
    id: UUID
    location_id: int
    name: str
    role: StaffRole
    phone: Optional[str] = None
    is_active: bool
    commission_percentage: Optional[float] = None
    rent_amount: Optional[float] = None
    monthly_payment: Optional[float] = None
    created_at: datetime

    model_config = {"from_attributes": True}


class StaffList(BaseModel):
    """Esquema para lista de personal"""
    staff: List[StaffOut] = Field(description="Lista de personal")
    total: int = Field(description="Total de registros")
    limit: int = Field(description="Límite aplicado")
    offset: int = Field(description="Offset aplicado")
