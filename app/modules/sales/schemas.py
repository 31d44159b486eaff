"""
Schemas Pydantic de tickets y transacciones
"""
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from app.modules.catalog.models import ItemCategory, ItemType
from .models import TicketStatus, PaymentMethod


class TicketItemCreate(BaseModel):
    """Ítem a agregar: se resuelve contra el catálogo de la sede"""
    item_id: UUID = Field(..., description="ID del servicio o producto")
    type: ItemType = Field(..., description="service o product")
    quantity: int = Field(1, gt=0, description="Cantidad")


class TicketCreate(BaseModel):
    """Iniciar servicio: cliente, barbero y al menos un ítem"""
    customer_name: str = Field(..., min_length=1, max_length=200, description="Nombre del cliente")
    barber_id: UUID = Field(..., description="Barbero que atiende")
    items: List[TicketItemCreate] = Field(..., min_length=1, description="Ítems iniciales")

    @field_validator('customer_name')
    @classmethod
    def validate_customer_name(cls, v: str) -> str:
        cleaned = v.strip()
        if not cleaned:
            raise ValueError('El nombre del cliente no puede estar vacío')
        return cleaned


class PaymentCreate(BaseModel):
    """Finalizar pago"""
    payment_method: PaymentMethod = Field(..., description="Método de pago")
    reference_number: Optional[str] = Field(None, max_length=100, description="Referencia (Pago Móvil)")


class TicketItemOut(BaseModel):
    id: int
    item_id: Optional[UUID] = None
    name: str
    price: float
    quantity: int
    type: ItemType
    category: ItemCategory
    subtotal: float

    model_config = {"from_attributes": True}


class TicketOut(BaseModel):
    id: UUID
    location_id: int
    customer_name: Optional[str] = None
    barber_id: Optional[UUID] = None
    status: TicketStatus
    payment_method: Optional[PaymentMethod] = None
    reference_number: Optional[str] = None
    total_amount: float
    start_time: datetime
    end_time: Optional[datetime] = None
    items: List[TicketItemOut] = []

    model_config = {"from_attributes": True}


class TicketList(BaseModel):
    tickets: List[TicketOut]
    total: int
