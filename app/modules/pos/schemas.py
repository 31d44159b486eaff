"""
Schemas Pydantic para el módulo POS
"""

from datetime import date, datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field


class DailyCloseCreate(BaseModel):
    """Esquema para cerrar caja"""
    close_date: Optional[date] = Field(None, description="Día a cerrar (por defecto hoy)")
    notes: Optional[str] = Field(None, max_length=500, description="Notas del cierre")


class ClosedTransaction(BaseModel):
    id: str
    customer_name: Optional[str] = None
    payment_method: Optional[str] = None
    total_amount: float
    end_time: Optional[str] = None


class ClosedPaymentMethod(BaseModel):
    payment_method: str
    amount: float
    amount_bs: Optional[float] = None
    transactions_count: int


class DailyCloseOut(BaseModel):
    """Esquema de salida para cierre de caja"""
    id: UUID
    location_id: int
    close_date: date
    total_income: float
    total_expenses: float
    net_profit: float
    transactions_count: int
    income_by_payment_method: List[ClosedPaymentMethod]
    transactions: List[ClosedTransaction]
    notes: Optional[str] = None
    created_at: datetime

    model_config = {"from_attributes": True}


class DailyCloseList(BaseModel):
    closes: List[DailyCloseOut]
    total: int


class BcvRateOut(BaseModel):
    bcv_rate: float = Field(description="Bs. por USD")


class BcvRateUpdate(BaseModel):
    bcv_rate: float = Field(..., description="Nueva tasa BCV (mayor a 0)")
