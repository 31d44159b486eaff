"""
Schemas Pydantic de gastos y otros ingresos
"""
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator, model_validator

from .models import ExpenseCategory


class ExpenseCreate(BaseModel):
    description: str = Field(..., min_length=1, max_length=255, description="Descripción")
    amount: float = Field(..., ge=0, description="Monto (USD)")
    category: ExpenseCategory = Field(..., description="Categoría del gasto")
    timestamp: Optional[datetime] = Field(None, description="Fecha del gasto (por defecto ahora)")
    staff_id: Optional[UUID] = Field(None, description="Empleado (obligatorio en créditos)")

    @field_validator('description')
    @classmethod
    def validate_description(cls, v: str) -> str:
        cleaned = v.strip()
        if not cleaned:
            raise ValueError('La descripción no puede estar vacía')
        return cleaned

    @model_validator(mode='after')
    def validate_employee_credit(self):
        if self.category == ExpenseCategory.EMPLOYEE_CREDIT and not self.staff_id:
            raise ValueError('Los créditos a empleados requieren staff_id')
        return self


class ExpenseOut(BaseModel):
    id: UUID
    location_id: int
    description: str
    amount: float
    category: ExpenseCategory
    timestamp: datetime
    staff_id: Optional[UUID] = None

    model_config = {"from_attributes": True}


class ExpenseList(BaseModel):
    """Gastos separados: créditos a empleados y el resto"""
    employee_credits: List[ExpenseOut]
    other_expenses: List[ExpenseOut]
    total_employee_credits: float
    total_other_expenses: float


class OtherIncomeCreate(BaseModel):
    description: str = Field(..., min_length=1, max_length=255)
    amount: float = Field(..., ge=0)
    category: str = Field(..., min_length=1, max_length=100, description="Ej: Venta de Activo, Intereses")
    timestamp: Optional[datetime] = None


class OtherIncomeUpdate(BaseModel):
    description: Optional[str] = Field(None, min_length=1, max_length=255)
    amount: Optional[float] = Field(None, ge=0)
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    timestamp: Optional[datetime] = None


class OtherIncomeOut(BaseModel):
    id: UUID
    location_id: int
    description: str
    amount: float
    category: str
    timestamp: datetime

    model_config = {"from_attributes": True}


class OtherIncomeList(BaseModel):
    incomes: List[OtherIncomeOut]
    total: int
    total_amount: float
