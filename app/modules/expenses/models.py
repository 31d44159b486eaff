"""
Modelos SQLAlchemy de gastos y otros ingresos
"""
import enum
from datetime import datetime
from uuid import uuid4

from sqlalchemy import Column, String, Float, DateTime, ForeignKey, Enum, Uuid
from sqlalchemy.orm import relationship

from app.database.database import Base
from app.common.mixins import LocationMixin, TimestampMixin


class ExpenseCategory(str, enum.Enum):
    """Categorías de gasto"""
    SALARIES = "Salarios"
    SUPPLIES = "Suministros"
    RENT = "Alquiler"
    UTILITIES = "Servicios Públicos"
    EMPLOYEE_CREDIT = "Crédito a Empleado"   # Requiere staff_id
    OTHER = "Otros"


class Expense(Base, LocationMixin, TimestampMixin):
    """
    Gasto de una sede. No se modifica una vez registrado.
    Los créditos a empleados son gastos con categoría EMPLOYEE_CREDIT.
    """
    __tablename__ = "expenses"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4)
    description = Column(String(255), nullable=False)
    amount = Column(Float, nullable=False, default=0)
    category = Column(Enum(ExpenseCategory), nullable=False, index=True)
    timestamp = Column(DateTime, nullable=False, default=datetime.now, index=True)
    staff_id = Column(Uuid(as_uuid=True), ForeignKey("staff.id"), nullable=True)

    staff = relationship("Staff")

    @property
    def is_employee_credit(self) -> bool:
        return self.category == ExpenseCategory.EMPLOYEE_CREDIT


class OtherIncome(Base, LocationMixin, TimestampMixin):
    """Ingreso fuera de caja (venta de activos, intereses...). Categoría libre."""
    __tablename__ = "other_incomes"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4)
    description = Column(String(255), nullable=False)
    amount = Column(Float, nullable=False, default=0)
    category = Column(String(100), nullable=False, index=True)
    timestamp = Column(DateTime, nullable=False, default=datetime.now, index=True)
