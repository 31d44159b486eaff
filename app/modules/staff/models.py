"""
Modelos SQLAlchemy para el personal de cada sede
"""
import enum
from uuid import uuid4

from sqlalchemy import Column, String, Boolean, Float, Enum, Uuid
from sqlalchemy.orm import relationship

from app.database.database import Base
from app.common.mixins import LocationMixin, TimestampMixin, SoftDeleteMixin


class StaffRole(str, enum.Enum):
    """Roles del personal"""
    BARBER = "barber"                   # Comisión por tabla de niveles semanal
    HEAD_BARBER = "head_barber"         # Comisión fija (65% por defecto)
    RECEPTIONIST = "recepcionista"
    CLEANING = "limpieza"


class Staff(Base, LocationMixin, TimestampMixin, SoftDeleteMixin):
    """
    Miembro del personal de una sede.

    commission_percentage solo aplica al barbero principal (porcentaje fijo);
    los barberos comisionan según el número de servicios de la semana.
    """
    __tablename__ = "staff"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4)
    name = Column(String(200), nullable=False, index=True)
    role = Column(Enum(StaffRole), nullable=False, default=StaffRole.BARBER, index=True)
    phone = Column(String(50), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True, index=True)

    commission_percentage = Column(Float, nullable=True)  # Ej: 65 = 65%
    rent_amount = Column(Float, nullable=True)            # Alquiler semanal de silla
    monthly_payment = Column(Float, nullable=True)        # Pago mensual fijo (recepción/limpieza)

    location = relationship("Location")

    @property
    def is_barber(self) -> bool:
        return self.role in (StaffRole.BARBER, StaffRole.HEAD_BARBER)
