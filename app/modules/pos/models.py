"""
Modelos SQLAlchemy para el módulo POS

- DailyClose: cierre de caja diario por sede, con el resumen congelado del día
- AppSetting: ajustes clave/valor (tasa BCV)
"""

from app.database.database import Base
from sqlalchemy import Column, String, Date, Float, Integer, Text, JSON, DateTime, UniqueConstraint, Uuid
from sqlalchemy.sql import func
from uuid import uuid4
from app.common.mixins import LocationMixin, TimestampMixin


BCV_RATE_KEY = "bcv_rate"


class DailyClose(Base, LocationMixin, TimestampMixin):
    """
    Cierre de caja diario

    Guarda los totales del día y la lista de transacciones al momento del
    cierre. Solo puede existir un cierre por sede y día.
    """
    __tablename__ = "daily_closes"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4)
    close_date = Column(Date, nullable=False, index=True)

    total_income = Column(Float, nullable=False, default=0)
    total_expenses = Column(Float, nullable=False, default=0)
    net_profit = Column(Float, nullable=False, default=0)
    transactions_count = Column(Integer, nullable=False, default=0)

    income_by_payment_method = Column(JSON, nullable=False, default=list)
    transactions = Column(JSON, nullable=False, default=list)

    notes = Column(Text, nullable=True)

    __table_args__ = (
        UniqueConstraint("location_id", "close_date", name="uq_daily_close_location_date"),
    )


class AppSetting(Base):
    """Ajuste global de la aplicación"""
    __tablename__ = "app_settings"

    key = Column(String(50), primary_key=True)
    value = Column(String(255), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
