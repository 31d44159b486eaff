"""
Modelos SQLAlchemy de tickets y transacciones
"""
import enum
from datetime import datetime
from uuid import uuid4

from sqlalchemy import Column, String, Float, Integer, DateTime, ForeignKey, Enum, Uuid
from sqlalchemy.orm import relationship

from app.database.database import Base
from app.common.mixins import LocationMixin, TimestampMixin
from app.modules.catalog.models import ItemCategory, ItemType


class TicketStatus(str, enum.Enum):
    """Estados del ticket"""
    ACTIVE = "active"           # Servicio en curso, sin pago
    COMPLETED = "completed"     # Pagado: cuenta como transacción


class PaymentMethod(str, enum.Enum):
    """Métodos de pago aceptados"""
    CASH_BS = "Efectivo BS"
    CASH_USD = "Efectivo USD"
    CARD = "Tarjeta"
    TRANSFER = "Transferencia"
    MOBILE_PAYMENT = "Pago Móvil"

    @property
    def is_bolivares(self) -> bool:
        """Métodos que se reportan también en Bs. a la tasa BCV"""
        return self != PaymentMethod.CASH_USD


class Ticket(Base, LocationMixin, TimestampMixin):
    """
    Ticket de atención.

    Mientras está activo acumula ítems; al finalizar el pago pasa a
    COMPLETED con end_time, que es la fecha usada por todos los reportes.
    """
    __tablename__ = "tickets"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4)
    customer_name = Column(String(200), nullable=True)
    barber_id = Column(Uuid(as_uuid=True), ForeignKey("staff.id"), nullable=True, index=True)
    status = Column(Enum(TicketStatus), nullable=False, default=TicketStatus.ACTIVE, index=True)

    payment_method = Column(Enum(PaymentMethod), nullable=True)
    reference_number = Column(String(100), nullable=True)  # Pago Móvil / Transferencia
    total_amount = Column(Float, nullable=False, default=0)

    start_time = Column(DateTime, nullable=False, default=datetime.now)
    end_time = Column(DateTime, nullable=True, index=True)

    barber = relationship("Staff")
    items = relationship(
        "TicketItem",
        back_populates="ticket",
        cascade="all, delete-orphan",
        order_by="TicketItem.id"
    )

    def recalculate_total(self) -> float:
        self.total_amount = sum(item.subtotal for item in self.items)
        return self.total_amount


class TicketItem(Base):
    """Línea de un ticket: copia nombre, precio y categoría del catálogo"""
    __tablename__ = "ticket_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    ticket_id = Column(Uuid(as_uuid=True), ForeignKey("tickets.id", ondelete="CASCADE"), nullable=False, index=True)
    item_id = Column(Uuid(as_uuid=True), nullable=True)  # Servicio o producto del catálogo
    name = Column(String(100), nullable=False)
    price = Column(Float, nullable=False, default=0)
    quantity = Column(Integer, nullable=False, default=1)
    type = Column(Enum(ItemType), nullable=False)
    category = Column(Enum(ItemCategory), nullable=False)

    ticket = relationship("Ticket", back_populates="items")

    @property
    def subtotal(self) -> float:
        return (self.price or 0) * (self.quantity or 0)
