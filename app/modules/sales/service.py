"""
Flujo de punto de venta: iniciar servicio, agregar ítems y finalizar pago
"""
import logging
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from app.modules.catalog.models import CatalogService, Product, ItemType
from app.modules.staff.models import Staff
from app.modules.reports.utils.periods import DateRange
from .models import Ticket, TicketItem, TicketStatus
from .schemas import TicketCreate, TicketItemCreate, PaymentCreate

logger = logging.getLogger(__name__)


class TicketService:
    """Servicio para tickets activos y transacciones"""

    def __init__(self, db: Session):
        self.db = db

    # ===== HELPERS =====

    def _build_item(self, item_data: TicketItemCreate, location_id: int) -> TicketItem:
        """Copiar nombre, precio y categoría desde el catálogo de la sede"""
        model = CatalogService if item_data.type == ItemType.SERVICE else Product
        catalog_item = self.db.query(model).filter(
            model.id == item_data.item_id,
            model.location_id == location_id
        ).first()

        if not catalog_item:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Ítem {item_data.item_id} no encontrado en el catálogo"
            )

        return TicketItem(
            item_id=catalog_item.id,
            name=catalog_item.name,
            price=catalog_item.price,
            quantity=item_data.quantity,
            type=item_data.type,
            category=catalog_item.category
        )

    def _get_barber(self, barber_id: UUID, location_id: int) -> Staff:
        barber = self.db.query(Staff).filter(
            Staff.id == barber_id,
            Staff.location_id == location_id,
            Staff.deleted_at.is_(None)
        ).first()

        if not barber:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Barbero no encontrado"
            )
        if not barber.is_barber:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail="El personal seleccionado no es barbero"
            )
        return barber

    def get_ticket(self, ticket_id: UUID, location_id: int) -> Ticket:
        ticket = self.db.query(Ticket).options(selectinload(Ticket.items)).filter(
            Ticket.id == ticket_id,
            Ticket.location_id == location_id
        ).first()

        if not ticket:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Ticket no encontrado"
            )
        return ticket

    def _get_active_ticket(self, ticket_id: UUID, location_id: int) -> Ticket:
        ticket = self.get_ticket(ticket_id, location_id)
        if ticket.status != TicketStatus.ACTIVE:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="El ticket ya fue pagado"
            )
        return ticket

    # ===== FLUJO POS =====

    def start_ticket(self, ticket_data: TicketCreate, location_id: int) -> Ticket:
        """Iniciar servicio con cliente, barbero y al menos un ítem"""
        try:
            self._get_barber(ticket_data.barber_id, location_id)

            ticket = Ticket(
                location_id=location_id,
                customer_name=ticket_data.customer_name,
                barber_id=ticket_data.barber_id,
                status=TicketStatus.ACTIVE,
                start_time=datetime.now()
            )
            ticket.items = [self._build_item(item, location_id) for item in ticket_data.items]
            ticket.recalculate_total()

            self.db.add(ticket)
            self.db.commit()
            self.db.refresh(ticket)

            logger.info(f"Ticket started: {ticket.id} for {ticket.customer_name} (total {ticket.total_amount})")
            return ticket

        except HTTPException:
            raise
        except IntegrityError:
            self.db.rollback()
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Error de integridad al crear el ticket"
            )
        except Exception as e:
            self.db.rollback()
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Error interno del servidor: {str(e)}"
            )

    def add_item(self, ticket_id: UUID, item_data: TicketItemCreate, location_id: int) -> Ticket:
        """Agregar un ítem a un ticket activo y recalcular el total"""
        try:
            ticket = self._get_active_ticket(ticket_id, location_id)
            ticket.items.append(self._build_item(item_data, location_id))
            ticket.recalculate_total()

            self.db.commit()
            self.db.refresh(ticket)
            return ticket

        except HTTPException:
            raise
        except Exception as e:
            self.db.rollback()
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Error interno del servidor: {str(e)}"
            )

    def finalize_payment(self, ticket_id: UUID, payment_data: PaymentCreate, location_id: int) -> Ticket:
        """
        Registrar el pago de un ticket activo.

        El ticket pasa a transacción completada con end_time. Los productos
        descuentan inventario salvo las cortesías; el stock puede quedar negativo.
        """
        try:
            ticket = self._get_active_ticket(ticket_id, location_id)

            ticket.status = TicketStatus.COMPLETED
            ticket.payment_method = payment_data.payment_method
            ticket.reference_number = payment_data.reference_number
            ticket.end_time = datetime.now()

            for item in ticket.items:
                if item.type != ItemType.PRODUCT or not item.category.tracks_stock:
                    continue
                product = self.db.query(Product).filter(
                    Product.id == item.item_id,
                    Product.location_id == location_id
                ).first()
                if product:
                    product.stock = (product.stock or 0) - item.quantity

            self.db.commit()
            self.db.refresh(ticket)

            logger.info(
                f"Payment finalized: ticket {ticket.id} {ticket.total_amount} "
                f"via {ticket.payment_method.value}"
            )
            return ticket

        except HTTPException:
            raise
        except Exception as e:
            self.db.rollback()
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Error interno del servidor: {str(e)}"
            )

    # ===== CONSULTAS =====

    def get_active_tickets(self, location_id: int) -> List[Ticket]:
        return self.db.query(Ticket).options(selectinload(Ticket.items)).filter(
            Ticket.location_id == location_id,
            Ticket.status == TicketStatus.ACTIVE
        ).order_by(Ticket.start_time).all()

    def get_transactions(self, location_id: int, date_range: DateRange,
                         barber_id: Optional[UUID] = None) -> List[Ticket]:
        """Transacciones completadas del periodo, más recientes primero"""
        query = self.db.query(Ticket).options(selectinload(Ticket.items)).filter(
            Ticket.location_id == location_id,
            Ticket.status == TicketStatus.COMPLETED
        )

        start = date_range.start_bound()
        end = date_range.end_bound()
        if start is not None:
            query = query.filter(Ticket.end_time >= start)
        if end is not None:
            query = query.filter(Ticket.end_time <= end)
        if barber_id:
            query = query.filter(Ticket.barber_id == barber_id)

        return query.order_by(Ticket.end_time.desc()).all()
