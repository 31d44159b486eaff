"""
Endpoints del punto de venta
"""
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Query, status

from app.dependencies.dbDependecies import db_dependency
from app.dependencies.locationDependencies import LocationContext
from app.dependencies.periodDependencies import PeriodContext
from .schemas import TicketCreate, TicketItemCreate, PaymentCreate, TicketOut, TicketList
from .service import TicketService

router = APIRouter(prefix="/sales", tags=["Sales"])


@router.post("/tickets", response_model=TicketOut, status_code=status.HTTP_201_CREATED)
async def start_ticket(ticket_data: TicketCreate, location: LocationContext, db: db_dependency):
    """
    Iniciar servicio.

    - **customer_name**: Nombre del cliente
    - **barber_id**: Barbero que atiende
    - **items**: Servicios/productos iniciales (mínimo uno)
    """
    return TicketService(db).start_ticket(ticket_data, location.id)


@router.get("/tickets/active", response_model=TicketList)
async def list_active_tickets(location: LocationContext, db: db_dependency):
    """Tickets en curso de la sede"""
    tickets = TicketService(db).get_active_tickets(location.id)
    return TicketList(tickets=[TicketOut.model_validate(t) for t in tickets], total=len(tickets))


@router.get("/tickets/{ticket_id}", response_model=TicketOut)
async def get_ticket(ticket_id: UUID, location: LocationContext, db: db_dependency):
    return TicketService(db).get_ticket(ticket_id, location.id)


@router.post("/tickets/{ticket_id}/items", response_model=TicketOut)
async def add_ticket_item(ticket_id: UUID, item_data: TicketItemCreate, location: LocationContext, db: db_dependency):
    """Agregar un servicio o producto a un ticket activo"""
    return TicketService(db).add_item(ticket_id, item_data, location.id)


@router.post("/tickets/{ticket_id}/pay", response_model=TicketOut)
async def finalize_payment(ticket_id: UUID, payment_data: PaymentCreate, location: LocationContext, db: db_dependency):
    """
    Finalizar pago: el ticket pasa a transacción completada y se descuenta
    el inventario de los productos vendidos (excepto cortesías).
    """
    return TicketService(db).finalize_payment(ticket_id, payment_data, location.id)


@router.get("/transactions", response_model=TicketList)
async def list_transactions(
    location: LocationContext,
    db: db_dependency,
    date_range: PeriodContext,
    barber_id: Optional[UUID] = Query(None, description="Filtrar por barbero")
):
    """Transacciones completadas, más recientes primero"""
    tickets = TicketService(db).get_transactions(location.id, date_range, barber_id)
    return TicketList(tickets=[TicketOut.model_validate(t) for t in tickets], total=len(tickets))
