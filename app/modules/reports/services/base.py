"""
Base service class for Reports module

Los reportes no leen las tablas directamente: piden los datos del periodo a
un repositorio (`get_period_data(location, date_range)`), lo que permite
calcular los mismos reportes sobre la base de datos o sobre datos en memoria.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Protocol, Union

from sqlalchemy.orm import Session, selectinload

from app.common.validators import coerce_amount
from app.modules.locations.models import Location
from app.modules.sales.models import Ticket, TicketStatus
from app.modules.expenses.models import Expense, OtherIncome
from app.modules.reports.utils.periods import DateRange, filter_by_period


LocationRef = Union[Location, str]


def _location_code(location: LocationRef) -> str:
    code = location if isinstance(location, str) else getattr(location, "code", None)
    return str(code).strip().upper()


def _amount(record: Any, name: str) -> float:
    value = record.get(name) if isinstance(record, dict) else getattr(record, name, None)
    return coerce_amount(value, name)


@dataclass
class PeriodData:
    """Transacciones completadas, gastos y otros ingresos de una sede en un periodo"""
    transactions: List[Any] = field(default_factory=list)
    expenses: List[Any] = field(default_factory=list)
    other_incomes: List[Any] = field(default_factory=list)

    def total_income(self) -> float:
        return sum(_amount(tx, "total_amount") for tx in self.transactions)

    def total_expenses(self) -> float:
        return sum(_amount(expense, "amount") for expense in self.expenses)

    def net_profit(self) -> float:
        """Ingresos por ventas menos gastos (los otros ingresos no se incluyen)"""
        return self.total_income() - self.total_expenses()


class PeriodDataRepository(Protocol):
    def get_period_data(self, location: LocationRef, date_range: DateRange) -> PeriodData:
        ...


class SqlPeriodDataRepository:
    """Datos del periodo desde la base de datos"""

    def __init__(self, db: Session):
        self.db = db

    def _location_id(self, location: LocationRef) -> Optional[int]:
        if isinstance(location, Location):
            return location.id
        found = self.db.query(Location).filter(Location.code == _location_code(location)).first()
        return found.id if found else None

    def _apply_date_filter(self, query, date_field, date_range: DateRange):
        """Apply inclusive date range filter to a query"""
        start = date_range.start_bound()
        end = date_range.end_bound()
        if start is not None:
            query = query.filter(date_field >= start)
        if end is not None:
            query = query.filter(date_field <= end)
        return query

    def get_period_data(self, location: LocationRef, date_range: DateRange) -> PeriodData:
        location_id = self._location_id(location)
        if location_id is None:
            return PeriodData()

        transactions = self.db.query(Ticket).options(selectinload(Ticket.items)).filter(
            Ticket.location_id == location_id,
            Ticket.status == TicketStatus.COMPLETED
        )
        transactions = self._apply_date_filter(transactions, Ticket.end_time, date_range)

        expenses = self.db.query(Expense).filter(Expense.location_id == location_id)
        expenses = self._apply_date_filter(expenses, Expense.timestamp, date_range)

        incomes = self.db.query(OtherIncome).filter(OtherIncome.location_id == location_id)
        incomes = self._apply_date_filter(incomes, OtherIncome.timestamp, date_range)

        return PeriodData(
            transactions=transactions.order_by(Ticket.end_time.desc()).all(),
            expenses=expenses.order_by(Expense.timestamp.desc()).all(),
            other_incomes=incomes.order_by(OtherIncome.timestamp.desc()).all()
        )


class InMemoryPeriodDataRepository:
    """
    Datos del periodo desde memoria, por código de sede.

    Los registros pueden ser dicts u objetos con `end_time` (transacciones) y
    `timestamp` (gastos y otros ingresos).
    """

    def __init__(self, data: Optional[Dict[str, Dict[str, Iterable[Any]]]] = None):
        self.data = {code.upper(): records for code, records in (data or {}).items()}

    def get_period_data(self, location: LocationRef, date_range: DateRange) -> PeriodData:
        records = self.data.get(_location_code(location), {})
        return PeriodData(
            transactions=filter_by_period(records.get("transactions", []), date_range, "end_time"),
            expenses=filter_by_period(records.get("expenses", []), date_range, "timestamp"),
            other_incomes=filter_by_period(records.get("other_incomes", []), date_range, "timestamp")
        )


class BaseReportService:
    """Base service class for all report services"""

    def __init__(self, db: Optional[Session] = None, repository: Optional[PeriodDataRepository] = None):
        if repository is None:
            if db is None:
                raise ValueError("Se requiere una sesión de base de datos o un repositorio")
            repository = SqlPeriodDataRepository(db)
        self.db = db
        self.repository = repository

    def _get_period_data(self, location: LocationRef, date_range: DateRange) -> PeriodData:
        return self.repository.get_period_data(location, date_range)
