"""
Financial Reports Service

Resumen de caja por sede (ingresos, gastos, ganancia neta y métodos de pago),
ingresos por rubro, ganancia por ítem y el tablero del día.
"""

import logging
from collections import OrderedDict
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from app.common.validators import coerce_amount
from app.modules.catalog.models import IncomeBucket, ItemType, Product, income_bucket_for
from app.modules.sales.models import PaymentMethod, Ticket, TicketStatus
from app.modules.staff.models import Staff
from app.modules.reports.utils.periods import DateRange, field_value
from .base import BaseReportService, LocationRef

logger = logging.getLogger(__name__)


def _payment_method_label(value: Any) -> Optional[str]:
    if value is None:
        return None
    return getattr(value, "value", value)


def _is_bolivares(label: str) -> bool:
    try:
        return PaymentMethod(label).is_bolivares
    except ValueError:
        return False


def _items(transaction: Any) -> List[Any]:
    return list(field_value(transaction, "items") or [])


class FinancialReportService(BaseReportService):
    """Service for generating financial reports"""

    def get_cash_register_summary(
        self,
        location: LocationRef,
        date_range: DateRange,
        bcv_rate: float
    ) -> Dict[str, Any]:
        """
        Resumen de caja del periodo.

        Los métodos de pago en bolívares (todos salvo Efectivo USD) incluyen
        además el monto convertido a la tasa BCV.
        """
        data = self._get_period_data(location, date_range)

        total_income = data.total_income()
        total_expenses = data.total_expenses()

        by_method: "OrderedDict[str, Dict[str, Any]]" = OrderedDict()
        for tx in data.transactions:
            label = _payment_method_label(field_value(tx, "payment_method")) or "Sin método"
            entry = by_method.setdefault(label, {"payment_method": label, "amount": 0.0, "transactions_count": 0})
            entry["amount"] += coerce_amount(field_value(tx, "total_amount"), "total_amount")
            entry["transactions_count"] += 1

        income_by_payment_method = []
        for entry in by_method.values():
            entry["amount_bs"] = entry["amount"] * bcv_rate if _is_bolivares(entry["payment_method"]) else None
            income_by_payment_method.append(entry)

        return {
            "period_start": date_range.start_date,
            "period_end": date_range.end_date,
            "bcv_rate": bcv_rate,
            "total_income": total_income,
            "total_expenses": total_expenses,
            "net_profit": total_income - total_expenses,
            "income_by_payment_method": income_by_payment_method,
            "transactions": data.transactions,
            "expenses": data.expenses,
        }

    def get_income_by_category(self, location: LocationRef, date_range: DateRange) -> Dict[str, Any]:
        """
        Ingresos por rubro: servicios de barbería, zona gamer, snacks y
        productos (las cortesías no suman), más otros ingresos por su categoría.
        """
        data = self._get_period_data(location, date_range)

        totals: "OrderedDict[str, float]" = OrderedDict((bucket.value, 0.0) for bucket in IncomeBucket)
        for tx in data.transactions:
            for item in _items(tx):
                try:
                    bucket = income_bucket_for(field_value(item, "category"))
                except ValueError:
                    logger.warning(f"Item with unknown category skipped: {field_value(item, 'name')!r}")
                    continue
                if bucket is None:
                    continue
                price = coerce_amount(field_value(item, "price"), "price")
                quantity = coerce_amount(field_value(item, "quantity"), "quantity")
                totals[bucket.value] += price * quantity

        for income in data.other_incomes:
            category = field_value(income, "category") or "Otros"
            totals[category] = totals.get(category, 0.0) + coerce_amount(field_value(income, "amount"), "amount")

        categories = [
            {"category": category, "amount": amount}
            for category, amount in totals.items()
            if amount != 0
        ]
        return {
            "period_start": date_range.start_date,
            "period_end": date_range.end_date,
            "categories": categories,
            "total": sum(entry["amount"] for entry in categories),
        }

    def _product_costs(self, location: LocationRef) -> Dict[Any, float]:
        if self.db is None:
            return {}
        query = self.db.query(Product)
        location_id = getattr(location, "id", None)
        if location_id is not None:
            query = query.filter(Product.location_id == location_id)
        return {product.id: product.cost or 0.0 for product in query.all()}

    def get_earnings_by_item(
        self,
        location: LocationRef,
        date_range: DateRange,
        product_costs: Optional[Dict[Any, float]] = None
    ) -> Dict[str, Any]:
        """
        Ganancia por ítem: ingresos menos costo. El costo sale del catálogo y
        solo aplica a productos. Ordenado por ingresos de mayor a menor.
        """
        data = self._get_period_data(location, date_range)
        if product_costs is None:
            product_costs = self._product_costs(location)

        earnings: Dict[Any, Dict[str, Any]] = {}
        for tx in data.transactions:
            for item in _items(tx):
                item_id = field_value(item, "item_id")
                if item_id is None:
                    item_id = field_value(item, "name")
                quantity = coerce_amount(field_value(item, "quantity"), "quantity")
                price = coerce_amount(field_value(item, "price"), "price")
                item_type = field_value(item, "type")
                unit_cost = product_costs.get(item_id, 0.0) if item_type == ItemType.PRODUCT else 0.0

                entry = earnings.setdefault(item_id, {
                    "item_id": str(item_id),
                    "name": field_value(item, "name"),
                    "quantity": 0.0,
                    "revenue": 0.0,
                    "cost": 0.0,
                })
                entry["quantity"] += quantity
                entry["revenue"] += price * quantity
                entry["cost"] += coerce_amount(unit_cost, "cost") * quantity

        items = sorted(earnings.values(), key=lambda entry: entry["revenue"], reverse=True)
        for entry in items:
            entry["net"] = entry["revenue"] - entry["cost"]

        return {
            "period_start": date_range.start_date,
            "period_end": date_range.end_date,
            "items": items,
            "total_revenue": sum(entry["revenue"] for entry in items),
            "total_cost": sum(entry["cost"] for entry in items),
            "total_net": sum(entry["net"] for entry in items),
        }

    def get_dashboard(self, location: LocationRef, today: Optional[date] = None) -> Dict[str, Any]:
        """Ventas del día, tickets activos y personal de la sede"""
        today_range = DateRange.today(today)
        data = self._get_period_data(location, today_range)

        active_tickets = 0
        staff_count = 0
        location_id = getattr(location, "id", None)
        if self.db is not None and location_id is not None:
            active_tickets = self.db.query(Ticket).filter(
                Ticket.location_id == location_id,
                Ticket.status == TicketStatus.ACTIVE
            ).count()
            staff_count = self.db.query(Staff).filter(
                Staff.location_id == location_id,
                Staff.deleted_at.is_(None),
                Staff.is_active == True
            ).count()

        return {
            "date": today_range.start_date,
            "sales_today": data.total_income(),
            "transactions_today": len(data.transactions),
            "expenses_today": data.total_expenses(),
            "active_tickets": active_tickets,
            "staff_count": staff_count,
            "generated_at": datetime.now(),
        }
