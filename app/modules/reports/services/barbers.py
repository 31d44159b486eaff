"""
Barber Reports Service

Ingresos por barbero (servicios, productos, total) y comisiones semanales
calculadas con la tabla de niveles.
"""

from collections import defaultdict
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

from app.common.validators import coerce_amount
from app.modules.catalog.models import ItemType
from app.modules.staff.models import Staff, StaffRole
from app.modules.reports.utils.periods import DateRange, field_value, week_range
from .base import BaseReportService, LocationRef
from .commission import CommissionTier, calculate_commission, qualifying_totals


def _key(value: Any) -> str:
    return str(value) if value is not None else ""


def _role(member: Any) -> Any:
    role = field_value(member, "role")
    return getattr(role, "value", role)


class BarberReportService(BaseReportService):
    """Service for barber performance and commissions"""

    def _barbers(self, location: LocationRef, barbers: Optional[Sequence[Any]]) -> List[Any]:
        if barbers is not None:
            return list(barbers)
        if self.db is None:
            return []
        location_id = getattr(location, "id", None)
        query = self.db.query(Staff).filter(
            Staff.deleted_at.is_(None),
            Staff.role.in_([StaffRole.BARBER, StaffRole.HEAD_BARBER])
        )
        if location_id is not None:
            query = query.filter(Staff.location_id == location_id)
        return query.order_by(Staff.name).all()

    def _transactions_by_barber(self, transactions: Sequence[Any]) -> Dict[str, List[Any]]:
        grouped: Dict[str, List[Any]] = defaultdict(list)
        for tx in transactions:
            grouped[_key(field_value(tx, "barber_id"))].append(tx)
        return grouped

    def _commission_for(self, member: Any, transactions: Sequence[Any],
                        tiers: Optional[Sequence[CommissionTier]]) -> Dict[str, float]:
        """Comisión del periodo: la tabla de niveles se aplica semana por semana"""
        by_week: Dict[datetime, List[Any]] = defaultdict(list)
        for tx in transactions:
            end_time = field_value(tx, "end_time")
            if end_time is None:
                continue
            week_start, _ = week_range(end_time)
            by_week[week_start].extend(field_value(tx, "items") or [])

        commission = 0.0
        qualifying_revenue = 0.0
        qualifying_count = 0
        for items in by_week.values():
            totals = qualifying_totals(items)
            result = calculate_commission(
                role=_role(member),
                weekly_service_count=totals["count"],
                qualifying_revenue=totals["revenue"],
                commission_percentage=field_value(member, "commission_percentage"),
                tiers=tiers
            )
            commission += result.commission_earned
            qualifying_revenue += totals["revenue"]
            qualifying_count += totals["count"]

        return {
            "commission_earned": commission,
            "qualifying_revenue": qualifying_revenue,
            "qualifying_services": qualifying_count,
        }

    def get_barber_report(
        self,
        location: LocationRef,
        date_range: DateRange,
        barbers: Optional[Sequence[Any]] = None,
        tiers: Optional[Sequence[CommissionTier]] = None
    ) -> Dict[str, Any]:
        """Ingresos y comisión de cada barbero en el periodo"""
        data = self._get_period_data(location, date_range)
        grouped = self._transactions_by_barber(data.transactions)

        rows = []
        for member in self._barbers(location, barbers):
            transactions = grouped.get(_key(field_value(member, "id")), [])
            service_revenue = 0.0
            product_revenue = 0.0
            for tx in transactions:
                for item in field_value(tx, "items") or []:
                    subtotal = (
                        coerce_amount(field_value(item, "price"), "price")
                        * coerce_amount(field_value(item, "quantity"), "quantity")
                    )
                    if field_value(item, "type") == ItemType.SERVICE:
                        service_revenue += subtotal
                    else:
                        product_revenue += subtotal

            commission = self._commission_for(member, transactions, tiers)
            rows.append({
                "barber_id": _key(field_value(member, "id")),
                "name": field_value(member, "name"),
                "role": _role(member),
                "transactions_count": len(transactions),
                "total_revenue": sum(coerce_amount(field_value(tx, "total_amount"), "total_amount") for tx in transactions),
                "service_revenue": service_revenue,
                "product_revenue": product_revenue,
                **commission,
            })

        rows.sort(key=lambda row: row["total_revenue"], reverse=True)
        return {
            "period_start": date_range.start_date,
            "period_end": date_range.end_date,
            "barbers": rows,
        }

    def get_weekly_commissions(
        self,
        location: LocationRef,
        reference: Optional[datetime] = None,
        barbers: Optional[Sequence[Any]] = None,
        tiers: Optional[Sequence[CommissionTier]] = None
    ) -> Dict[str, Any]:
        """Comisión de la semana en curso y avance al siguiente nivel"""
        week_start, week_end = week_range(reference or datetime.now())
        data = self._get_period_data(location, DateRange(week_start.date(), week_end.date()))
        grouped = self._transactions_by_barber(data.transactions)

        rows = []
        for member in self._barbers(location, barbers):
            items = [
                item
                for tx in grouped.get(_key(field_value(member, "id")), [])
                for item in (field_value(tx, "items") or [])
            ]
            totals = qualifying_totals(items)
            result = calculate_commission(
                role=_role(member),
                weekly_service_count=totals["count"],
                qualifying_revenue=totals["revenue"],
                commission_percentage=field_value(member, "commission_percentage"),
                tiers=tiers
            )
            rows.append({
                "barber_id": _key(field_value(member, "id")),
                "name": field_value(member, "name"),
                "role": _role(member),
                "service_count": totals["count"],
                "qualifying_revenue": totals["revenue"],
                **result.to_dict(),
            })

        return {
            "week_start": week_start,
            "week_end": week_end,
            "barbers": rows,
        }
