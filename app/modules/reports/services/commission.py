"""
Comisiones semanales de barberos

Los barberos comisionan según la cantidad de servicios de barbería realizados
en la semana (lunes a domingo), con una tabla de niveles evaluada de mayor a
menor. El barbero principal tiene un porcentaje fijo y no usa la tabla.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from app.core.config import settings
from app.common.validators import coerce_amount
from app.modules.catalog.models import IncomeBucket, ItemType, income_bucket_for
from app.modules.staff.models import StaffRole
from app.modules.reports.utils.periods import field_value

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommissionTier:
    """Nivel: desde min_count servicios se cobra percentage; next_threshold es el siguiente nivel"""
    min_count: int
    percentage: float
    next_threshold: Optional[int] = None


DEFAULT_COMMISSION_TIERS = (
    CommissionTier(min_count=41, percentage=65, next_threshold=None),
    CommissionTier(min_count=30, percentage=60, next_threshold=41),
    CommissionTier(min_count=0, percentage=55, next_threshold=30),
)


def get_commission_tiers(source=None) -> List[CommissionTier]:
    """Tabla de niveles desde la configuración, ordenada de mayor a menor mínimo"""
    source = source or settings
    tiers = [
        CommissionTier(
            min_count=int(tier["min_count"]),
            percentage=float(tier["percentage"]),
            next_threshold=int(tier["next_threshold"]) if tier.get("next_threshold") is not None else None
        )
        for tier in source.COMMISSION_TIERS
    ]
    return sorted(tiers, key=lambda tier: tier.min_count, reverse=True)


@dataclass(frozen=True)
class TierResolution:
    percentage: float
    next_threshold: Optional[int]
    services_needed: int
    at_max_tier: bool


@dataclass(frozen=True)
class CommissionResult:
    percentage: float
    commission_earned: float
    services_needed: int
    next_threshold: Optional[int]
    at_max_tier: bool
    progress: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "percentage": self.percentage,
            "commission_earned": self.commission_earned,
            "services_needed": self.services_needed,
            "next_threshold": self.next_threshold,
            "at_max_tier": self.at_max_tier,
            "progress": self.progress,
        }


def resolve_commission_tier(weekly_service_count: int, tiers: Optional[Sequence[CommissionTier]] = None) -> TierResolution:
    """
    Nivel que corresponde a la cantidad de servicios de la semana.

    La tabla se evalúa de arriba hacia abajo: gana el primer nivel cuyo mínimo
    sea menor o igual a la cantidad (el límite inferior es inclusivo).
    """
    tiers = tiers if tiers is not None else get_commission_tiers()
    if not tiers:
        raise ValueError("La tabla de comisiones está vacía")

    ordered = sorted(tiers, key=lambda tier: tier.min_count, reverse=True)
    count = max(int(weekly_service_count or 0), 0)

    # Debajo del mínimo más bajo aplica el nivel más bajo
    tier = next((t for t in ordered if count >= t.min_count), ordered[-1])

    if tier.next_threshold is None:
        return TierResolution(
            percentage=tier.percentage,
            next_threshold=None,
            services_needed=0,
            at_max_tier=True
        )

    return TierResolution(
        percentage=tier.percentage,
        next_threshold=tier.next_threshold,
        services_needed=max(tier.next_threshold - count, 0),
        at_max_tier=False
    )


def _progress(count: int, next_threshold: Optional[int]) -> float:
    if next_threshold is None:
        return 100.0
    if next_threshold == 0:
        return 0.0
    return count / next_threshold * 100


def calculate_commission(
    role: Union[StaffRole, str],
    weekly_service_count: int,
    qualifying_revenue: float,
    commission_percentage: Optional[float] = None,
    tiers: Optional[Sequence[CommissionTier]] = None
) -> CommissionResult:
    """
    Calcular la comisión de un barbero.

    Args:
        role: Rol del barbero (barber o head_barber)
        weekly_service_count: Servicios de barbería realizados en la semana
        qualifying_revenue: Ingresos de esos servicios (precio × cantidad)
        commission_percentage: Porcentaje fijo del barbero principal
        tiers: Tabla de niveles (por defecto, la de la configuración)

    Returns:
        CommissionResult con porcentaje, comisión y avance al siguiente nivel
    """
    revenue = coerce_amount(qualifying_revenue, "qualifying_revenue")
    count = max(int(weekly_service_count or 0), 0)

    if role == StaffRole.HEAD_BARBER or role == StaffRole.HEAD_BARBER.value:
        percentage = commission_percentage
        if percentage is None:
            percentage = settings.HEAD_BARBER_DEFAULT_COMMISSION
        return CommissionResult(
            percentage=percentage,
            commission_earned=revenue * percentage / 100,
            services_needed=0,
            next_threshold=None,
            at_max_tier=True,
            progress=100.0
        )

    resolution = resolve_commission_tier(count, tiers)
    return CommissionResult(
        percentage=resolution.percentage,
        commission_earned=revenue * resolution.percentage / 100,
        services_needed=resolution.services_needed,
        next_threshold=resolution.next_threshold,
        at_max_tier=resolution.at_max_tier,
        progress=_progress(count, resolution.next_threshold)
    )


def is_qualifying_service(item: Any) -> bool:
    """Servicio de la línea principal de barbería (barberia, nordico). Zona gamer no cuenta."""
    item_type = field_value(item, "type")
    if item_type != ItemType.SERVICE and item_type != ItemType.SERVICE.value:
        return False
    try:
        return income_bucket_for(field_value(item, "category")) == IncomeBucket.BARBERSHOP_SERVICE
    except ValueError:
        return False


def qualifying_totals(items: Iterable[Any]) -> Dict[str, float]:
    """Cantidad y monto de servicios que cuentan para comisión"""
    count = 0
    revenue = 0.0
    for item in items:
        if not is_qualifying_service(item):
            continue
        quantity = int(coerce_amount(field_value(item, "quantity"), "quantity"))
        count += quantity
        revenue += coerce_amount(field_value(item, "price"), "price") * quantity
    return {"count": count, "revenue": revenue}
