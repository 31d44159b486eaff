"""
Distribución de ganancias por sede

Descompone la ganancia neta de un periodo en un árbol de participaciones:

Sucursales (principal y secundaria):
    ganancia neta
    ├── parte local (50%)
    │   ├── barbero principal (5%)
    │   └── neto sucursal (95%)
    └── parte de distribución (50%)
        ├── franquiciado (60%)
        └── pozo de socios (40%)
            ├── socios (60%) -> repartido por peso de cada socio
            └── planta (40%)

Planta central:
    ganancia neta
    ├── parte local (50%, no se divide)
    └── parte de distribución (50%) -> repartida directamente entre socios

Las tasas y la lista de socios vienen de la configuración. No se redondea en
pasos intermedios y las pérdidas se reparten con su signo negativo.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from app.core.config import settings
from app.common.validators import InvalidAmountError
from app.modules.locations.models import LocationKind

logger = logging.getLogger(__name__)

WEIGHT_TOLERANCE = 1e-9


class UnsupportedLocationKindError(ValueError):
    """Tipo de sede sin regla de distribución"""

    def __init__(self, kind: Any):
        self.kind = kind
        super().__init__(f"Tipo de sede no soportado para distribución: {kind!r}")


@dataclass(frozen=True)
class PartnerWeight:
    name: str
    share_percentage: float


@dataclass(frozen=True)
class ProfitDistributionConfig:
    """Tasas de reparto (fracciones) y socios con su porcentaje"""
    local_share_rate: float = 0.50
    head_barber_rate: float = 0.05
    franchisee_rate: float = 0.60
    pool_partners_rate: float = 0.60
    partners: Tuple[PartnerWeight, ...] = ()

    def __post_init__(self):
        names = [partner.name for partner in self.partners]
        duplicated = sorted({name for name in names if names.count(name) > 1})
        if duplicated:
            raise ValueError(f"Socios duplicados en la configuración: {', '.join(duplicated)}")

    @property
    def total_partner_weight(self) -> float:
        return sum(partner.share_percentage for partner in self.partners)

    @classmethod
    def from_settings(cls, source=None) -> "ProfitDistributionConfig":
        source = source or settings
        partners = tuple(
            PartnerWeight(name=str(partner["name"]), share_percentage=float(partner["share"]))
            for partner in source.PARTNERS
        )
        return cls(
            local_share_rate=source.LOCAL_SHARE_RATE,
            head_barber_rate=source.HEAD_BARBER_RATE,
            franchisee_rate=source.FRANCHISEE_RATE,
            pool_partners_rate=source.POOL_PARTNERS_RATE,
            partners=partners,
        )


def get_distribution_config() -> ProfitDistributionConfig:
    return ProfitDistributionConfig.from_settings(settings)


@dataclass
class PartnerAllocation:
    name: str
    share_percentage: float
    amount: float


@dataclass
class ProfitDistribution:
    """
    Árbol de distribución. Los campos que no aplican al tipo de sede quedan en
    None (la planta no tiene barbero principal, franquiciado ni pozo).
    """
    net_profit: float
    location_kind: LocationKind
    local_share: float
    distribution_share: float
    partners_share: float
    head_barber_share: Optional[float] = None
    branch_net_share: Optional[float] = None
    franchisee_share: Optional[float] = None
    partners_pool: Optional[float] = None
    plant_share: Optional[float] = None
    partners: List[PartnerAllocation] = field(default_factory=list)
    unallocated_amount: float = 0.0
    warnings: List[str] = field(default_factory=list)

    def leaves(self) -> Dict[str, float]:
        """Hojas del árbol: su suma es la ganancia neta"""
        if self.location_kind.is_branch:
            result = {
                "head_barber_share": self.head_barber_share,
                "branch_net_share": self.branch_net_share,
                "franchisee_share": self.franchisee_share,
                "plant_share": self.plant_share,
            }
        else:
            result = {"local_share": self.local_share}
        for partner in self.partners:
            result[f"partner:{partner.name}"] = partner.amount
        result["unallocated_amount"] = self.unallocated_amount
        return result

    def leaf_total(self) -> float:
        return sum(self.leaves().values())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "net_profit": self.net_profit,
            "location_kind": self.location_kind.value,
            "local_share": self.local_share,
            "head_barber_share": self.head_barber_share,
            "branch_net_share": self.branch_net_share,
            "distribution_share": self.distribution_share,
            "franchisee_share": self.franchisee_share,
            "partners_pool": self.partners_pool,
            "partners_share": self.partners_share,
            "plant_share": self.plant_share,
            "partners": [
                {"name": p.name, "share_percentage": p.share_percentage, "amount": p.amount}
                for p in self.partners
            ],
            "unallocated_amount": self.unallocated_amount,
            "warnings": list(self.warnings),
        }


def _resolve_kind(location_kind: Union[LocationKind, str]) -> LocationKind:
    if isinstance(location_kind, LocationKind):
        return location_kind
    try:
        return LocationKind(location_kind)
    except ValueError:
        raise UnsupportedLocationKindError(location_kind)


def _split_among_partners(amount: float, partners: Iterable[PartnerWeight]) -> Tuple[List[PartnerAllocation], float]:
    """
    Repartir por peso; devuelve las asignaciones y el residuo sin asignar.

    El residuo sale de los pesos (no de restar las asignaciones) para que
    conserve el signo del monto; con pesos que suman 100 es exactamente 0.
    """
    partners = list(partners)
    allocations = [
        PartnerAllocation(
            name=partner.name,
            share_percentage=partner.share_percentage,
            amount=amount * partner.share_percentage / 100
        )
        for partner in partners
    ]
    total_weight = sum(partner.share_percentage for partner in partners)
    if abs(total_weight - 100) <= WEIGHT_TOLERANCE:
        unallocated = 0.0
    else:
        unallocated = amount * (100 - total_weight) / 100
    return allocations, unallocated


def _roster_warnings(config: ProfitDistributionConfig) -> List[str]:
    if not config.partners:
        return ["No hay socios configurados: la parte de socios queda sin asignar"]
    total_weight = config.total_partner_weight
    if abs(total_weight - 100) > WEIGHT_TOLERANCE:
        return [
            f"Los porcentajes de socios suman {total_weight:g}% (no 100%): "
            f"el residuo queda sin asignar"
        ]
    return []


def calculate_profit_distribution(
    net_profit: float,
    location_kind: Union[LocationKind, str],
    config: Optional[ProfitDistributionConfig] = None
) -> ProfitDistribution:
    """
    Calcular la distribución de la ganancia neta de una sede.

    Args:
        net_profit: Ganancia neta del periodo (puede ser negativa)
        location_kind: Tipo de sede
        config: Tasas y socios (por defecto, los de la configuración)

    Returns:
        ProfitDistribution con todos los valores intermedios y hojas

    Raises:
        UnsupportedLocationKindError: si el tipo de sede no tiene regla
        InvalidAmountError: si la ganancia no es un número finito
    """
    kind = _resolve_kind(location_kind)
    config = config or get_distribution_config()

    if isinstance(net_profit, bool) or not isinstance(net_profit, (int, float)) or not math.isfinite(net_profit):
        raise InvalidAmountError(f"Ganancia neta inválida: {net_profit!r}")
    net_profit = float(net_profit)

    warnings = _roster_warnings(config)
    for warning in warnings:
        logger.warning(warning)

    local_share = net_profit * config.local_share_rate
    distribution_share = net_profit * (1 - config.local_share_rate)

    if kind == LocationKind.CENTRAL_PLANT:
        partners, unallocated = _split_among_partners(distribution_share, config.partners)
        return ProfitDistribution(
            net_profit=net_profit,
            location_kind=kind,
            local_share=local_share,
            distribution_share=distribution_share,
            partners_share=distribution_share,
            partners=partners,
            unallocated_amount=unallocated,
            warnings=warnings,
        )

    if not kind.is_branch:
        raise UnsupportedLocationKindError(kind)

    head_barber_share = local_share * config.head_barber_rate
    branch_net_share = local_share * (1 - config.head_barber_rate)
    franchisee_share = distribution_share * config.franchisee_rate
    partners_pool = distribution_share * (1 - config.franchisee_rate)
    partners_share = partners_pool * config.pool_partners_rate
    plant_share = partners_pool * (1 - config.pool_partners_rate)
    partners, unallocated = _split_among_partners(partners_share, config.partners)

    return ProfitDistribution(
        net_profit=net_profit,
        location_kind=kind,
        local_share=local_share,
        distribution_share=distribution_share,
        partners_share=partners_share,
        head_barber_share=head_barber_share,
        branch_net_share=branch_net_share,
        franchisee_share=franchisee_share,
        partners_pool=partners_pool,
        plant_share=plant_share,
        partners=partners,
        unallocated_amount=unallocated,
        warnings=warnings,
    )

