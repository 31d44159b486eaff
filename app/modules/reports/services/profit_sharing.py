"""
Profit Distribution Service

Calcula la ganancia neta de una sede en un periodo y la reparte con el
calculador de distribución. También totaliza la parte de socios de todas las
sedes (por defecto, el año en curso).
"""

import logging
from collections import OrderedDict
from typing import Any, Dict, Optional, Sequence

from app.modules.locations.models import Location
from app.modules.reports.utils.periods import DateRange
from .base import BaseReportService
from .distribution import (
    ProfitDistributionConfig,
    calculate_profit_distribution,
    get_distribution_config,
)

logger = logging.getLogger(__name__)


class ProfitDistributionService(BaseReportService):
    """Service for location profit distribution"""

    def get_location_distribution(
        self,
        location: Location,
        date_range: DateRange,
        config: Optional[ProfitDistributionConfig] = None
    ) -> Dict[str, Any]:
        """Ganancia neta del periodo y su árbol de distribución"""
        data = self._get_period_data(location, date_range)
        net_profit = data.net_profit()
        distribution = calculate_profit_distribution(net_profit, location.kind, config)

        return {
            "location_code": location.code,
            "location_name": location.name,
            "location_kind": distribution.location_kind.value,
            "period_start": date_range.start_date,
            "period_end": date_range.end_date,
            "total_income": data.total_income(),
            "total_expenses": data.total_expenses(),
            "distribution": distribution.to_dict(),
        }

    def get_partners_total(
        self,
        locations: Sequence[Location],
        date_range: DateRange,
        config: Optional[ProfitDistributionConfig] = None
    ) -> Dict[str, Any]:
        """
        Parte de socios sumada en todas las sedes.

        De cada sucursal cuenta la parte de socios del pozo; de la planta,
        toda su parte de distribución.
        """
        config = config or get_distribution_config()

        per_location = []
        per_partner: "OrderedDict[str, Dict[str, Any]]" = OrderedDict(
            (partner.name, {"name": partner.name, "share_percentage": partner.share_percentage, "amount": 0.0})
            for partner in config.partners
        )
        total_partners_profit = 0.0
        unallocated = 0.0
        warnings = []

        for location in locations:
            data = self._get_period_data(location, date_range)
            distribution = calculate_profit_distribution(data.net_profit(), location.kind, config)

            per_location.append({
                "location_code": location.code,
                "location_kind": distribution.location_kind.value,
                "net_profit": distribution.net_profit,
                "partners_share": distribution.partners_share,
            })
            total_partners_profit += distribution.partners_share
            unallocated += distribution.unallocated_amount
            for allocation in distribution.partners:
                per_partner[allocation.name]["amount"] += allocation.amount
            for warning in distribution.warnings:
                if warning not in warnings:
                    warnings.append(warning)

        logger.info(f"Partners total computed over {len(per_location)} locations: {total_partners_profit}")
        return {
            "period_start": date_range.start_date,
            "period_end": date_range.end_date,
            "locations": per_location,
            "total_partners_profit": total_partners_profit,
            "partners": list(per_partner.values()),
            "unallocated_amount": unallocated,
            "warnings": warnings,
        }
