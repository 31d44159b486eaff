"""
Profit Distribution Router

Distribución de la ganancia neta por sede y total de socios.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from app.common.validators import InvalidAmountError
from app.dependencies.dbDependecies import db_dependency
from app.dependencies.periodDependencies import PeriodContext
from app.modules.locations.crud import LocationsCRUD
from ..services.distribution import UnsupportedLocationKindError
from ..services.profit_sharing import ProfitDistributionService
from ..schemas import LocationDistributionResponse, PartnersTotalResponse
from ..utils import create_csv_response, prepare_distribution_csv, CSV_HEADERS
from ..utils.periods import DateRange


router = APIRouter(prefix="/reports/distribution", tags=["Reports"])


@router.get("/total", response_model=PartnersTotalResponse)
async def get_partners_total(db: db_dependency, date_range: PeriodContext):
    """
    Ganancia total de socios en todas las sedes.

    Sin fechas ni preset se usa el año en curso.
    """
    if date_range.is_unbounded:
        date_range = DateRange.this_year()

    try:
        locations = LocationsCRUD.get_all_locations(db)
        report_data = ProfitDistributionService(db).get_partners_total(locations, date_range)
    except (UnsupportedLocationKindError, InvalidAmountError) as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))

    return PartnersTotalResponse(**report_data)


@router.get("/{location_code}", response_model=None)
async def get_location_distribution(
    location_code: str,
    db: db_dependency,
    date_range: PeriodContext,
    export: Optional[str] = Query(None, pattern="^(csv)$", description="Export format: csv")
):
    """
    Ganancia neta de la sede en el periodo y su árbol de distribución
    (local, barbero principal, franquiciado, socios, planta).
    """
    location = LocationsCRUD.get_location_by_code(db, location_code)
    if not location:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Sede '{location_code}' no encontrada"
        )

    try:
        report_data = ProfitDistributionService(db).get_location_distribution(location, date_range)
    except (UnsupportedLocationKindError, InvalidAmountError) as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))

    if export == "csv":
        return create_csv_response(
            prepare_distribution_csv(report_data),
            f"distribucion_{location.code}.csv",
            CSV_HEADERS["distribution"]
        )

    return LocationDistributionResponse(**report_data)
