"""
Barber Reports Router

Rendimiento por barbero y comisiones de la semana.
"""

from datetime import date, datetime
from typing import Optional

from fastapi import APIRouter, Query

from app.dependencies.dbDependecies import db_dependency
from app.dependencies.locationDependencies import LocationContext
from app.dependencies.periodDependencies import PeriodContext
from ..services.barbers import BarberReportService
from ..schemas import BarberReportResponse, WeeklyCommissionResponse
from ..utils import create_csv_response, prepare_barbers_csv, CSV_HEADERS


router = APIRouter(prefix="/reports", tags=["Reports"])


@router.get("/barbers", response_model=None)
async def get_barber_report(
    location: LocationContext,
    date_range: PeriodContext,
    db: db_dependency,
    export: Optional[str] = Query(None, pattern="^(csv)$", description="Export format: csv")
):
    """
    Ingresos por barbero (servicios, productos y total) y comisión del periodo.
    La tabla de niveles se aplica a cada semana del periodo.
    """
    report_data = BarberReportService(db).get_barber_report(location, date_range)

    if export == "csv":
        return create_csv_response(
            prepare_barbers_csv(report_data),
            f"barberos_{location.code}.csv",
            CSV_HEADERS["barbers"]
        )

    return BarberReportResponse(**report_data)


@router.get("/commissions/weekly", response_model=WeeklyCommissionResponse)
async def get_weekly_commissions(
    location: LocationContext,
    db: db_dependency,
    reference_date: Optional[date] = Query(None, description="Día dentro de la semana a consultar (por defecto hoy)")
):
    """Comisión de la semana (lunes a domingo) y avance de cada barbero al siguiente nivel"""
    reference = datetime.combine(reference_date, datetime.min.time()) if reference_date else None
    return WeeklyCommissionResponse(**BarberReportService(db).get_weekly_commissions(location, reference))
