"""
Financial Reports Router

Resumen de caja, ingresos por categoría, ganancia por ítem y tablero del día.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from app.common.validators import InvalidAmountError
from app.dependencies.dbDependecies import db_dependency
from app.dependencies.locationDependencies import LocationContext
from app.dependencies.periodDependencies import PeriodContext
from app.modules.pos.services import SettingsService
from ..services.financial import FinancialReportService
from ..schemas import (
    CashRegisterSummaryResponse,
    IncomeByCategoryResponse,
    EarningsByItemResponse,
    DashboardResponse
)
from ..utils import (
    create_csv_response,
    prepare_cash_register_csv,
    prepare_income_by_category_csv,
    prepare_earnings_by_item_csv,
    CSV_HEADERS
)


router = APIRouter(prefix="/reports", tags=["Reports"])


@router.get("/financial/cash-register", response_model=None)
async def get_cash_register_summary(
    location: LocationContext,
    date_range: PeriodContext,
    db: db_dependency,
    export: Optional[str] = Query(None, pattern="^(csv)$", description="Export format: csv")
):
    """
    Resumen de caja del periodo: ingresos, gastos, ganancia neta, ingresos por
    método de pago (con monto en Bs. a la tasa BCV) y listado de movimientos.
    """
    try:
        bcv_rate = SettingsService(db).get_bcv_rate()
        report_data = FinancialReportService(db).get_cash_register_summary(location, date_range, bcv_rate)
    except InvalidAmountError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))

    if export == "csv":
        filename = f"caja_{location.code}_{date_range.start_date or 'inicio'}_{date_range.end_date or 'hoy'}.csv"
        return create_csv_response(prepare_cash_register_csv(report_data), filename, CSV_HEADERS["cash_register"])

    return CashRegisterSummaryResponse.model_validate(report_data, from_attributes=True)


@router.get("/financial/income-by-category", response_model=None)
async def get_income_by_category(
    location: LocationContext,
    date_range: PeriodContext,
    db: db_dependency,
    export: Optional[str] = Query(None, pattern="^(csv)$", description="Export format: csv")
):
    """Ingresos por rubro (servicios de barbería, zona gamer, snacks, productos y otros ingresos)"""
    try:
        report_data = FinancialReportService(db).get_income_by_category(location, date_range)
    except InvalidAmountError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))

    if export == "csv":
        return create_csv_response(
            prepare_income_by_category_csv(report_data),
            f"ingresos_por_categoria_{location.code}.csv",
            CSV_HEADERS["income_by_category"]
        )

    return IncomeByCategoryResponse(**report_data)


@router.get("/financial/earnings-by-item", response_model=None)
async def get_earnings_by_item(
    location: LocationContext,
    date_range: PeriodContext,
    db: db_dependency,
    export: Optional[str] = Query(None, pattern="^(csv)$", description="Export format: csv")
):
    """Ganancia por ítem (ingresos menos costo de productos), de mayor a menor ingreso"""
    try:
        report_data = FinancialReportService(db).get_earnings_by_item(location, date_range)
    except InvalidAmountError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))

    if export == "csv":
        return create_csv_response(
            prepare_earnings_by_item_csv(report_data),
            f"ganancia_por_item_{location.code}.csv",
            CSV_HEADERS["earnings_by_item"]
        )

    return EarningsByItemResponse(**report_data)


@router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard(location: LocationContext, db: db_dependency):
    """Ventas de hoy, tickets activos y personal activo de la sede"""
    return DashboardResponse(**FinancialReportService(db).get_dashboard(location))
