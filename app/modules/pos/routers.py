"""
Routers del módulo POS: cierres de caja y ajustes
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Query, status

from app.dependencies.dbDependecies import db_dependency
from app.dependencies.locationDependencies import LocationContext
from .schemas import DailyCloseCreate, DailyCloseOut, DailyCloseList, BcvRateOut, BcvRateUpdate
from .services import DailyCloseService, SettingsService


# ===== DAILY CLOSES ROUTER =====

daily_closes_router = APIRouter(prefix="/daily-closes", tags=["POS"])


@daily_closes_router.post("/", response_model=DailyCloseOut, status_code=status.HTTP_201_CREATED)
async def close_day(close_data: DailyCloseCreate, location: LocationContext, db: db_dependency):
    """
    Cerrar caja del día.

    - **close_date**: Día a cerrar (por defecto hoy)
    - **notes**: Notas del cierre

    Validaciones:
    - Un solo cierre por sede y día (409 si ya existe)
    """
    return DailyCloseService(db).close_day(location, close_data)


@daily_closes_router.get("/", response_model=DailyCloseList)
async def list_closes(
    location: LocationContext,
    db: db_dependency,
    limit: Optional[int] = Query(None, ge=1, le=1000, description="Límite de resultados")
):
    """Historial de cierres de la sede, más recientes primero"""
    closes = DailyCloseService(db).get_closes(location.id, limit)
    return DailyCloseList(
        closes=[DailyCloseOut.model_validate(c) for c in closes],
        total=len(closes)
    )


@daily_closes_router.get("/{close_id}", response_model=DailyCloseOut)
async def get_close(close_id: UUID, location: LocationContext, db: db_dependency):
    return DailyCloseService(db).get_close(close_id, location.id)


# ===== SETTINGS ROUTER =====

settings_router = APIRouter(prefix="/settings", tags=["POS"])


@settings_router.get("/bcv-rate", response_model=BcvRateOut)
async def get_bcv_rate(db: db_dependency):
    """Tasa BCV vigente (Bs. por USD)"""
    return BcvRateOut(bcv_rate=SettingsService(db).get_bcv_rate())


@settings_router.put("/bcv-rate", response_model=BcvRateOut)
async def update_bcv_rate(data: BcvRateUpdate, db: db_dependency):
    """Actualizar la tasa BCV. Debe ser un número mayor a 0."""
    return BcvRateOut(bcv_rate=SettingsService(db).update_bcv_rate(data.bcv_rate))
