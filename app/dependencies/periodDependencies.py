from datetime import date
from typing import Annotated, Optional
from fastapi import Depends, HTTPException, Query, status

from app.modules.reports.utils.periods import DateRange


def get_date_range(
    start_date: Optional[date] = Query(None, description="Fecha inicio (YYYY-MM-DD)"),
    end_date: Optional[date] = Query(None, description="Fecha fin (YYYY-MM-DD)"),
    preset: Optional[str] = Query(None, description="Periodo predefinido: today, month o year")
) -> DateRange:
    """Periodo del request: explícito, por preset, o sin límites si no se indica nada"""
    try:
        return DateRange.resolve(start_date, end_date, preset)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))


PeriodContext = Annotated[DateRange, Depends(get_date_range)]
