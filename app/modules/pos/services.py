"""
Servicios del módulo POS: cierres de caja y tasa BCV
"""

import logging
from datetime import date
from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.common.validators import validate_positive_rate
from app.modules.locations.models import Location
from app.modules.reports.services.financial import FinancialReportService
from app.modules.reports.utils.periods import DateRange
from .models import AppSetting, DailyClose, BCV_RATE_KEY
from .schemas import DailyCloseCreate

logger = logging.getLogger(__name__)


class SettingsService:
    """Servicio para ajustes de la aplicación"""

    def __init__(self, db: Session):
        self.db = db

    def get_bcv_rate(self) -> float:
        """Tasa BCV guardada o la tasa inicial de la configuración"""
        setting = self.db.query(AppSetting).filter(AppSetting.key == BCV_RATE_KEY).first()
        if not setting:
            return settings.DEFAULT_BCV_RATE
        try:
            return validate_positive_rate(setting.value)
        except ValueError:
            logger.warning(f"Stored BCV rate is invalid ({setting.value!r}), using default")
            return settings.DEFAULT_BCV_RATE

    def update_bcv_rate(self, rate: float) -> float:
        """Actualizar la tasa BCV (debe ser mayor a 0)"""
        try:
            rate = validate_positive_rate(rate)
        except ValueError as e:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=str(e)
            )

        setting = self.db.query(AppSetting).filter(AppSetting.key == BCV_RATE_KEY).first()
        if setting:
            setting.value = str(rate)
        else:
            self.db.add(AppSetting(key=BCV_RATE_KEY, value=str(rate)))
        self.db.commit()

        logger.info(f"BCV rate updated: {rate}")
        return rate


class DailyCloseService:
    """Servicio para cierres de caja diarios"""

    def __init__(self, db: Session):
        self.db = db

    def close_day(self, location: Location, close_data: DailyCloseCreate) -> DailyClose:
        """
        Cerrar caja de un día.

        Congela los totales del día (ingresos, gastos, ganancia neta, ingresos
        por método de pago y transacciones). Un segundo cierre del mismo día
        en la misma sede devuelve 409.
        """
        close_date = close_data.close_date or date.today()
        try:
            existing = self.db.query(DailyClose).filter(
                DailyClose.location_id == location.id,
                DailyClose.close_date == close_date
            ).first()
            if existing:
                raise HTTPException(
                    status_code=status.HTTP_409_CONFLICT,
                    detail=f"Ya existe un cierre de caja para {close_date.isoformat()}"
                )

            bcv_rate = SettingsService(self.db).get_bcv_rate()
            summary = FinancialReportService(self.db).get_cash_register_summary(
                location, DateRange(close_date, close_date), bcv_rate
            )

            transactions = [
                {
                    "id": str(tx.id),
                    "customer_name": tx.customer_name,
                    "payment_method": tx.payment_method.value if tx.payment_method else None,
                    "total_amount": tx.total_amount or 0.0,
                    "end_time": tx.end_time.isoformat() if tx.end_time else None,
                }
                for tx in summary["transactions"]
            ]

            daily_close = DailyClose(
                location_id=location.id,
                close_date=close_date,
                total_income=summary["total_income"],
                total_expenses=summary["total_expenses"],
                net_profit=summary["net_profit"],
                transactions_count=len(transactions),
                income_by_payment_method=summary["income_by_payment_method"],
                transactions=transactions,
                notes=close_data.notes
            )
            self.db.add(daily_close)
            self.db.commit()
            self.db.refresh(daily_close)

            logger.info(
                f"Daily close registered: {location.code} {close_date} "
                f"income={daily_close.total_income} expenses={daily_close.total_expenses}"
            )
            return daily_close

        except HTTPException:
            raise
        except IntegrityError:
            self.db.rollback()
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Ya existe un cierre de caja para ese día"
            )
        except Exception as e:
            self.db.rollback()
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Error interno del servidor: {str(e)}"
            )

    def get_closes(self, location_id: int, limit: Optional[int] = None) -> List[DailyClose]:
        """Historial de cierres, más recientes primero"""
        query = self.db.query(DailyClose).filter(
            DailyClose.location_id == location_id
        ).order_by(DailyClose.close_date.desc(), DailyClose.created_at.desc())
        if limit:
            query = query.limit(limit)
        return query.all()

    def get_close(self, close_id, location_id: int) -> DailyClose:
        daily_close = self.db.query(DailyClose).filter(
            DailyClose.id == close_id,
            DailyClose.location_id == location_id
        ).first()
        if not daily_close:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Cierre de caja no encontrado"
            )
        return daily_close
