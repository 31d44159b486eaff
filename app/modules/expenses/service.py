"""
Lógica de negocio de gastos y otros ingresos
"""
import logging
from datetime import datetime
from typing import Any, Dict, List
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.modules.staff.models import Staff
from app.modules.reports.utils.periods import DateRange
from .models import Expense, OtherIncome
from .schemas import ExpenseCreate, OtherIncomeCreate, OtherIncomeUpdate

logger = logging.getLogger(__name__)


def _apply_period(query, column, date_range: DateRange):
    start = date_range.start_bound()
    end = date_range.end_bound()
    if start is not None:
        query = query.filter(column >= start)
    if end is not None:
        query = query.filter(column <= end)
    return query


class ExpenseService:
    """Servicio de gastos por sede"""

    def __init__(self, db: Session):
        self.db = db

    def create_expense(self, expense_data: ExpenseCreate, location_id: int) -> Expense:
        """Registrar un gasto. Los créditos deben apuntar a personal de la misma sede."""
        try:
            if expense_data.staff_id:
                member = self.db.query(Staff).filter(
                    Staff.id == expense_data.staff_id,
                    Staff.location_id == location_id
                ).first()
                if not member:
                    raise HTTPException(
                        status_code=status.HTTP_404_NOT_FOUND,
                        detail="Empleado no encontrado"
                    )

            expense = Expense(
                location_id=location_id,
                description=expense_data.description,
                amount=expense_data.amount,
                category=expense_data.category,
                timestamp=expense_data.timestamp or datetime.now(),
                staff_id=expense_data.staff_id
            )
            self.db.add(expense)
            self.db.commit()
            self.db.refresh(expense)

            logger.info(f"Expense registered: {expense.category.value} {expense.amount} in location {location_id}")
            return expense

        except HTTPException:
            raise
        except Exception as e:
            self.db.rollback()
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Error interno del servidor: {str(e)}"
            )

    def get_expense(self, expense_id: UUID, location_id: int) -> Expense:
        expense = self.db.query(Expense).filter(
            Expense.id == expense_id,
            Expense.location_id == location_id
        ).first()
        if not expense:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Gasto no encontrado")
        return expense

    def get_expenses(self, location_id: int, date_range: DateRange) -> List[Expense]:
        """Gastos del periodo, más recientes primero"""
        query = self.db.query(Expense).filter(Expense.location_id == location_id)
        query = _apply_period(query, Expense.timestamp, date_range)
        return query.order_by(Expense.timestamp.desc()).all()

    def get_expenses_split(self, location_id: int, date_range: DateRange) -> Dict[str, Any]:
        """Separar créditos a empleados del resto de gastos"""
        expenses = self.get_expenses(location_id, date_range)
        credits = [e for e in expenses if e.is_employee_credit]
        others = [e for e in expenses if not e.is_employee_credit]
        return {
            "employee_credits": credits,
            "other_expenses": others,
            "total_employee_credits": sum(e.amount or 0 for e in credits),
            "total_other_expenses": sum(e.amount or 0 for e in others),
        }

    def delete_expense(self, expense_id: UUID, location_id: int) -> None:
        expense = self.get_expense(expense_id, location_id)
        self.db.delete(expense)
        self.db.commit()
        logger.info(f"Expense deleted: {expense_id}")


class OtherIncomeService:
    """Servicio de otros ingresos por sede"""

    def __init__(self, db: Session):
        self.db = db

    def create_income(self, income_data: OtherIncomeCreate, location_id: int) -> OtherIncome:
        income = OtherIncome(
            location_id=location_id,
            description=income_data.description.strip(),
            amount=income_data.amount,
            category=income_data.category.strip(),
            timestamp=income_data.timestamp or datetime.now()
        )
        self.db.add(income)
        self.db.commit()
        self.db.refresh(income)
        logger.info(f"Other income registered: {income.category} {income.amount}")
        return income

    def get_income(self, income_id: UUID, location_id: int) -> OtherIncome:
        income = self.db.query(OtherIncome).filter(
            OtherIncome.id == income_id,
            OtherIncome.location_id == location_id
        ).first()
        if not income:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Ingreso no encontrado")
        return income

    def get_incomes(self, location_id: int, date_range: DateRange) -> List[OtherIncome]:
        query = self.db.query(OtherIncome).filter(OtherIncome.location_id == location_id)
        query = _apply_period(query, OtherIncome.timestamp, date_range)
        return query.order_by(OtherIncome.timestamp.desc()).all()

    def update_income(self, income_id: UUID, income_data: OtherIncomeUpdate, location_id: int) -> OtherIncome:
        income = self.get_income(income_id, location_id)
        for field, value in income_data.model_dump(exclude_unset=True).items():
            setattr(income, field, value)
        self.db.commit()
        self.db.refresh(income)
        return income

    def delete_income(self, income_id: UUID, location_id: int) -> None:
        income = self.get_income(income_id, location_id)
        self.db.delete(income)
        self.db.commit()
