"""
Endpoints de gastos y otros ingresos
"""
from uuid import UUID

from fastapi import APIRouter, status

from app.dependencies.dbDependecies import db_dependency
from app.dependencies.locationDependencies import LocationContext
from app.dependencies.periodDependencies import PeriodContext
from . import schemas
from .service import ExpenseService, OtherIncomeService

router = APIRouter(prefix="/expenses", tags=["Expenses"])
incomes_router = APIRouter(prefix="/other-incomes", tags=["Expenses"])


# ===== GASTOS =====

@router.post("/", response_model=schemas.ExpenseOut, status_code=status.HTTP_201_CREATED)
async def create_expense(expense_data: schemas.ExpenseCreate, location: LocationContext, db: db_dependency):
    """
    Registrar gasto.

    Con categoría "Crédito a Empleado" se registra un crédito y staff_id es obligatorio.
    """
    return ExpenseService(db).create_expense(expense_data, location.id)


@router.get("/", response_model=schemas.ExpenseList)
async def list_expenses(
    location: LocationContext,
    db: db_dependency,
    date_range: PeriodContext
):
    """Gastos del periodo separados en créditos a empleados y otros gastos"""
    result = ExpenseService(db).get_expenses_split(location.id, date_range)
    return schemas.ExpenseList(
        employee_credits=[schemas.ExpenseOut.model_validate(e) for e in result["employee_credits"]],
        other_expenses=[schemas.ExpenseOut.model_validate(e) for e in result["other_expenses"]],
        total_employee_credits=result["total_employee_credits"],
        total_other_expenses=result["total_other_expenses"]
    )


@router.get("/{expense_id}", response_model=schemas.ExpenseOut)
async def get_expense(expense_id: UUID, location: LocationContext, db: db_dependency):
    return ExpenseService(db).get_expense(expense_id, location.id)


@router.delete("/{expense_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_expense(expense_id: UUID, location: LocationContext, db: db_dependency):
    ExpenseService(db).delete_expense(expense_id, location.id)


# ===== OTROS INGRESOS =====

@incomes_router.post("/", response_model=schemas.OtherIncomeOut, status_code=status.HTTP_201_CREATED)
async def create_income(income_data: schemas.OtherIncomeCreate, location: LocationContext, db: db_dependency):
    return OtherIncomeService(db).create_income(income_data, location.id)


@incomes_router.get("/", response_model=schemas.OtherIncomeList)
async def list_incomes(
    location: LocationContext,
    db: db_dependency,
    date_range: PeriodContext
):
    incomes = OtherIncomeService(db).get_incomes(location.id, date_range)
    return schemas.OtherIncomeList(
        incomes=[schemas.OtherIncomeOut.model_validate(i) for i in incomes],
        total=len(incomes),
        total_amount=sum(i.amount or 0 for i in incomes)
    )


@incomes_router.patch("/{income_id}", response_model=schemas.OtherIncomeOut)
async def update_income(income_id: UUID, income_data: schemas.OtherIncomeUpdate, location: LocationContext, db: db_dependency):
    return OtherIncomeService(db).update_income(income_id, income_data, location.id)


@incomes_router.delete("/{income_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_income(income_id: UUID, location: LocationContext, db: db_dependency):
    OtherIncomeService(db).delete_income(income_id, location.id)
