"""
Pydantic schemas for Reports module

Modelos de respuesta de los reportes financieros, de distribución de
ganancias y de barberos.
"""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from app.modules.sales.schemas import TicketOut
from app.modules.expenses.schemas import ExpenseOut


# Financial Report Schemas
class PaymentMethodIncome(BaseModel):
    """Ingresos de un método de pago"""
    payment_method: str
    amount: float = Field(description="Monto en USD")
    amount_bs: Optional[float] = Field(None, description="Monto en Bs. a la tasa BCV (solo métodos en bolívares)")
    transactions_count: int


class CashRegisterSummaryResponse(BaseModel):
    """Resumen de caja de una sede"""
    period_start: Optional[date]
    period_end: Optional[date]
    bcv_rate: float
    total_income: float
    total_expenses: float
    net_profit: float
    income_by_payment_method: List[PaymentMethodIncome]
    transactions: List[TicketOut]
    expenses: List[ExpenseOut]


class CategoryIncome(BaseModel):
    category: str
    amount: float


class IncomeByCategoryResponse(BaseModel):
    period_start: Optional[date]
    period_end: Optional[date]
    categories: List[CategoryIncome]
    total: float


class ItemEarnings(BaseModel):
    item_id: str
    name: Optional[str]
    quantity: float
    revenue: float
    cost: float
    net: float


class EarningsByItemResponse(BaseModel):
    period_start: Optional[date]
    period_end: Optional[date]
    items: List[ItemEarnings]
    total_revenue: float
    total_cost: float
    total_net: float


class DashboardResponse(BaseModel):
    date: date
    sales_today: float
    transactions_today: int
    expenses_today: float
    active_tickets: int
    staff_count: int
    generated_at: datetime


# Profit Distribution Schemas
class PartnerShare(BaseModel):
    name: str
    share_percentage: float
    amount: float


class ProfitDistributionTree(BaseModel):
    """Árbol de distribución: los campos que no aplican a la planta van en null"""
    net_profit: float
    location_kind: str
    local_share: float
    head_barber_share: Optional[float] = None
    branch_net_share: Optional[float] = None
    distribution_share: float
    franchisee_share: Optional[float] = None
    partners_pool: Optional[float] = None
    partners_share: float
    plant_share: Optional[float] = None
    partners: List[PartnerShare]
    unallocated_amount: float
    warnings: List[str] = []


class LocationDistributionResponse(BaseModel):
    location_code: str
    location_name: str
    location_kind: str
    period_start: Optional[date]
    period_end: Optional[date]
    total_income: float
    total_expenses: float
    distribution: ProfitDistributionTree


class LocationPartnersShare(BaseModel):
    location_code: str
    location_kind: str
    net_profit: float
    partners_share: float


class PartnersTotalResponse(BaseModel):
    period_start: Optional[date]
    period_end: Optional[date]
    locations: List[LocationPartnersShare]
    total_partners_profit: float
    partners: List[PartnerShare]
    unallocated_amount: float
    warnings: List[str] = []


# Barber Report Schemas
class BarberPerformance(BaseModel):
    barber_id: str
    name: str
    role: str
    transactions_count: int
    total_revenue: float
    service_revenue: float
    product_revenue: float
    qualifying_services: int
    qualifying_revenue: float
    commission_earned: float


class BarberReportResponse(BaseModel):
    period_start: Optional[date]
    period_end: Optional[date]
    barbers: List[BarberPerformance]


class BarberWeeklyCommission(BaseModel):
    barber_id: str
    name: str
    role: str
    service_count: int
    qualifying_revenue: float
    percentage: float
    commission_earned: float
    services_needed: int
    next_threshold: Optional[int] = None
    at_max_tier: bool
    progress: float = Field(description="Avance al siguiente nivel (0-100)")


class WeeklyCommissionResponse(BaseModel):
    week_start: datetime
    week_end: datetime
    barbers: List[BarberWeeklyCommission]
