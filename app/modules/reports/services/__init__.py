"""
Services package for Reports module

Exports all report service classes for easy importing.
"""

from .financial import FinancialReportService
from .barbers import BarberReportService
from .profit_sharing import ProfitDistributionService

__all__ = [
    "FinancialReportService",
    "BarberReportService",
    "ProfitDistributionService"
]
