"""
Utilities for Reports module

Provides CSV export functionality and the row builders used by
report endpoints with export=csv.
"""

import csv
import io
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List

from fastapi import Response


def create_csv_response(
    data: List[Dict[str, Any]],
    filename: str,
    headers: Dict[str, str] = None
) -> Response:
    """
    Create a CSV response from a list of dictionaries.

    Args:
        data: List of dictionaries with report data
        filename: Name for the CSV file
        headers: Optional mapping of field names to CSV headers

    Returns:
        FastAPI Response with CSV content
    """
    if not data:
        # Return empty CSV with just headers
        csv_content = ""
        if headers:
            csv_content = ",".join(headers.values()) + "\n"
    else:
        output = io.StringIO()

        fieldnames = list(headers.keys()) if headers else list(data[0].keys())
        csv_headers = list(headers.values()) if headers else fieldnames

        writer = csv.DictWriter(output, fieldnames=fieldnames)
        writer.writerow(dict(zip(fieldnames, csv_headers)))

        for row in data:
            writer.writerow({
                key: format_csv_value(value)
                for key, value in row.items()
                if key in fieldnames
            })

        csv_content = output.getvalue()
        output.close()

    return Response(
        content=csv_content,
        media_type="text/csv",
        headers={
            "Content-Disposition": f"attachment; filename={filename}",
            "Content-Type": "text/csv; charset=utf-8"
        }
    )


def format_csv_value(value: Any) -> str:
    """
    Format a value for CSV export.

    Montos con dos decimales; fechas en ISO; enums por su valor.
    """
    if value is None:
        return ""
    elif isinstance(value, bool):
        return "Sí" if value else "No"
    elif isinstance(value, float):
        return f"{value:.2f}"
    elif isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, (date, datetime)):
        return value.isoformat()
    elif isinstance(value, Enum):
        return str(value.value)
    else:
        return str(value)


def prepare_cash_register_csv(report_data: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Una fila por método de pago"""
    return [
        {
            "payment_method": entry["payment_method"],
            "transactions_count": entry["transactions_count"],
            "amount": entry["amount"],
            "amount_bs": entry["amount_bs"],
        }
        for entry in report_data["income_by_payment_method"]
    ]


def prepare_income_by_category_csv(report_data: Dict[str, Any]) -> List[Dict[str, Any]]:
    return [dict(entry) for entry in report_data["categories"]]


def prepare_earnings_by_item_csv(report_data: Dict[str, Any]) -> List[Dict[str, Any]]:
    return [dict(entry) for entry in report_data["items"]]


def prepare_barbers_csv(report_data: Dict[str, Any]) -> List[Dict[str, Any]]:
    return [dict(entry) for entry in report_data["barbers"]]


def prepare_distribution_csv(report_data: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Una fila por concepto del árbol de distribución"""
    tree = report_data["distribution"]
    rows = []
    for concept in (
        "net_profit", "local_share", "head_barber_share", "branch_net_share",
        "distribution_share", "franchisee_share", "partners_pool",
        "partners_share", "plant_share",
    ):
        if tree[concept] is not None:
            rows.append({"concept": concept, "amount": tree[concept]})
    for partner in tree["partners"]:
        rows.append({"concept": f"partner:{partner['name']}", "amount": partner["amount"]})
    rows.append({"concept": "unallocated_amount", "amount": tree["unallocated_amount"]})
    return rows


# CSV Headers mapping for better column names
CSV_HEADERS = {
    "cash_register": {
        "payment_method": "Método de Pago",
        "transactions_count": "Transacciones",
        "amount": "Monto (USD)",
        "amount_bs": "Monto (Bs.)"
    },
    "income_by_category": {
        "category": "Categoría",
        "amount": "Monto"
    },
    "earnings_by_item": {
        "name": "Ítem",
        "quantity": "Cantidad",
        "revenue": "Ingresos",
        "cost": "Costo",
        "net": "Ganancia"
    },
    "barbers": {
        "name": "Barbero",
        "role": "Rol",
        "transactions_count": "Transacciones",
        "service_revenue": "Ingresos Servicios",
        "product_revenue": "Ingresos Productos",
        "total_revenue": "Ingresos Totales",
        "commission_earned": "Comisión"
    },
    "distribution": {
        "concept": "Concepto",
        "amount": "Monto"
    }
}
