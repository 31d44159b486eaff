"""
Validadores de montos y tasas
"""
import logging
import math
from typing import Any, Optional

from app.core.config import settings

logger = logging.getLogger(__name__)


class InvalidAmountError(ValueError):
    """Monto no numérico (None, NaN, texto) cuando no se permite tratarlo como 0"""


def coerce_amount(value: Any, field: str = "amount", missing_as_zero: Optional[bool] = None) -> float:
    """
    Convierte un monto a float.

    Contrato "faltante ⇒ 0": None, NaN, infinitos y valores no numéricos se
    tratan como 0 cuando MISSING_AMOUNT_AS_ZERO está activo (comportamiento por
    defecto). Si está desactivado se lanza InvalidAmountError.

    Args:
        value: Valor a convertir
        field: Nombre del campo (para mensajes y logs)
        missing_as_zero: Sobrescribe la configuración global

    Returns:
        Monto como float
    """
    if missing_as_zero is None:
        missing_as_zero = settings.MISSING_AMOUNT_AS_ZERO

    if isinstance(value, bool):
        number = None
    else:
        try:
            number = float(value)
        except (TypeError, ValueError):
            number = None

    if number is None or not math.isfinite(number):
        if missing_as_zero:
            if value is not None:
                logger.warning(f"Non-numeric value for '{field}' treated as 0: {value!r}")
            return 0.0
        raise InvalidAmountError(f"Monto inválido para '{field}': {value!r}")

    return number


def validate_positive_rate(rate: float) -> float:
    """Valida que una tasa de cambio sea un número finito mayor a 0"""
    if rate is None or isinstance(rate, bool):
        raise ValueError("Ingrese una tasa válida")
    try:
        number = float(rate)
    except (TypeError, ValueError):
        raise ValueError("Ingrese una tasa válida")
    if not math.isfinite(number) or number <= 0:
        raise ValueError("Ingrese una tasa válida")
    return number
