"""
Filtro de periodos para reportes

Un periodo es un rango de fechas calendario inclusivo en ambos extremos:
el inicio se expande a las 00:00:00.000 y el fin a las 23:59:59.999 del día.
Cualquiera de los dos extremos puede omitirse (sin límite por ese lado).
"""

import calendar
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Any, Iterable, List, Optional, Tuple


START_OF_DAY = time(0, 0, 0, 0)
END_OF_DAY = time(23, 59, 59, 999000)

PRESETS = ("today", "month", "year")


@dataclass(frozen=True)
class DateRange:
    """Rango de fechas para reportes"""
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    def start_bound(self) -> Optional[datetime]:
        if self.start_date is None:
            return None
        return datetime.combine(self.start_date, START_OF_DAY)

    def end_bound(self) -> Optional[datetime]:
        if self.end_date is None:
            return None
        return datetime.combine(self.end_date, END_OF_DAY)

    @property
    def is_unbounded(self) -> bool:
        return self.start_date is None and self.end_date is None

    def contains(self, value: Optional[datetime]) -> bool:
        """True si el instante cae dentro del rango (extremos incluidos)"""
        if self.is_unbounded:
            return True
        if value is None:
            return False
        if isinstance(value, date) and not isinstance(value, datetime):
            value = datetime.combine(value, START_OF_DAY)
        start = self.start_bound()
        end = self.end_bound()
        if start is not None and value < start:
            return False
        if end is not None and value > end:
            return False
        return True

    # Presets. Son los únicos que leen el reloj; `today` permite fijarlo.

    @classmethod
    def today(cls, today: Optional[date] = None) -> "DateRange":
        today = today or date.today()
        return cls(today, today)

    @classmethod
    def this_month(cls, today: Optional[date] = None) -> "DateRange":
        today = today or date.today()
        last_day = calendar.monthrange(today.year, today.month)[1]
        return cls(today.replace(day=1), today.replace(day=last_day))

    @classmethod
    def this_year(cls, today: Optional[date] = None) -> "DateRange":
        today = today or date.today()
        return cls(date(today.year, 1, 1), date(today.year, 12, 31))

    @classmethod
    def from_preset(cls, preset: str, today: Optional[date] = None) -> "DateRange":
        if preset == "today":
            return cls.today(today)
        if preset == "month":
            return cls.this_month(today)
        if preset == "year":
            return cls.this_year(today)
        raise ValueError(f"Preset de periodo desconocido: {preset!r} (use {', '.join(PRESETS)})")

    @classmethod
    def resolve(
        cls,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        preset: Optional[str] = None,
        today: Optional[date] = None
    ) -> "DateRange":
        """Rango explícito o, si se indica, el de un preset (el preset tiene prioridad)"""
        if preset:
            return cls.from_preset(preset, today)
        if start_date and end_date and start_date > end_date:
            raise ValueError("La fecha de inicio debe ser anterior o igual a la fecha de fin")
        return cls(start_date, end_date)


def field_value(record: Any, field: str) -> Any:
    if isinstance(record, dict):
        return record.get(field)
    return getattr(record, field, None)


def filter_by_period(records: Iterable[Any], date_range: DateRange, field: str) -> List[Any]:
    """
    Registros cuyo campo de fecha cae dentro del rango.

    Acepta objetos ORM, dataclasses o dicts. Sin extremos devuelve todos los
    registros en su orden original. Los registros sin fecha quedan fuera de
    cualquier rango acotado.
    """
    if date_range.is_unbounded:
        return list(records)
    return [record for record in records if date_range.contains(field_value(record, field))]


def week_range(reference: datetime) -> Tuple[datetime, datetime]:
    """
    Semana ISO que contiene `reference`: lunes 00:00:00 a domingo 23:59:59.999.
    Un domingo pertenece a la semana que empezó el lunes anterior (6 días antes).
    """
    if not isinstance(reference, datetime):
        reference = datetime.combine(reference, START_OF_DAY)
    monday = reference.date() - timedelta(days=reference.weekday())
    sunday = monday + timedelta(days=6)
    return datetime.combine(monday, START_OF_DAY), datetime.combine(sunday, END_OF_DAY)
