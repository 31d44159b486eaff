"""
Models for the chain's sedes (branches and central plant).
"""
import enum

from sqlalchemy import Column, String, Integer, Enum

from app.database.database import Base


class LocationKind(str, enum.Enum):
    """Tipo de sede: define qué regla de distribución de ganancias aplica"""
    STANDARD_BRANCH = "standard_branch"     # Sucursal principal
    SECONDARY_BRANCH = "secondary_branch"   # Sucursal secundaria
    CENTRAL_PLANT = "central_plant"         # Planta central (sin franquiciado)

    @property
    def is_branch(self) -> bool:
        return self in (LocationKind.STANDARD_BRANCH, LocationKind.SECONDARY_BRANCH)


class Location(Base):
    """
    Sede de la cadena.
    Cada transacción, gasto y cierre de caja pertenece a exactamente una sede.
    """
    __tablename__ = "sedes"

    id = Column(Integer, primary_key=True, index=True)
    code = Column(String(30), nullable=False, unique=True, index=True)  # Ej: MAGALLANES
    name = Column(String(100), nullable=False)
    kind = Column(Enum(LocationKind), nullable=False, default=LocationKind.STANDARD_BRANCH)

    def __str__(self):
        return f"{self.name} ({self.code})"
