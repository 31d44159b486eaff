"""
Script para poblar la base de datos con las sedes de la cadena.
"""
import logging

from sqlalchemy.orm import Session

from app.database.database import SessionLocal
from app.modules.locations.models import Location, LocationKind

logger = logging.getLogger(__name__)


CHAIN_LOCATIONS = [
    {"code": "MAGALLANES", "name": "Magallanes", "kind": LocationKind.STANDARD_BRANCH},
    {"code": "SARRIAS", "name": "Sarrias", "kind": LocationKind.SECONDARY_BRANCH},
    {"code": "PSYFN", "name": "Planta", "kind": LocationKind.CENTRAL_PLANT},
]


def populate_locations(db: Session) -> int:
    """Poblar la base de datos con las sedes. Retorna la cantidad creada."""

    existing = db.query(Location).count()
    if existing > 0:
        logger.info(f"Ya existen {existing} sedes en la base de datos")
        return 0

    for location_data in CHAIN_LOCATIONS:
        db.add(Location(**location_data))

    db.commit()
    logger.info(f"{len(CHAIN_LOCATIONS)} sedes creadas")
    return len(CHAIN_LOCATIONS)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    db = SessionLocal()
    try:
        populate_locations(db)
    finally:
        db.close()
