"""
CRUD operations for sedes.
"""
import logging
from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .models import Location
from .schemas import LocationCreate, LocationUpdate

logger = logging.getLogger(__name__)


class LocationsCRUD:
    """CRUD operations for sedes."""

    @staticmethod
    def get_all_locations(db: Session) -> List[Location]:
        """Obtener todas las sedes ordenadas por código."""
        return db.query(Location).order_by(Location.code).all()

    @staticmethod
    def get_location_by_code(db: Session, code: str) -> Optional[Location]:
        """Obtener una sede por código (sin distinguir mayúsculas)."""
        return db.query(Location).filter(Location.code == code.strip().upper()).first()

    @staticmethod
    def create_location(db: Session, data: LocationCreate) -> Location:
        """Crear una sede nueva."""
        if LocationsCRUD.get_location_by_code(db, data.code):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"Ya existe una sede con el código '{data.code}'"
            )
        try:
            location = Location(**data.model_dump())
            db.add(location)
            db.commit()
            db.refresh(location)
            logger.info(f"Location created: {location.code} ({location.kind.value})")
            return location
        except IntegrityError:
            db.rollback()
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Error de integridad al crear la sede"
            )

    @staticmethod
    def update_location(db: Session, location: Location, data: LocationUpdate) -> Location:
        """Actualizar nombre o tipo de una sede."""
        for field, value in data.model_dump(exclude_unset=True).items():
            setattr(location, field, value)
        db.commit()
        db.refresh(location)
        return location
