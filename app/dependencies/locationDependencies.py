from typing import Annotated
from fastapi import Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.database.database import get_db
from app.modules.locations.crud import LocationsCRUD
from app.modules.locations.models import Location


def get_location(
    location: str = Query(..., description="Código de la sede (ej: MAGALLANES)"),
    db: Session = Depends(get_db)
) -> Location:
    """Resolver la sede del request a partir de su código"""
    found = LocationsCRUD.get_location_by_code(db, location)
    if not found:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Sede '{location}' no encontrada"
        )
    return found


LocationContext = Annotated[Location, Depends(get_location)]
