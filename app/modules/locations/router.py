"""
API routes for sedes (branches and central plant).
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.database.database import get_db
from . import schemas
from .crud import LocationsCRUD

router = APIRouter(prefix="/locations", tags=["Locations"])


@router.get(
    "/",
    response_model=schemas.LocationList,
    summary="Get all locations",
    description="""
    Obtener todas las sedes de la cadena con su tipo.

    El tipo de sede define qué regla de distribución de ganancias aplica.
    """
)
async def get_locations(db: Session = Depends(get_db)):
    """Obtener todas las sedes."""
    locations = LocationsCRUD.get_all_locations(db)

    return schemas.LocationList(
        locations=[schemas.LocationOut.model_validate(location) for location in locations],
        total=len(locations)
    )


@router.post(
    "/",
    response_model=schemas.LocationOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create location"
)
async def create_location(data: schemas.LocationCreate, db: Session = Depends(get_db)):
    """Registrar una sede nueva."""
    return LocationsCRUD.create_location(db, data)


@router.get(
    "/{code}",
    response_model=schemas.LocationOut,
    summary="Get location by code"
)
async def get_location(code: str, db: Session = Depends(get_db)):
    """Obtener una sede por su código."""
    location = LocationsCRUD.get_location_by_code(db, code)

    if not location:
        raise HTTPException(
            status_code=404,
            detail=f"Location '{code}' not found"
        )

    return location


@router.patch(
    "/{code}",
    response_model=schemas.LocationOut,
    summary="Update location"
)
async def update_location(code: str, data: schemas.LocationUpdate, db: Session = Depends(get_db)):
    """Actualizar nombre o tipo de una sede."""
    location = LocationsCRUD.get_location_by_code(db, code)

    if not location:
        raise HTTPException(
            status_code=404,
            detail=f"Location '{code}' not found"
        )

    return LocationsCRUD.update_location(db, location, data)
