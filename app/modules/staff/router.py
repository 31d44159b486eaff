"""
Endpoints del personal
"""
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Query, status

from app.dependencies.dbDependecies import db_dependency
from app.dependencies.locationDependencies import LocationContext
from app.core.config import settings
from .models import StaffRole
from .schemas import StaffCreate, StaffUpdate, StaffOut, StaffList
from .service import StaffService

router = APIRouter(prefix="/staff", tags=["Staff"])


@router.post("/", response_model=StaffOut, status_code=status.HTTP_201_CREATED)
async def create_staff(staff_data: StaffCreate, location: LocationContext, db: db_dependency):
    """Registrar personal en la sede indicada"""
    return StaffService(db).create_staff(staff_data, location.id)


@router.get("/", response_model=StaffList)
async def list_staff(
    db: db_dependency,
    location: LocationContext,
    role: Optional[StaffRole] = Query(None, description="Filtrar por rol"),
    active_only: bool = Query(False, description="Solo personal activo"),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    offset: int = Query(0, ge=0)
):
    """Listar el personal de una sede"""
    result = StaffService(db).get_staff(location.id, role, active_only, limit, offset)
    result["staff"] = [StaffOut.model_validate(member) for member in result["staff"]]
    return StaffList(**result)


@router.get("/{staff_id}", response_model=StaffOut)
async def get_staff_member(staff_id: UUID, db: db_dependency):
    """Obtener un miembro del personal"""
    return StaffService(db).get_staff_member(staff_id)


@router.patch("/{staff_id}", response_model=StaffOut)
async def update_staff(staff_id: UUID, staff_data: StaffUpdate, db: db_dependency):
    """Actualizar un miembro del personal"""
    return StaffService(db).update_staff(staff_id, staff_data)


@router.delete("/{staff_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_staff(staff_id: UUID, db: db_dependency):
    """Eliminar un miembro del personal"""
    StaffService(db).delete_staff(staff_id)
