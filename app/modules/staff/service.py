"""
Lógica de negocio para el personal
"""
import logging
from typing import Any, Dict, Optional
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .models import Staff, StaffRole
from .schemas import StaffCreate, StaffUpdate

logger = logging.getLogger(__name__)


class StaffService:
    """Servicio para gestión del personal"""

    def __init__(self, db: Session):
        self.db = db

    def create_staff(self, staff_data: StaffCreate, location_id: int) -> Staff:
        """Registrar un miembro del personal en una sede"""
        try:
            new_staff = Staff(location_id=location_id, is_active=True, **staff_data.model_dump())

            self.db.add(new_staff)
            self.db.commit()
            self.db.refresh(new_staff)

            logger.info(f"Staff created: {new_staff.name} ({new_staff.role.value}) in location {location_id}")
            return new_staff

        except IntegrityError:
            self.db.rollback()
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Error de integridad al registrar el personal"
            )
        except Exception as e:
            self.db.rollback()
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Error interno del servidor: {str(e)}"
            )

    def get_staff_member(self, staff_id: UUID) -> Staff:
        """Obtener un miembro del personal (404 si no existe o fue eliminado)"""
        member = self.db.query(Staff).filter(
            Staff.id == staff_id,
            Staff.deleted_at.is_(None)
        ).first()

        if not member:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Personal no encontrado"
            )
        return member

    def update_staff(self, staff_id: UUID, staff_data: StaffUpdate) -> Staff:
        """Actualizar datos del personal"""
        try:
            member = self.get_staff_member(staff_id)

            for field, value in staff_data.model_dump(exclude_unset=True).items():
                setattr(member, field, value)

            self.db.commit()
            self.db.refresh(member)
            return member

        except HTTPException:
            raise
        except Exception as e:
            self.db.rollback()
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Error interno del servidor: {str(e)}"
            )

    def delete_staff(self, staff_id: UUID) -> None:
        """Eliminar (soft delete) un miembro del personal"""
        member = self.get_staff_member(staff_id)
        member.soft_delete()
        self.db.commit()
        logger.info(f"Staff deleted: {member.name}")

    def get_staff(self, location_id: Optional[int] = None, role: Optional[StaffRole] = None,
                  active_only: bool = False, limit: int = 100, offset: int = 0) -> Dict[str, Any]:
        """Obtener lista de personal"""
        query = self.db.query(Staff).filter(Staff.deleted_at.is_(None))

        if location_id is not None:
            query = query.filter(Staff.location_id == location_id)
        if role:
            query = query.filter(Staff.role == role)
        if active_only:
            query = query.filter(Staff.is_active == True)

        query = query.order_by(Staff.name)

        total = query.count()
        staff = query.offset(offset).limit(limit).all()

        return {
            "staff": staff,
            "total": total,
            "limit": limit,
            "offset": offset
        }
