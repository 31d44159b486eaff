"""
Common mixins for location-scoped models
"""
from sqlalchemy import Column, DateTime, ForeignKey, Integer
from sqlalchemy.sql import func


class LocationMixin:
    """Mixin for models that belong to a single sede (location)"""

    location_id = Column(Integer, ForeignKey("sedes.id"), nullable=False, index=True)


class TimestampMixin:
    """Mixin for models that need timestamp tracking"""

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)


class SoftDeleteMixin:
    """Mixin for soft delete functionality"""

    deleted_at = Column(DateTime(timezone=True), nullable=True)

    def soft_delete(self):
        self.deleted_at = func.now()
        self.is_active = False
