"""SQLAlchemy ORM models."""

from ems_api.models.base import Base
from ems_api.models.energy_report import EnergyReport
from ems_api.models.user import User

__all__ = ["Base", "EnergyReport", "User"]
