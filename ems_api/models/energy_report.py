"""ORM model for energy meter readings."""

from sqlalchemy import Column, DateTime, Integer, Numeric, String

from ems_api.models.base import Base


class EnergyReport(Base):
    """
    One meter reading. The API selects every column and returns rows unchanged,
    so measurement columns added later are passed through without code changes.
    """

    __tablename__ = "energy_reports"

    id = Column(Integer, primary_key=True, autoincrement=True)
    meter_no = Column(Integer, nullable=True, index=True)
    machine_name = Column(String(255), nullable=True)
    reading_date = Column(DateTime, nullable=False, index=True)
    kwh = Column(Numeric(14, 3), nullable=True)
    kvah = Column(Numeric(14, 3), nullable=True)
    kw = Column(Numeric(12, 3), nullable=True)
    voltage = Column(Numeric(10, 2), nullable=True)
    current = Column(Numeric(10, 2), nullable=True)
    power_factor = Column(Numeric(5, 3), nullable=True)
