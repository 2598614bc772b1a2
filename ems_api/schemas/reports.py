"""Pydantic schemas for energy report responses."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class DashboardDataResponse(BaseModel):
    """All energy report rows, oldest first."""

    success: bool = True
    count: int = Field(..., ge=0)
    data: list[dict[str, Any]]


class MachineReadings(BaseModel):
    """
    Readings for one meter/machine (filtered or grouped).

    Serialized with the camel-cased / capitalised keys the dashboard expects.
    """

    model_config = ConfigDict(populate_by_name=True)

    success: bool = Field(default=True, alias="Success")
    meter_no: int | float | None = None
    machine_name: str | None = Field(default=None, alias="machineName")
    length: int = Field(..., ge=0)
    data: list[dict[str, Any]]


class GroupedMachinesResponse(BaseModel):
    """One MachineReadings entry per distinct meter/machine key."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = Field(default=True, alias="Success")
    machines: list[MachineReadings]
