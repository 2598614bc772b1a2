"""Energy report endpoints: protected dashboard feed and the meter/machine view."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ems_api.api.deps import CurrentUserDep
from ems_api.core.database import get_db
from ems_api.core.errors import InternalError
from ems_api.schemas.reports import (
    DashboardDataResponse,
    GroupedMachinesResponse,
    MachineReadings,
)
from ems_api.services.meter_view import FilteredView, GroupedView, build_meter_view
from ems_api.services.store import fetch_energy_reports

logger = logging.getLogger(__name__)

router = APIRouter()

QUERY_ERROR_MESSAGE = "Database query error"


@router.get("/ems-dashboard/data", response_model=DashboardDataResponse)
def get_dashboard_data(
    db: Annotated[Session, Depends(get_db)],
    _user: CurrentUserDep,
) -> DashboardDataResponse:
    """Return every energy report row ordered by reading_date, oldest first."""
    try:
        rows = fetch_energy_reports(db)
    except SQLAlchemyError as e:
        logger.exception("Dashboard data query failed")
        raise InternalError(str(e), message=QUERY_ERROR_MESSAGE, success=False) from e
    return DashboardDataResponse(count=len(rows), data=rows)


def _to_response(view: FilteredView | GroupedView) -> MachineReadings | GroupedMachinesResponse:
    if isinstance(view, FilteredView):
        return MachineReadings(
            meter_no=view.meter_no,
            machine_name=view.machine_name,
            length=len(view.rows),
            data=view.rows,
        )
    return GroupedMachinesResponse(
        machines=[
            MachineReadings(
                meter_no=group.meter_no,
                machine_name=group.machine_name,
                length=len(group.rows),
                data=group.rows,
            )
            for group in view.groups
        ]
    )


@router.get(
    "/get-data-meter-wise",
    response_model=MachineReadings | GroupedMachinesResponse,
)
def get_data_meter_wise(
    db: Annotated[Session, Depends(get_db)],
    meter_no: Annotated[str | None, Query()] = None,
    machine_name: Annotated[str | None, Query()] = None,
) -> MachineReadings | GroupedMachinesResponse:
    """
    Readings newest first. With meter_no or machine_name, return rows matching
    either one (OR); with neither, return one entry per meter/machine.
    """
    try:
        rows = fetch_energy_reports(db, newest_first=True)
    except SQLAlchemyError as e:
        logger.exception("Meter-wise data query failed")
        raise InternalError(str(e), message=QUERY_ERROR_MESSAGE, Success=False) from e
    return _to_response(build_meter_view(rows, meter_no, machine_name))
