"""Filter or group energy report rows by meter number / machine name."""

import math
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any

UNKNOWN_MACHINE = "Unknown"

Row = dict[str, Any]


@dataclass(frozen=True)
class FilteredView:
    """Rows matching the meter_no OR machine_name criteria."""

    meter_no: int | float | None
    machine_name: str | None
    rows: list[Row]


@dataclass(frozen=True)
class MachineGroup:
    meter_no: Any
    machine_name: str
    rows: list[Row] = field(default_factory=list)


@dataclass(frozen=True)
class GroupedView:
    """All rows partitioned by meter/machine key, in first-seen key order."""

    groups: list[MachineGroup]


def to_number(value: Any) -> float | None:
    """
    Coerce a query parameter or column value to a number.
    Returns None for null, booleans, blanks, non-numeric strings and NaN.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float, Decimal)):
        number = float(value)
    else:
        s = str(value).strip()
        # Decimal() accepts digit separators ("1_000"); treat them as non-numeric.
        if not s or "_" in s:
            return None
        try:
            number = float(Decimal(s))
        except (InvalidOperation, ValueError):
            return None
    if math.isnan(number):
        return None
    return number


def _json_number(number: float | None) -> int | float | None:
    if number is None or math.isinf(number):
        return None
    return int(number) if number.is_integer() else number


def _matches(row: Row, meter_no: float | None, needle: str | None) -> bool:
    # Criteria are OR-combined: a row matching either one is kept.
    if meter_no is not None and to_number(row.get("meter_no")) == meter_no:
        return True
    name = row.get("machine_name")
    return bool(needle and name and needle in str(name).lower())


def filter_rows(rows: list[Row], meter_no: str | None, machine_name: str | None) -> FilteredView:
    target = to_number(meter_no) if meter_no else None
    needle = machine_name.lower() if machine_name else None
    matched = [row for row in rows if _matches(row, target, needle)]

    first = matched[0] if matched else {}
    if meter_no:
        echoed_meter = _json_number(target)
    else:
        echoed_meter = first.get("meter_no") or None
    return FilteredView(
        meter_no=echoed_meter,
        machine_name=first.get("machine_name") or machine_name or None,
        rows=matched,
    )


def group_rows(rows: list[Row]) -> GroupedView:
    groups: dict[Any, MachineGroup] = {}
    for row in rows:
        key = row.get("meter_no") or row.get("machine_name") or UNKNOWN_MACHINE
        group = groups.get(key)
        if group is None:
            group = MachineGroup(
                meter_no=row.get("meter_no") or None,
                machine_name=row.get("machine_name") or UNKNOWN_MACHINE,
            )
            groups[key] = group
        group.rows.append(row)
    return GroupedView(groups=list(groups.values()))


def build_meter_view(
    rows: list[Row],
    meter_no: str | None = None,
    machine_name: str | None = None,
) -> FilteredView | GroupedView:
    """
    Filter when either parameter is non-empty, otherwise group every row.
    Row order inside each result follows the input order.
    """
    if meter_no or machine_name:
        return filter_rows(rows, meter_no, machine_name)
    return group_rows(rows)
