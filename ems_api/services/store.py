"""Read-only queries against the credential and energy report tables."""

from typing import Any

from sqlalchemy import text
from sqlalchemy.orm import Session

from ems_api.models import User

# SELECT * so measurement columns pass through untouched.
_REPORTS_ASC = text("SELECT * FROM energy_reports ORDER BY reading_date ASC")
_REPORTS_DESC = text("SELECT * FROM energy_reports ORDER BY reading_date DESC")


def find_user_by_credentials(db: Session, user_name: str, password: str) -> User | None:
    """Return the first user whose name and password both match exactly (plain equality)."""
    return (
        db.query(User)
        .filter(User.user_name == user_name, User.password == password)
        .first()
    )


def fetch_energy_reports(db: Session, *, newest_first: bool = False) -> list[dict[str, Any]]:
    """Load every energy report row as a plain dict, ordered by reading_date."""
    result = db.execute(_REPORTS_DESC if newest_first else _REPORTS_ASC)
    return [dict(row) for row in result.mappings()]
