"""ORM model for dashboard users (login credentials and role)."""

from sqlalchemy import Column, Integer, String

from ems_api.models.base import Base


class User(Base):
    """
    Login account. Passwords are stored and compared as-is (no hashing).

    role is carried into the session token; nothing here enforces it.
    """

    __tablename__ = "user_table"

    user_id = Column(Integer, primary_key=True, autoincrement=True)
    user_name = Column(String(255), nullable=False, index=True)
    password = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, default="user")
