"""SQLAlchemy declarative base for myhome_auth models.

This provides a separate Base for auth models. The consuming application
must create AuthBase.metadata alongside its own metadata.

Examples
--------
async with engine.begin() as conn:
    await conn.run_sync(Base.metadata.create_all)
    await conn.run_sync(AuthBase.metadata.create_all)
"""

from sqlalchemy.orm import DeclarativeBase


class AuthBase(DeclarativeBase):
    """Declarative base for myhome_auth models."""
