"""ORM models package for database tables.

This package provides SQLAlchemy ORM models representing database tables:
- UserRecord: Registered accounts
- PortfolioRecord: One portfolio document per user

All models inherit from the shared Base declarative class defined in data.db.
"""

from folio_builder.data.db import Base
from folio_builder.data.models.portfolio import PortfolioRecord
from folio_builder.data.models.user import UserRecord

__all__ = ["Base", "PortfolioRecord", "UserRecord"]
