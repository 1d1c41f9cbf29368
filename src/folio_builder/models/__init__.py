"""Domain records and type definitions"""

from folio_builder.models.portfolio import (
    Experience,
    Portfolio,
    PortfolioUpdate,
    Project,
    User,
)

__all__ = [
    "Experience",
    "Portfolio",
    "PortfolioUpdate",
    "Project",
    "User",
]
