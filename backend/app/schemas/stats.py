"""
Rural Sports Backend: Statistics Schemas
=========================================
"""

from app.schemas.base import CamelModel


class ParticipationStat(CamelModel):
    """One bar of the participation chart: event name → registration count."""
    name: str
    value: int
