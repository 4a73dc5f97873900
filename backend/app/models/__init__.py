# Models package init
"""
Importing this package registers every ORM model on Base.metadata.
Alembic's env.py relies on that side effect.
"""

from app.models.donation import Donation
from app.models.event import Event, EventRegistration
from app.models.interaction import Interaction
from app.models.loan import Loan
from app.models.material import Material
from app.models.team import Team
from app.models.user import User

__all__ = [
    "Donation",
    "Event",
    "EventRegistration",
    "Interaction",
    "Loan",
    "Material",
    "Team",
    "User",
]
