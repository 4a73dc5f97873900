"""
Rural Sports Backend: Team Service
===================================

Village teams. Plain CRUD; a captain, when set, must be an existing user.
"""

from app.models.team import Team
from app.services.base import CrudService


class TeamService(CrudService[Team]):
    model = Team
    resource = "team"
    user_refs = ("captain_id",)


team_service = TeamService()
