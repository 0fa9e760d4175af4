"""
Team API endpoints
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.auth.policy import ensure_can_modify
from app.auth.utils import get_current_user, get_editor
from app.database import get_db, unit_of_work
from app.engine.relationships import RelationshipMaintainer
from app.errors import ConflictError, NotFoundError
from app.models.user import User
from app.store import TeamStore
from app.api.schemas import TeamCreate, TeamUpdate, TeamResponse, MessageResponse

router = APIRouter(prefix="/teams", tags=["Teams"])


def _get_team(teams: TeamStore, team_id: str):
    team = teams.find_by_id(team_id)
    if not team:
        raise NotFoundError("Team not found")
    return team


@router.get("", response_model=List[TeamResponse])
def list_teams(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List all teams"""
    return [TeamResponse.model_validate(t) for t in TeamStore(db).find_all()]


@router.get("/{team_id}", response_model=TeamResponse)
def get_team(
    team_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get a team by id"""
    return TeamResponse.model_validate(_get_team(TeamStore(db), team_id))


@router.post("", response_model=TeamResponse, status_code=status.HTTP_201_CREATED)
def create_team(
    team_data: TeamCreate,
    current_user: User = Depends(get_editor),
    db: Session = Depends(get_db)
):
    """Create a team owned by the caller. Starts with no players."""
    teams = TeamStore(db)
    if teams.find_by_name(team_data.name):
        raise ConflictError("A team with this name already exists")

    with unit_of_work(db):
        team = teams.create(
            players=[],
            created_by=current_user.id,
            **team_data.model_dump(),
        )
    return TeamResponse.model_validate(team)


@router.put("/{team_id}", response_model=TeamResponse)
def update_team(
    team_id: str,
    team_data: TeamUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update team details. Membership changes go through the players endpoints."""
    teams = TeamStore(db)
    team = _get_team(teams, team_id)
    ensure_can_modify(current_user, team, "update")

    changes = team_data.changes()
    if "name" in changes and changes["name"] != team.name:
        if teams.find_by_name(changes["name"]):
            raise ConflictError("A team with this name already exists")

    with unit_of_work(db):
        team = teams.update(team_id, **changes)
    return TeamResponse.model_validate(team)


@router.delete("/{team_id}", response_model=MessageResponse)
def delete_team(
    team_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete a team and detach it from every player and tournament"""
    RelationshipMaintainer(db).delete_team(current_user, team_id)
    return MessageResponse(message="Team deleted successfully")


@router.post("/{team_id}/players/{player_id}", response_model=TeamResponse)
def add_player_to_team(
    team_id: str,
    player_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Add a player to the squad (updates both team and player)"""
    team = RelationshipMaintainer(db).add_player_to_team(current_user, team_id, player_id)
    return TeamResponse.model_validate(team)


@router.delete("/{team_id}/players/{player_id}", response_model=TeamResponse)
def remove_player_from_team(
    team_id: str,
    player_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Remove a player from the squad. No error if they were not in it."""
    team = RelationshipMaintainer(db).remove_player_from_team(current_user, team_id, player_id)
    return TeamResponse.model_validate(team)
