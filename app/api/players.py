"""
Player API endpoints
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.auth.policy import ensure_can_modify
from app.auth.utils import get_current_user, get_editor
from app.database import get_db, unit_of_work
from app.engine.relationships import RelationshipMaintainer
from app.errors import NotFoundError
from app.models.player import empty_stats
from app.models.user import User
from app.store import PlayerStore, TeamStore
from app.api.schemas import (
    PlayerCreate, PlayerUpdate, PlayerResponse, PlayerStatsUpdate,
    PlayerStatsResponse, MessageResponse,
)

router = APIRouter(prefix="/players", tags=["Players"])


def _get_player(players: PlayerStore, player_id: str):
    player = players.find_by_id(player_id)
    if not player:
        raise NotFoundError("Player not found")
    return player


@router.get("", response_model=List[PlayerResponse])
def list_players(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List all players"""
    return [PlayerResponse.model_validate(p) for p in PlayerStore(db).find_all()]


@router.get("/team/{team_id}", response_model=List[PlayerResponse])
def get_players_by_team(
    team_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get a team's squad"""
    if not TeamStore(db).find_by_id(team_id):
        raise NotFoundError("Team not found")
    return [PlayerResponse.model_validate(p) for p in PlayerStore(db).find_by_team(team_id)]


@router.get("/{player_id}", response_model=PlayerResponse)
def get_player(
    player_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get a player by id"""
    return PlayerResponse.model_validate(_get_player(PlayerStore(db), player_id))


@router.post("", response_model=PlayerResponse, status_code=status.HTTP_201_CREATED)
def create_player(
    player_data: PlayerCreate,
    current_user: User = Depends(get_editor),
    db: Session = Depends(get_db)
):
    """
    Create a player. Any teams listed get the player added to their squads.
    """
    fields = player_data.model_dump()
    teams = fields.pop("teams")
    player = RelationshipMaintainer(db).create_player(current_user, teams=teams, **fields)
    return PlayerResponse.model_validate(player)


@router.put("/{player_id}", response_model=PlayerResponse)
def update_player(
    player_id: str,
    player_data: PlayerUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update a player. A "teams" list replaces memberships on both sides."""
    player = _get_player(PlayerStore(db), player_id)
    ensure_can_modify(current_user, player, "update")

    changes = player_data.changes(player)
    player = RelationshipMaintainer(db).update_player(current_user, player_id, **changes)
    return PlayerResponse.model_validate(player)


@router.delete("/{player_id}", response_model=MessageResponse)
def delete_player(
    player_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete a player and remove them from every squad"""
    RelationshipMaintainer(db).delete_player(current_user, player_id)
    return MessageResponse(message="Player deleted successfully")


@router.get("/{player_id}/stats", response_model=PlayerStatsResponse)
def get_player_stats(
    player_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Career aggregates for a player"""
    player = _get_player(PlayerStore(db), player_id)
    return PlayerStatsResponse(
        player_id=player.id,
        name=player.name,
        stats=player.stats or empty_stats(),
    )


@router.patch("/{player_id}/stats", response_model=PlayerResponse)
def update_player_stats(
    player_id: str,
    stats_data: PlayerStatsUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Overwrite only the counters provided"""
    players = PlayerStore(db)
    player = _get_player(players, player_id)
    ensure_can_modify(current_user, player, "update")

    stats = {**empty_stats(), **(player.stats or {}), **stats_data.changes()}
    with unit_of_work(db):
        player = players.update(player_id, stats=stats)
    return PlayerResponse.model_validate(player)
