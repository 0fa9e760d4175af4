"""
Tournament API endpoints
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.auth.policy import ensure_can_modify
from app.auth.utils import get_current_user, get_editor
from app.database import get_db, unit_of_work
from app.engine.relationships import RelationshipMaintainer
from app.errors import ConflictError, NotFoundError, ValidationError
from app.models.tournament import TournamentStatus
from app.models.user import User
from app.store import TeamStore, TournamentStore
from app.api.schemas import TournamentCreate, TournamentUpdate, TournamentResponse, MessageResponse

router = APIRouter(prefix="/tournaments", tags=["Tournaments"])


def _get_tournament(tournaments: TournamentStore, tournament_id: str):
    tournament = tournaments.find_by_id(tournament_id)
    if not tournament:
        raise NotFoundError("Tournament not found")
    return tournament


@router.get("", response_model=List[TournamentResponse])
def list_tournaments(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List all tournaments"""
    return [TournamentResponse.model_validate(t) for t in TournamentStore(db).find_all()]


@router.get("/{tournament_id}", response_model=TournamentResponse)
def get_tournament(
    tournament_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get a tournament by id"""
    return TournamentResponse.model_validate(_get_tournament(TournamentStore(db), tournament_id))


@router.post("", response_model=TournamentResponse, status_code=status.HTTP_201_CREATED)
def create_tournament(
    tournament_data: TournamentCreate,
    current_user: User = Depends(get_editor),
    db: Session = Depends(get_db)
):
    """Create an upcoming tournament with an optional list of existing teams"""
    tournaments = TournamentStore(db)
    if tournaments.find_by_name(tournament_data.name):
        raise ConflictError("A tournament with this name already exists")

    fields = tournament_data.model_dump()
    fields["teams"] = RelationshipMaintainer(db).require_team_ids(fields["teams"])
    with unit_of_work(db):
        tournament = tournaments.create(
            status=TournamentStatus.UPCOMING,
            matches=[],
            created_by=current_user.id,
            **fields,
        )
    return TournamentResponse.model_validate(tournament)


@router.put("/{tournament_id}", response_model=TournamentResponse)
def update_tournament(
    tournament_id: str,
    tournament_data: TournamentUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update tournament details. A "teams" list replaces the participants."""
    tournaments = TournamentStore(db)
    tournament = _get_tournament(tournaments, tournament_id)
    ensure_can_modify(current_user, tournament, "update")

    changes = tournament_data.changes()
    start = changes.get("start_date", tournament.start_date)
    end = changes.get("end_date", tournament.end_date)
    if start >= end:
        raise ValidationError("Start date must be before end date")

    if "name" in changes and changes["name"] != tournament.name:
        if tournaments.find_by_name(changes["name"]):
            raise ConflictError("A tournament with this name already exists")
    if "teams" in changes:
        changes["teams"] = RelationshipMaintainer(db).require_team_ids(changes["teams"])
    if changes.get("winner") and not TeamStore(db).find_by_id(changes["winner"]):
        raise ValidationError("Winner team not found")

    with unit_of_work(db):
        tournament = tournaments.update(tournament_id, **changes)
    return TournamentResponse.model_validate(tournament)


@router.delete("/{tournament_id}", response_model=MessageResponse)
def delete_tournament(
    tournament_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete a tournament together with all of its matches"""
    RelationshipMaintainer(db).delete_tournament(current_user, tournament_id)
    return MessageResponse(message="Tournament deleted successfully")


@router.post("/{tournament_id}/teams/{team_id}", response_model=TournamentResponse)
def add_team_to_tournament(
    tournament_id: str,
    team_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    tournament = RelationshipMaintainer(db).add_team_to_tournament(current_user, tournament_id, team_id)
    return TournamentResponse.model_validate(tournament)


@router.delete("/{tournament_id}/teams/{team_id}", response_model=TournamentResponse)
def remove_team_from_tournament(
    tournament_id: str,
    team_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    tournament = RelationshipMaintainer(db).remove_team_from_tournament(current_user, tournament_id, team_id)
    return TournamentResponse.model_validate(tournament)


@router.post("/{tournament_id}/matches/{match_id}", response_model=TournamentResponse)
def add_match_to_tournament(
    tournament_id: str,
    match_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Attach an existing match; the match records the tournament too"""
    tournament = RelationshipMaintainer(db).add_match_to_tournament(current_user, tournament_id, match_id)
    return TournamentResponse.model_validate(tournament)
