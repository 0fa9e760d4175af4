"""
Match API endpoints
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.auth.policy import ensure_can_modify
from app.auth.utils import get_current_user, get_editor
from app.database import get_db, unit_of_work
from app.engine.relationships import RelationshipMaintainer
from app.errors import NotFoundError, ValidationError
from app.models.user import User
from app.store import MatchStore
from app.api.schemas import MatchCreate, MatchUpdate, ScoreUpdate, MatchResponse, MessageResponse

router = APIRouter(prefix="/matches", tags=["Matches"])


def _get_match(matches: MatchStore, match_id: str):
    match = matches.find_by_id(match_id)
    if not match:
        raise NotFoundError("Match not found")
    return match


def _check_winner(winner, team1: str, team2: str):
    if winner is not None and winner not in (team1, team2):
        raise ValidationError("Winner must be one of the match teams")


@router.get("", response_model=List[MatchResponse])
def list_matches(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List all matches"""
    return [MatchResponse.model_validate(m) for m in MatchStore(db).find_all()]


@router.get("/{match_id}", response_model=MatchResponse)
def get_match(
    match_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get a match by id"""
    return MatchResponse.model_validate(_get_match(MatchStore(db), match_id))


@router.post("", response_model=MatchResponse, status_code=status.HTTP_201_CREATED)
def create_match(
    match_data: MatchCreate,
    current_user: User = Depends(get_editor),
    db: Session = Depends(get_db)
):
    """
    Schedule a match between two existing, different teams.
    If a tournament is given the match is added to its fixture list.
    """
    match = RelationshipMaintainer(db).create_match(current_user, **match_data.model_dump())
    return MatchResponse.model_validate(match)


@router.put("/{match_id}", response_model=MatchResponse)
def update_match(
    match_id: str,
    match_data: MatchUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update match details, result and scores"""
    matches = MatchStore(db)
    match = _get_match(matches, match_id)
    ensure_can_modify(current_user, match, "update")

    changes = match_data.changes(match)
    team1 = changes.get("team1", match.team1)
    team2 = changes.get("team2", match.team2)
    if "team1" in changes or "team2" in changes:
        RelationshipMaintainer(db).check_match_teams(team1, team2)
    _check_winner(changes.get("winner", match.winner), team1, team2)

    with unit_of_work(db):
        match = matches.update(match_id, **changes)
    return MatchResponse.model_validate(match)


@router.patch("/{match_id}/score", response_model=MatchResponse)
def update_match_score(
    match_id: str,
    score_data: ScoreUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Record scores, winner and status. Only provided fields change."""
    matches = MatchStore(db)
    match = _get_match(matches, match_id)
    ensure_can_modify(current_user, match, "update")

    changes = score_data.changes(match)
    _check_winner(changes.get("winner", match.winner), match.team1, match.team2)

    with unit_of_work(db):
        match = matches.update(match_id, **changes)
    return MatchResponse.model_validate(match)


@router.delete("/{match_id}", response_model=MessageResponse)
def delete_match(
    match_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete a match and drop it from its tournament"""
    RelationshipMaintainer(db).delete_match(current_user, match_id)
    return MessageResponse(message="Match deleted successfully")
