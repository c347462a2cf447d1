"""App state: full snapshot, page navigation, reset."""
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from pokerpool.database import get_db
from pokerpool.models import AppState, Player, Game
from pokerpool.schemas import AppStateResponse, GameResponse, PageUpdate, PlayerResponse
from pokerpool.routers.games import list_game_log
from pokerpool.routers.players import list_roster

router = APIRouter(prefix="/state", tags=["state"])
logger = logging.getLogger("pokerpool.routers.state")


def _load_state(db: Session) -> AppState:
    state = db.query(AppState).filter(AppState.id == 1).first()
    if not state:
        state = AppState(id=1, current_page="setup")
        db.add(state)
        db.flush()
    return state


def _state_response(db: Session, state: AppState) -> AppStateResponse:
    return AppStateResponse(
        players=[PlayerResponse.model_validate(p) for p in list_roster(db)],
        games=[GameResponse.model_validate(g) for g in list_game_log(db)],
        current_page=state.current_page,
    )


@router.get("", response_model=AppStateResponse)
def get_state(db: Session = Depends(get_db)):
    return _state_response(db, _load_state(db))


@router.put("/page", response_model=AppStateResponse)
def set_page(data: PageUpdate, db: Session = Depends(get_db)):
    if data.current_page == "games" and db.query(Player).count() < 2:
        raise HTTPException(status_code=400, detail="Add at least two players before recording games")
    if data.current_page == "summary" and db.query(Game).count() == 0:
        raise HTTPException(status_code=400, detail="Record at least one game before viewing the summary")
    state = _load_state(db)
    state.current_page = data.current_page
    db.commit()
    db.refresh(state)
    return _state_response(db, state)


@router.post("/reset", response_model=AppStateResponse)
def reset_state(db: Session = Depends(get_db)):
    games = db.query(Game).delete()
    players = db.query(Player).delete()
    state = _load_state(db)
    state.current_page = "setup"
    db.commit()
    db.refresh(state)
    logger.info("Reset: removed %d players and %d games", players, games)
    return _state_response(db, state)
