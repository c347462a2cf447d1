"""Games: record and list. Recorded games are never edited."""
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import func
from sqlalchemy.orm import Session

from pokerpool.database import get_db
from pokerpool.models import Player, Game
from pokerpool.schemas import GameCreate, GameResponse
from pokerpool.services.balance_calculator import to_money

router = APIRouter(prefix="/games", tags=["games"])
logger = logging.getLogger("pokerpool.routers.games")


def list_game_log(db: Session) -> list[Game]:
    return db.query(Game).order_by(Game.position).all()


@router.get("", response_model=list[GameResponse])
def list_games(db: Session = Depends(get_db)):
    return [GameResponse.model_validate(g) for g in list_game_log(db)]


@router.post("", response_model=GameResponse)
def record_game(data: GameCreate, db: Session = Depends(get_db)):
    if db.query(Player).count() < 2:
        raise HTTPException(status_code=400, detail="At least two players are required to record a game")
    winner = db.query(Player).filter(Player.id == data.winner_id).first()
    if not winner:
        raise HTTPException(status_code=400, detail="Winner must be a registered player")
    wager = to_money(data.wager)
    if wager <= 0:
        raise HTTPException(status_code=400, detail="Wager must be at least 0.01")

    position = (db.query(func.max(Game.position)).scalar() or 0) + 1
    game = Game(wager=wager, winner_id=winner.id, position=position)
    db.add(game)
    db.commit()
    db.refresh(game)
    logger.info("Recorded game %s: %s won %s", game.id, winner.name, wager)
    return GameResponse.model_validate(game)
