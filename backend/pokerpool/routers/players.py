"""Players: list, add, remove."""
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import func
from sqlalchemy.orm import Session

from pokerpool.database import get_db
from pokerpool.models import Player, Game
from pokerpool.schemas import PlayerCreate, PlayerResponse

router = APIRouter(prefix="/players", tags=["players"])
logger = logging.getLogger("pokerpool.routers.players")


def list_roster(db: Session) -> list[Player]:
    return db.query(Player).order_by(Player.position).all()


@router.get("", response_model=list[PlayerResponse])
def list_players(db: Session = Depends(get_db)):
    return [PlayerResponse.model_validate(p) for p in list_roster(db)]


@router.post("", response_model=PlayerResponse)
def add_player(data: PlayerCreate, db: Session = Depends(get_db)):
    name = data.name.strip()
    if not name:
        raise HTTPException(status_code=400, detail="Player name is required")
    position = (db.query(func.max(Player.position)).scalar() or 0) + 1
    player = Player(name=name, position=position)
    db.add(player)
    db.commit()
    db.refresh(player)
    logger.info("Added player %s (%s)", player.name, player.id)
    return PlayerResponse.model_validate(player)


@router.delete("/{player_id}", status_code=204)
def remove_player(player_id: str, db: Session = Depends(get_db)):
    player = db.query(Player).filter(Player.id == player_id).first()
    if not player:
        raise HTTPException(status_code=404, detail="Player not found")
    wins = db.query(Game).filter(Game.winner_id == player_id).count()
    if wins:
        raise HTTPException(
            status_code=409,
            detail=f"Player won {wins} recorded game(s) and cannot be removed",
        )
    db.delete(player)
    db.commit()
    logger.info("Removed player %s (%s)", player.name, player_id)
