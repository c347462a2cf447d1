"""Summary: balances per player and the payments that settle them."""
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from pokerpool.database import get_db
from pokerpool.routers.games import list_game_log
from pokerpool.routers.players import list_roster
from pokerpool.schemas import PlayerSummary, SettlementLine, SettlementSummary
from pokerpool.services.balance_calculator import ZERO, balance_status, compute_balances, to_money
from pokerpool.services.settlement_calculator import SettlementImbalanceError, compute_settlements

router = APIRouter(prefix="/summary", tags=["summary"])
logger = logging.getLogger("pokerpool.routers.summary")


@router.get("", response_model=SettlementSummary)
def get_summary(db: Session = Depends(get_db)):
    players = list_roster(db)
    games = list_game_log(db)

    balances = compute_balances(players, games)
    try:
        settlements = compute_settlements(balances)
    except SettlementImbalanceError as e:
        logger.error("Cannot settle %d players over %d games: %s", len(players), len(games), e)
        raise HTTPException(status_code=500, detail=str(e))

    names = {p.id: p.name for p in players}
    return SettlementSummary(
        players=[
            PlayerSummary(id=b.id, name=b.name, balance=b.balance, status=balance_status(b.balance))
            for b in balances
        ],
        settlements=[
            SettlementLine(
                **s.model_dump(),
                from_name=names.get(s.from_player_id, "Unknown player"),
                to_name=names.get(s.to_player_id, "Unknown player"),
            )
            for s in settlements
        ],
        game_count=len(games),
        total_wagered=sum((to_money(g.wager) for g in games), ZERO),
    )
