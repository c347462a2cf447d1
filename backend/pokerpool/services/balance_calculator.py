"""Net balance of every player from the roster and the game log."""
import logging
from decimal import Decimal, ROUND_HALF_UP

from pokerpool.schemas import PlayerBalance

logger = logging.getLogger("pokerpool.services.balances")

CENT = Decimal("0.01")
ZERO = Decimal("0.00")


def to_money(value) -> Decimal:
    """Quantize a number to currency precision (two decimal places)."""
    if not isinstance(value, Decimal):
        # str() first so floats like 0.1 do not drag their binary expansion along
        value = Decimal(str(value))
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def find_orphaned_games(players, games) -> list:
    """Games whose winner is not in the roster."""
    roster_ids = {p.id for p in players}
    return [g for g in games if g.winner_id not in roster_ids]


def compute_balances(players, games) -> list[PlayerBalance]:
    """
    players: ordered roster, anything with `id` and `name`.
    games: ordered game log, anything with `wager` and `winner_id`.

    Every game is a winner-take-all pool: each other player in the roster
    pays the wager to the winner. Games whose winner is missing from the
    roster are left out entirely so the balances still sum to zero.
    Returns the roster in the same order with `balance` filled in.
    """
    roster = list(players)
    others = len(roster) - 1
    balances: dict[str, Decimal] = {p.id: ZERO for p in roster}

    for g in games:
        if g.winner_id not in balances:
            logger.warning("Skipping game %s: winner %s is not in the roster", getattr(g, "id", "?"), g.winner_id)
            continue
        wager = to_money(g.wager)
        for pid in balances:
            if pid == g.winner_id:
                balances[pid] += wager * others
            else:
                balances[pid] -= wager

    return [PlayerBalance(id=p.id, name=p.name, balance=to_money(balances[p.id])) for p in roster]


def balance_status(balance) -> str:
    if balance > 0:
        return "Winning"
    if balance < 0:
        return "Owes Money"
    return "Break Even"
