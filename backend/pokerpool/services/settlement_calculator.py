"""Turn player balances into payments (who pays whom) that settle everyone to zero."""
import logging
from decimal import Decimal

from pokerpool.schemas import SettlementItem
from pokerpool.services.balance_calculator import ZERO, to_money

logger = logging.getLogger("pokerpool.services.settlements")

TOLERANCE = Decimal("0.01")


class SettlementImbalanceError(ValueError):
    """Balances cannot be settled exactly: debts and credits do not match."""

    def __init__(self, message: str, residual: Decimal):
        super().__init__(message)
        self.residual = residual


def compute_settlements(players) -> list[SettlementItem]:
    """
    players: anything with `id` and `balance` (positive = is owed money,
    negative = owes money), in roster order.

    Greedy matching: largest debtor first pays the largest creditors first
    until their debt is gone. Equal balances keep roster order, so the
    same input always yields the same list.
    Once the totals net to zero within a cent, matching exhausts every
    debtor or every creditor, so nothing larger than that cent is left over.
    """
    balances = [(p.id, to_money(p.balance)) for p in players]

    total = sum((bal for _, bal in balances), ZERO)
    if abs(total) > TOLERANCE:
        logger.error("Balances do not sum to zero (off by %s)", total)
        raise SettlementImbalanceError(f"Balances do not sum to zero (off by {total})", total)

    # sorted() is stable: ties stay in roster order
    debtors = sorted((b for b in balances if b[1] < 0), key=lambda x: x[1])
    creditors = sorted((b for b in balances if b[1] > 0), key=lambda x: -x[1])
    remaining: dict[str, Decimal] = dict(balances)

    out: list[SettlementItem] = []
    for du, _ in debtors:
        for cu, _ in creditors:
            owed = -remaining[du]
            if owed <= 0:
                break
            credit = remaining[cu]
            if credit <= 0:
                continue
            transfer = min(owed, credit)
            if transfer > 0:
                out.append(SettlementItem(from_player_id=du, to_player_id=cu, amount=transfer))
                remaining[du] += transfer
                remaining[cu] -= transfer

    return out
