from collections import defaultdict
from decimal import Decimal

import pytest

from pokerpool.schemas import PlayerBalance
from pokerpool.services.settlement_calculator import SettlementImbalanceError, compute_settlements


def _balances(mapping):
    return [PlayerBalance(id=pid, name=pid.upper(), balance=Decimal(str(bal))) for pid, bal in mapping.items()]


@pytest.mark.parametrize(
    "balances",
    [
        {"a": 60, "b": -30, "c": -30},
        {"a": -20, "b": -20, "c": 60, "d": -20},
        {"a": 80, "b": -70, "c": -10},
        {"a": 100, "b": 100, "c": -50, "d": -150},
        {"a": 53, "b": 7, "c": 10, "d": -30, "e": -10, "f": -30},
        {"a": 12.34, "b": -0.01, "c": -12.33},
        {"a": 0, "b": 25, "c": -25},
    ],
)
def test_settles_everyone_to_zero(balances):
    result = compute_settlements(_balances(balances))

    net = defaultdict(Decimal)
    for t in result:
        assert t.from_player_id != t.to_player_id
        assert t.amount > 0
        net[t.from_player_id] += t.amount
        net[t.to_player_id] -= t.amount
    for pid, bal in balances.items():
        assert net[pid] + Decimal(str(bal)) == 0

    debtors = sum(1 for b in balances.values() if b < 0)
    creditors = sum(1 for b in balances.values() if b > 0)
    assert len(result) <= debtors + creditors - 1


def test_everyone_pays_single_winner():
    result = compute_settlements(_balances({"a": 60, "b": -30, "c": -30}))
    assert [(t.from_player_id, t.to_player_id, t.amount) for t in result] == [
        ("b", "a", Decimal("30")),
        ("c", "a", Decimal("30")),
    ]


def test_largest_debt_goes_first():
    result = compute_settlements(_balances({"a": 80, "b": -70, "c": -10}))
    assert [(t.from_player_id, t.amount) for t in result] == [("b", Decimal("70")), ("c", Decimal("10"))]


def test_debt_split_across_creditors_largest_first():
    result = compute_settlements(_balances({"a": 10, "b": 30, "c": -40}))
    assert [(t.from_player_id, t.to_player_id, t.amount) for t in result] == [
        ("c", "b", Decimal("30")),
        ("c", "a", Decimal("10")),
    ]


def test_ties_keep_roster_order():
    result = compute_settlements(_balances({"x": -10, "y": -10, "w": 20}))
    assert [t.from_player_id for t in result] == ["x", "y"]
    result = compute_settlements(_balances({"y": -10, "x": -10, "w": 20}))
    assert [t.from_player_id for t in result] == ["y", "x"]


@pytest.mark.parametrize("balances", [{}, {"a": 0, "b": 0}])
def test_nothing_to_settle(balances):
    assert compute_settlements(_balances(balances)) == []


def test_deterministic():
    players = _balances({"a": 40, "b": 40, "c": -20, "d": -60})
    assert compute_settlements(players) == compute_settlements(players)


def test_does_not_mutate_balances():
    players = _balances({"a": 40, "b": -40})
    compute_settlements(players)
    assert [p.balance for p in players] == [Decimal("40"), Decimal("-40")]


def test_amounts_rounded_to_cents():
    result = compute_settlements(_balances({"a": 0.3, "b": -0.1, "c": -0.2}))
    assert [t.amount for t in result] == [Decimal("0.20"), Decimal("0.10")]


def test_imbalance_raises():
    with pytest.raises(SettlementImbalanceError) as exc:
        compute_settlements(_balances({"a": 50, "b": -20}))
    assert exc.value.residual == Decimal("30")


def test_one_cent_drift_is_tolerated():
    result = compute_settlements(_balances({"a": 10.01, "b": -10}))
    assert [t.amount for t in result] == [Decimal("10.00")]


def test_two_cent_drift_raises():
    with pytest.raises(SettlementImbalanceError):
        compute_settlements(_balances({"a": 10.02, "b": -10}))
