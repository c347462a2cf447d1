"""Pydantic schemas for request/response."""
from datetime import datetime
from decimal import Decimal
from typing import Annotated, Literal, Optional

from pydantic import BaseModel, Field, PlainSerializer

# Decimal internally, plain number on the wire.
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

Page = Literal["setup", "games", "summary"]

MAX_WAGER = Decimal("9999999999.99")


# ----- Player -----
class PlayerCreate(BaseModel):
    name: str


class PlayerResponse(BaseModel):
    id: str
    name: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class PlayerBalance(BaseModel):
    id: str
    name: str
    balance: Money = Decimal("0.00")


class PlayerSummary(PlayerBalance):
    status: str


# ----- Game -----
class GameCreate(BaseModel):
    # fits Numeric(12, 2)
    wager: Decimal = Field(gt=0, le=MAX_WAGER)
    winner_id: str


class GameResponse(BaseModel):
    id: str
    wager: Money
    winner_id: str
    date: Optional[datetime] = None

    class Config:
        from_attributes = True


# ----- Settlement -----
class SettlementItem(BaseModel):
    from_player_id: str
    to_player_id: str
    amount: Money


class SettlementLine(SettlementItem):
    from_name: str
    to_name: str


class SettlementSummary(BaseModel):
    players: list[PlayerSummary]
    settlements: list[SettlementLine]
    game_count: int
    total_wagered: Money


# ----- App state -----
class PageUpdate(BaseModel):
    current_page: Page


class AppStateResponse(BaseModel):
    players: list[PlayerResponse] = []
    games: list[GameResponse] = []
    current_page: Page = "setup"
