"""SQLAlchemy models."""
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Numeric, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from pokerpool.database import Base


def _new_id() -> str:
    return uuid.uuid4().hex


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Player(Base):
    __tablename__ = "players"

    id = Column(String(32), primary_key=True, default=_new_id)
    name = Column(String(255), nullable=False)
    # roster order; settlement tie-breaking depends on it
    position = Column(Integer, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    games_won = relationship("Game", back_populates="winner")


class Game(Base):
    __tablename__ = "games"

    id = Column(String(32), primary_key=True, default=_new_id)
    wager = Column(Numeric(12, 2), nullable=False)
    winner_id = Column(String(32), ForeignKey("players.id"), nullable=False)
    position = Column(Integer, nullable=False, index=True)
    date = Column(DateTime(timezone=True), nullable=False, default=_utcnow)

    winner = relationship("Player", back_populates="games_won")


class AppState(Base):
    """Single-row table holding navigation state between sessions."""

    __tablename__ = "app_state"

    id = Column(Integer, primary_key=True)
    current_page = Column(String(20), nullable=False, default="setup")
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
