"""Database tables / schema"""

from typing import Optional

from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

DATABASE_NAME = "go_records.db"

# Bump together with a new entry in gosgf.db.migrations.MIGRATIONS
SCHEMA_VERSION = 1


class Base(DeclarativeBase):
    pass


class DBGame(Base):
    __tablename__ = "games"
    # sqlite_autoincrement: ids are never reused, even after rows disappear
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    player_black: Mapped[Optional[str]]
    player_white: Mapped[Optional[str]]
    date: Mapped[Optional[str]]
    moves: Mapped[Optional[str]]
    result: Mapped[Optional[str]]
