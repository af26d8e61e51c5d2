"""
Schema versioning for the games database.

The version lives in SQLite's ``PRAGMA user_version`` (0 for a brand new file).
Each entry in MIGRATIONS upgrades the schema from ``version - 1`` to ``version``.

A fresh database gets the current schema straight away. An older database gets every step between its
version and the target, in order. When a step is missing the only way forward is to drop the games table
and recreate it: every stored record is lost. That fallback is kept on purpose, it is how the app always
upgraded before steps were registered.
"""

import logging
from typing import Callable, Mapping

from sqlalchemy import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError

from gosgf.core.exceptions import MigrationError, RepositoryError
from gosgf.db.schema import SCHEMA_VERSION, Base, DBGame

logger = logging.getLogger(__name__)

MigrationStep = Callable[[Connection], None]


def _create_games_table(conn: Connection) -> None:
    DBGame.__table__.create(conn, checkfirst=True)


MIGRATIONS: dict[int, MigrationStep] = {
    1: _create_games_table,
}


def get_user_version(conn: Connection) -> int:
    return int(conn.exec_driver_sql("PRAGMA user_version").scalar_one())


def set_user_version(conn: Connection, version: int) -> None:
    # PRAGMA does not accept bound parameters
    conn.exec_driver_sql(f"PRAGMA user_version = {int(version)}")


def migrate(
    engine: Engine,
    target: int = SCHEMA_VERSION,
    migrations: Mapping[int, MigrationStep] = MIGRATIONS,
) -> int:
    """Bring the database behind ``engine`` to schema version ``target``. Returns the version found on disk."""
    try:
        with engine.begin() as conn:
            current = get_user_version(conn)
            if current == target:
                return current
            if current > target:
                raise MigrationError(
                    f"Database schema version {current} is newer than supported version {target}."
                )

            if current == 0:
                logger.info("Creating games schema at version %s", target)
                Base.metadata.create_all(conn)
            else:
                _upgrade(conn, current, target, migrations)
            set_user_version(conn, target)
            return current
    except SQLAlchemyError as exc:
        raise RepositoryError(f"Could not migrate database: {exc}") from exc


def _upgrade(
    conn: Connection, current: int, target: int, migrations: Mapping[int, MigrationStep]
) -> None:
    versions = range(current + 1, target + 1)
    missing = [version for version in versions if version not in migrations]
    if missing:
        logger.warning(
            "No migration step for version(s) %s, dropping and recreating the games table. "
            "All stored game records are discarded.",
            missing,
        )
        _recreate(conn)
        return

    for version in versions:
        logger.info("Migrating games schema from version %s to %s", version - 1, version)
        migrations[version](conn)


def _recreate(conn: Connection) -> None:
    Base.metadata.drop_all(conn)
    Base.metadata.create_all(conn)
