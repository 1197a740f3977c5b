from __future__ import annotations

from contextlib import contextmanager
from datetime import time, timedelta
from typing import Any, Dict, List, Optional

import mysql.connector
import structlog
from mysql.connector import errorcode

from ..core.exceptions import ConflictError, NotFoundError, StorageError
from .connection import DatabaseConnection

logger = structlog.get_logger(__name__)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield ``(conn, cursor)``; commit on success, roll back on error.

    Driver errors are re-raised as domain errors: a duplicate key becomes
    ``ConflictError``, a dangling foreign key ``NotFoundError``, anything else
    ``StorageError``. The driver exception is always chained.
    """

    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as err:
        logger.error("db.connect_failed", error=str(err))
        raise StorageError("Database is unavailable") from err

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.IntegrityError as err:
        conn.rollback()
        if err.errno == errorcode.ER_DUP_ENTRY:
            raise ConflictError("Record already exists") from err
        if err.errno == errorcode.ER_NO_REFERENCED_ROW_2:
            raise NotFoundError("Referenced record does not exist") from err
        logger.error("db.integrity_error", errno=err.errno, error=str(err))
        raise StorageError("Database rejected the change") from err
    except mysql.connector.Error as err:
        conn.rollback()
        logger.error("db.error", errno=err.errno, error=str(err))
        raise StorageError("Database operation failed") from err
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def in_clause(values) -> str:
    """Placeholder list for ``IN (...)``; callers must pass a non-empty sequence."""
    return ", ".join(["%s"] * len(values))


def normalize_mysql_time(value: Any) -> Optional[time]:
    """Normalize MySQL TIME values across connector implementations.

    mysql-connector can return TIME as:
    - datetime.time
    - datetime.timedelta
    - string (e.g. '08:30:00')
    """

    if value is None:
        return None

    if isinstance(value, time):
        return value

    if isinstance(value, timedelta):
        total_seconds = int(value.total_seconds()) % 86400
        hours = total_seconds // 3600
        minutes = (total_seconds % 3600) // 60
        seconds = total_seconds % 60
        return time(hour=hours, minute=minutes, second=seconds)

    if isinstance(value, str):
        parts = value.strip().split(":")
        if len(parts) < 2:
            raise ValueError(f"Invalid time string: {value!r}")
        hours = int(parts[0])
        minutes = int(parts[1])
        seconds = int(parts[2]) if len(parts) >= 3 and parts[2] else 0
        return time(hour=hours, minute=minutes, second=seconds)

    raise TypeError(f"Unsupported MySQL TIME value type: {type(value)!r}")
