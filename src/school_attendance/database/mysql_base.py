from __future__ import annotations

from contextlib import contextmanager
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
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


def normalize_mysql_date(value: Any) -> date:
    """Normalize DATE/DATETIME values across connector implementations.

    mysql-connector can return the column as:
    - datetime.date
    - datetime.datetime (DATETIME columns or legacy schemas)
    - string (e.g. '2024-03-04')
    """

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("ascii")
    if isinstance(value, str):
        return datetime.strptime(value.strip()[:10], "%Y-%m-%d").date()

    raise TypeError(f"Unsupported MySQL DATE value type: {type(value)!r}")


def date_range_clauses(column: str, start_date: Optional[date], end_date: Optional[date]) -> tuple[list[str], list[object]]:
    """Inclusive bounds on a DATE column, each applied only when given."""

    clauses: list[str] = []
    params: list[object] = []
    if start_date is not None:
        clauses.append(f"{column} >= %s")
        params.append(start_date)
    if end_date is not None:
        clauses.append(f"{column} <= %s")
        params.append(end_date)
    return clauses, params
