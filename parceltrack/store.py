"""SQLite-backed storage for parcels."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from enum import Enum
from os import PathLike


class ParcelStatus(str, Enum):
    """Lifecycle states of a parcel."""

    REGISTERED = "registered"
    SENT = "sent"
    DELIVERED = "delivered"

    def __str__(self) -> str:
        return self.value


@dataclass
class Parcel:
    """A parcel as kept in the ``parcel`` table."""

    client: int
    address: str
    status: ParcelStatus | str = ParcelStatus.REGISTERED
    created_at: str = ""
    number: int = 0


class ParcelNotFoundError(LookupError):
    """Raised when no parcel has the requested number."""

    def __init__(self, number: int) -> None:
        super().__init__(f"parcel {number} not found")
        self.number = number


_COLUMNS = "number, client, status, address, created_at"

_SCHEMA = """
CREATE TABLE IF NOT EXISTS parcel (
    number INTEGER PRIMARY KEY AUTOINCREMENT,
    client INTEGER NOT NULL DEFAULT 0,
    status VARCHAR(128) NOT NULL DEFAULT '',
    address VARCHAR(256) NOT NULL DEFAULT '',
    created_at VARCHAR(256) NOT NULL DEFAULT ''
)
"""


def _status_text(status: ParcelStatus | str) -> str:
    return status.value if isinstance(status, ParcelStatus) else str(status)


def _status_from(text: str) -> ParcelStatus | str:
    try:
        return ParcelStatus(text)
    except ValueError:
        return text


def _row_to_parcel(row: tuple) -> Parcel:
    number, client, status, address, created_at = row
    return Parcel(
        number=number,
        client=client,
        status=_status_from(status),
        address=address,
        created_at=created_at,
    )


def connect(path: str | PathLike[str]) -> sqlite3.Connection:
    """Open the SQLite database at ``path``."""
    return sqlite3.connect(path)


class ParcelStore:
    """Reads and writes parcels through an SQLite connection."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def create_schema(self) -> None:
        """Create the ``parcel`` table if it does not exist yet."""
        with self._conn:
            self._conn.execute(_SCHEMA)

    def add(self, parcel: Parcel) -> int:
        """Insert ``parcel`` and return the number assigned to it."""
        with self._conn:
            cursor = self._conn.execute(
                "INSERT INTO parcel (client, status, address, created_at) "
                "VALUES (:client, :status, :address, :created_at)",
                {
                    "client": parcel.client,
                    "status": _status_text(parcel.status),
                    "address": parcel.address,
                    "created_at": parcel.created_at,
                },
            )
        return int(cursor.lastrowid)

    def get(self, number: int) -> Parcel:
        """Return the parcel with ``number``; raise ParcelNotFoundError if absent."""
        row = self._conn.execute(
            f"SELECT {_COLUMNS} FROM parcel WHERE number = :number",
            {"number": number},
        ).fetchone()
        if row is None:
            raise ParcelNotFoundError(number)
        return _row_to_parcel(row)

    def get_by_client(self, client: int) -> list[Parcel]:
        """Return every parcel of ``client``."""
        rows = self._conn.execute(
            f"SELECT {_COLUMNS} FROM parcel WHERE client = :client ORDER BY number",
            {"client": client},
        )
        return [_row_to_parcel(row) for row in rows]

    def set_status(self, number: int, status: ParcelStatus | str) -> None:
        """Change the status of parcel ``number``."""
        with self._conn:
            self._conn.execute(
                "UPDATE parcel SET status = :status WHERE number = :number",
                {"status": _status_text(status), "number": number},
            )

    def set_address(self, number: int, address: str) -> None:
        """Change the address of parcel ``number`` while it is still registered."""
        with self._conn:
            self._conn.execute(
                "UPDATE parcel SET address = :address "
                "WHERE number = :number AND status = :status",
                {
                    "address": address,
                    "number": number,
                    "status": ParcelStatus.REGISTERED.value,
                },
            )

    def delete(self, number: int) -> None:
        """Remove parcel ``number`` if it is still registered."""
        with self._conn:
            self._conn.execute(
                "DELETE FROM parcel WHERE number = :number AND status = :status",
                {"number": number, "status": ParcelStatus.REGISTERED.value},
            )