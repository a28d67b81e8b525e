"""Parcel registration workflow and the demonstration command."""

from __future__ import annotations

import argparse
import sqlite3
import sys
from contextlib import closing
from datetime import datetime, timezone
from typing import TextIO

from parceltrack.store import (
    Parcel,
    ParcelNotFoundError,
    ParcelStatus,
    ParcelStore,
    connect,
)

_NEXT_STATUS = {
    ParcelStatus.REGISTERED: ParcelStatus.SENT,
    ParcelStatus.SENT: ParcelStatus.DELIVERED,
}


def _now_rfc3339() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


class ParcelService:
    """Registers parcels and moves them through their lifecycle."""

    def __init__(self, store: ParcelStore, out: TextIO | None = None) -> None:
        self._store = store
        self._out = out

    def _print(self, *args: object) -> None:
        print(*args, file=self._out if self._out is not None else sys.stdout)

    def register(self, client: int, address: str) -> Parcel:
        """Store a new registered parcel for ``client`` and return it."""
        parcel = Parcel(
            client=client,
            address=address,
            status=ParcelStatus.REGISTERED,
            created_at=_now_rfc3339(),
        )
        parcel.number = self._store.add(parcel)
        self._print(
            f"Новая посылка № {parcel.number} на адрес {parcel.address} "
            f"от клиента с идентификатором {parcel.client} "
            f"зарегистрирована {parcel.created_at}"
        )
        return parcel

    def print_client_parcels(self, client: int) -> None:
        """Print every parcel of ``client`` followed by a blank line."""
        parcels = self._store.get_by_client(client)
        self._print(f"Посылки клиента {client}:")
        for parcel in parcels:
            self._print(
                f"Посылка № {parcel.number} на адрес {parcel.address} "
                f"от клиента с идентификатором {parcel.client} "
                f"зарегистрирована {parcel.created_at}, статус {parcel.status}"
            )
        self._print()

    def next_status(self, number: int) -> None:
        """Advance parcel ``number`` to its next status; delivered parcels stay put."""
        parcel = self._store.get(number)
        if parcel.status == ParcelStatus.DELIVERED:
            return
        try:
            next_status = _NEXT_STATUS[ParcelStatus(parcel.status)]
        except ValueError:
            raise ValueError(
                f"parcel {number} has unknown status {parcel.status!r}"
            ) from None
        self._print(f"У посылки № {number} новый статус: {next_status}")
        self._store.set_status(number, next_status)

    def change_address(self, number: int, address: str) -> None:
        """Change the address of a registered parcel."""
        self._store.set_address(number, address)

    def delete(self, number: int) -> None:
        """Delete a registered parcel."""
        self._store.delete(number)


def _run_demo(service: ParcelService) -> None:
    client = 1
    address = "Псков, д. Пушкина, ул. Колотушкина, д. 5"
    parcel = service.register(client, address)

    service.change_address(parcel.number, "Саратов, д. Верхние Зори, ул. Козлова, д. 25")
    service.next_status(parcel.number)
    service.print_client_parcels(client)

    # A sent parcel is not removed.
    service.delete(parcel.number)
    service.print_client_parcels(client)

    # A freshly registered parcel is removed.
    parcel = service.register(client, address)
    service.delete(parcel.number)
    service.print_client_parcels(client)


def main(argv: list[str] | None = None) -> int:
    """Run the parcel tracking demonstration against an SQLite database."""
    parser = argparse.ArgumentParser(description="Parcel tracking demonstration.")
    parser.add_argument(
        "database", nargs="?", default="tracker.db", help="SQLite database file"
    )
    args = parser.parse_args(argv)

    try:
        with closing(connect(args.database)) as conn:
            store = ParcelStore(conn)
            store.create_schema()
            _run_demo(ParcelService(store))
    except (sqlite3.Error, ParcelNotFoundError, ValueError) as exc:
        print(exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())