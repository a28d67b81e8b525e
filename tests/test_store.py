import dataclasses
import random
from datetime import datetime, timezone

import pytest

from parceltrack.store import (
    Parcel,
    ParcelNotFoundError,
    ParcelStatus,
    ParcelStore,
    connect,
)


@pytest.fixture
def store(tmp_path):
    conn = connect(tmp_path / "tracker.db")
    parcel_store = ParcelStore(conn)
    parcel_store.create_schema()
    yield parcel_store
    conn.close()


def make_test_parcel():
    return Parcel(
        client=1000,
        status=ParcelStatus.REGISTERED,
        address="test",
        created_at=datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
    )


def test_add_get_delete(store):
    parcel = make_test_parcel()
    parcel.number = store.add(parcel)
    assert parcel.number > 0

    assert store.get(parcel.number) == parcel

    store.delete(parcel.number)
    with pytest.raises(ParcelNotFoundError):
        store.get(parcel.number)


def test_set_address(store):
    parcel = make_test_parcel()
    parcel.number = store.add(parcel)
    assert parcel.number > 0

    new_address = "new test address"
    store.set_address(parcel.number, new_address)

    assert store.get(parcel.number).address == new_address


def test_set_status(store):
    parcel = make_test_parcel()
    parcel.number = store.add(parcel)
    assert parcel.number > 0

    store.set_status(parcel.number, ParcelStatus.SENT)

    assert store.get(parcel.number).status == ParcelStatus.SENT


def test_get_by_client(store):
    client = random.randrange(10_000_000)
    parcels = [dataclasses.replace(make_test_parcel(), client=client) for _ in range(3)]

    parcel_map = {}
    for parcel in parcels:
        number = store.add(parcel)
        assert number > 0
        parcel.number = number
        parcel_map[number] = parcel

    stored = store.get_by_client(client)
    assert len(stored) == len(parcel_map)
    for parcel in stored:
        assert parcel.number in parcel_map
        assert parcel_map[parcel.number] == parcel


def test_get_missing_parcel_raises(store):
    with pytest.raises(ParcelNotFoundError) as excinfo:
        store.get(424242)
    assert excinfo.value.number == 424242


def test_set_address_ignored_unless_registered(store):
    parcel = make_test_parcel()
    number = store.add(parcel)
    store.set_status(number, ParcelStatus.SENT)

    store.set_address(number, "elsewhere")

    assert store.get(number).address == "test"


def test_delete_ignored_unless_registered(store):
    number = store.add(make_test_parcel())
    store.set_status(number, ParcelStatus.DELIVERED)

    store.delete(number)

    assert store.get(number).status == ParcelStatus.DELIVERED


def test_get_by_client_without_parcels(store):
    store.add(make_test_parcel())
    assert store.get_by_client(1001) == []


def test_numbers_increase(store):
    first = store.add(make_test_parcel())
    second = store.add(make_test_parcel())
    assert second > first


def test_status_read_back_as_enum(store):
    number = store.add(make_test_parcel())
    store.set_status(number, "sent")
    assert store.get(number).status is ParcelStatus.SENT


def test_data_survives_reconnect(tmp_path):
    path = tmp_path / "tracker.db"
    conn = connect(path)
    first = ParcelStore(conn)
    first.create_schema()
    parcel = make_test_parcel()
    parcel.number = first.add(parcel)
    conn.close()

    conn = connect(path)
    try:
        assert ParcelStore(conn).get(parcel.number) == parcel
    finally:
        conn.close()