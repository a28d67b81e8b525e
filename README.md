# parceltrack

A small parcel tracker that keeps its data in an SQLite database. It uses
only the Python standard library.

Each parcel has a number, the client it belongs to, a delivery address, a
creation time and a status. The status moves forward from `registered` to
`sent` to `delivered`. A parcel's address can be changed only while the
parcel is `registered`, and only a `registered` parcel can be deleted. For a
parcel in any other status, both requests are ignored without an error.

## Installation

```
pip install .
```

## Command line

```
parceltrack [database]
```

The command opens the SQLite file `database`, which defaults to `tracker.db`
in the current directory. It creates the `parcel` table if the table does not
exist yet. It then runs a fixed demonstration for client `1`:

1. It registers a parcel.
2. It changes the parcel's address.
3. It advances the parcel to `sent`.
4. It lists the client's parcels.
5. It tries to delete the sent parcel. The parcel is kept.
6. It lists the client's parcels again.
7. It registers a second parcel and deletes it.
8. It lists the client's parcels once more.

Messages are printed in Russian. If a database error occurs, the command
prints the error and exits with status 1. Otherwise it exits with status 0.

## Library use

```python
import sys

from parceltrack.service import ParcelService
from parceltrack.store import ParcelNotFoundError, ParcelStatus, ParcelStore, connect

conn = connect("tracker.db")
store = ParcelStore(conn)
store.create_schema()

service = ParcelService(store, sys.stdout)
parcel = service.register(1, "Main Street 5")
service.change_address(parcel.number, "High Street 25")
service.next_status(parcel.number)           # registered -> sent
service.print_client_parcels(1)

assert store.get(parcel.number).status is ParcelStatus.SENT

try:
    store.get(10_000_000)
except ParcelNotFoundError:
    print("no such parcel")

conn.close()
```

### `parceltrack.store`

- `connect(path)` opens an SQLite database and returns a `sqlite3.Connection`.
- `ParcelStatus` is a string enum with the members `REGISTERED`, `SENT` and
  `DELIVERED`.
- `Parcel` is a dataclass with the fields `client`, `address`, `status`
  (default `ParcelStatus.REGISTERED`), `created_at` (default `""`) and
  `number` (default `0`).
- `ParcelStore(conn)` works on the `parcel` table:
  - `create_schema()` creates the table if it is missing.
  - `add(parcel)` inserts a parcel and returns the number assigned to it.
  - `get(number)` returns one parcel. It raises `ParcelNotFoundError`, a
    `LookupError`, if no parcel has that number.
  - `get_by_client(client)` returns a list of the client's parcels, ordered
    by number.
  - `set_status(number, status)` sets the status.
  - `set_address(number, address)` changes the address of a registered
    parcel.
  - `delete(number)` removes a registered parcel.

### `parceltrack.service`

`ParcelService(store, out=None)` builds on a `ParcelStore`. It writes its
messages to `out`, or to standard output if `out` is not given.

- `register(client, address)` stores a new `registered` parcel. Its creation
  time is the current UTC time as `YYYY-MM-DDTHH:MM:SSZ`. The method prints a
  message and returns the parcel with its number filled in.
- `print_client_parcels(client)` prints a header, one line for each of the
  client's parcels, and a blank line.
- `next_status(number)` moves `registered` to `sent` and `sent` to
  `delivered`, and prints the new status. A `delivered` parcel is left as it
  is. A parcel with a status the service does not know raises `ValueError`.
  A missing parcel raises `ParcelNotFoundError`.
- `change_address(number, address)` and `delete(number)` pass the request to
  the store.
- `main(argv=None)` is the entry point of the `parceltrack` command.

## What it does not do

The command only runs the demonstration described above. It has no
subcommands for registering, listing, updating or deleting individual parcels.
To do those things, use the library API.

## Running the tests

```
pip install .[test]
pytest
```