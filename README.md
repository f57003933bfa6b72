# divastore

`divastore` takes the JSON files that a recording session writes for one day
and stores them in database tables, one table per kind of record.

A day's exports live under a data root in a directory named after the date,
`<root>/<stamp>_0/JSON/`, where the stamp is the year, the month (not padded)
and the two-digit day run together, for example `2024315` for 15 March 2024.
Each file there is a JSON array of objects; every object becomes one row.

By default the tables are filled in this order, so that rows referring to
frames find the frames already stored:

| Name    | Table        | JSON file          | Columns                                                   |
|---------|--------------|--------------------|-----------------------------------------------------------|
| `log`   | `LOG`        | `log.json`         | date_captured, token, vehicle                             |
| `frame` | `FRAME`      | `frame.json`       | frame_token, token_next                                   |
| `scene` | `SCENE`      | `scene.json`       | first_frame_token, log_token, nbr_frames                  |
| `lidar` | `LIDAR_DATA` | `lidar_data.json`  | token, fileformat, filename                               |
| `cam`   | `CAM_DATA`   | `cam_data.json`    | token, fileformat, filename                               |
| `gps`   | `GPS_DATA`   | `gps_data.json`    | token, latitude, longitude, HorizontalDilutionOfPrecision |
| `imu`   | `IMU_DATA`   | `imu_data.json`    | token, scaledaccelx, scaledaccely, scaledaccelz           |
| `can`   | `CAN_DATA`   | `can_data.json`    | token, handleAngle, turnLight, vehicleSpeed, gear         |

A `framedata` table (`FRAME_DATA`, from `frame_data.json`, columns
frame_token, frame_data_token, fileformat, filename) is also described and is
stored only when asked for.

Every value is stored as text: strings as they are, numbers in their decimal
form, booleans as `true`/`false`, and a missing or null field as an empty
string. A field holding an array or an object is an error. Each table is
created (`create table ...`) before its rows are inserted, so a table that
already exists makes that table's load fail. Each row is inserted and
committed on its own; rows committed before a failing row stay stored. A
missing export file means no rows, though the table is still created.

## Installing

```
pip install .
```

## Command line

```
divastore --help
```

Options:

- `--database FILE` — SQLite database file (default `diva2db.sqlite`).
- `--root DIR` — directory holding the day folders (default `DIVA2_DATA`).
- `--date STAMP` — day stamp to load (default: today's local date).
- `--table NAME` — a table to store, by its short name from the table above
  or `framedata`; may be given more than once. Without it, all tables but
  `framedata` are stored in the order shown.

After each table it prints `[DBStoring] <name> successfully`. An error in one
table is printed to standard error and the run carries on with the next table.

## From Python

```python
import sqlite3
from divastore.cli import run_all
from divastore.tables import DEFAULT_ORDER, date_stamp, table
from divastore.storing import data_path, load_records, store_records

connection = sqlite3.connect("diva.db")

# every default table, in order, for today's exports
results = run_all(connection, "/data/diva", date_stamp(None), DEFAULT_ORDER)
# results maps each name to its inserted row count, or None if it failed

# or one table by hand
spec = table("gps")
records = load_records(data_path("/data/diva", spec, "2024315"))
store_records(connection, spec, records)
```

- `table(name)` looks up a `TableSpec` by its short name (case-insensitive)
  and raises `KeyError` for an unknown name. A `TableSpec` holds the table's
  name, file name, create statement and columns; `insert_sql()` gives the
  insert statement with one `?` placeholder per column, and `row(record)`
  turns a record into a tuple of text values.
- `load_records(path)` reads an export; a missing file or `null` gives an
  empty list, and a document that is not an array raises `ValueError`.
- `store_records(connection, spec, records)` creates the table, inserts the
  records and returns how many were inserted. It works with any DB-API
  connection whose driver takes `?` placeholders.
- `StoringJob(spec, root, stamp)` stores one table's export for one day with
  `run(connection)`; after `stop()`, a later `run` stores nothing and
  returns 0.
- `date_stamp(when)` formats a date as a day stamp (today when `when` is
  `None`).

## What it does not do

It does not produce the JSON exports; it only loads them. The command stores
into a local SQLite file and has no options for connecting to a database
server; to load into another database, call `run_all` or `store_records`
from Python with a connection that uses `?` placeholders.

## Running the tests

```
pip install .[test]
pytest
```