"""Table layouts for the sensor-log tables and helpers to turn JSON records into rows."""

from __future__ import annotations

import datetime as _dt
import math
from dataclasses import dataclass
from typing import Any, Mapping

__all__ = ["TableSpec", "TABLES", "DEFAULT_ORDER", "date_stamp", "table"]


@dataclass(frozen=True)
class TableSpec:
    """How one JSON export file maps onto one database table."""

    key: str
    table: str
    filename: str
    create_sql: str
    columns: tuple[str, ...]

    def insert_sql(self) -> str:
        """Parameterised INSERT statement with one qmark placeholder per column."""
        placeholders = ", ".join("?" for _ in self.columns)
        return f"insert into {self.table} values({placeholders});"

    def row(self, record: Any) -> tuple[str, ...]:
        """Pick this table's columns out of a JSON record, each as text.

        Missing keys and a null record give empty strings; arrays and
        objects cannot be stored as text and raise TypeError.
        """
        if record is None:
            return tuple("" for _ in self.columns)
        if not isinstance(record, Mapping):
            raise TypeError(
                f"{self.table} record must be a JSON object, not {type(record).__name__}"
            )
        return tuple(_as_text(record.get(column)) for column in self.columns)


def _format_real(value: float) -> str:
    if math.isnan(value):
        return "null"
    if math.isinf(value):
        return "1e+9999" if value > 0 else "-1e+9999"
    text = format(value, ".17g")
    if "." not in text and "e" not in text:
        text += ".0"
    return text


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_real(value)
    if isinstance(value, str):
        return value
    raise TypeError(f"value of type {type(value).__name__} is not convertible to string")


def date_stamp(when: _dt.date | None = None) -> str:
    """Directory date stamp: year, unpadded month, two-digit day.

    Uses today's local date when *when* is not given.
    """
    if when is None:
        when = _dt.date.today()
    return f"{when.year}{when.month}{when.day:02d}"


_SPECS = (
    TableSpec(
        key="log",
        table="LOG",
        filename="log.json",
        create_sql="create table LOG(date_captured text,token text primary key,vehicle text);",
        columns=("date_captured", "token", "vehicle"),
    ),
    TableSpec(
        key="frame",
        table="FRAME",
        filename="frame.json",
        create_sql="create table FRAME(frame_token text primary key,token_next text);",
        columns=("frame_token", "token_next"),
    ),
    TableSpec(
        key="scene",
        table="SCENE",
        filename="scene.json",
        create_sql=(
            "create table SCENE(first_frame_token text primary key,"
            "log_token text, nbr_frames text);"
        ),
        columns=("first_frame_token", "log_token", "nbr_frames"),
    ),
    TableSpec(
        key="framedata",
        table="FRAME_DATA",
        filename="frame_data.json",
        create_sql=(
            "create table FRAME_DATA(frame_token text,frame_data_token text primary key,"
            "fileformat text, filename text);"
        ),
        columns=("frame_token", "frame_data_token", "fileformat", "filename"),
    ),
    TableSpec(
        key="lidar",
        table="LIDAR_DATA",
        filename="lidar_data.json",
        create_sql=(
            "create table LIDAR_DATA(token text primary key references frame (frame_token),"
            " fileformat text, filename text);"
        ),
        columns=("token", "fileformat", "filename"),
    ),
    TableSpec(
        key="cam",
        table="CAM_DATA",
        filename="cam_data.json",
        create_sql=(
            "create table CAM_DATA(token text primary key references frame (frame_token),"
            " fileformat text, filename text);"
        ),
        columns=("token", "fileformat", "filename"),
    ),
    TableSpec(
        key="gps",
        table="GPS_DATA",
        filename="gps_data.json",
        create_sql=(
            "create table GPS_DATA(token text primary key references frame (frame_token),"
            "latitude text,longitude text, HorizontalDilutionOfPrecision text);"
        ),
        columns=("token", "latitude", "longitude", "HorizontalDilutionOfPrecision"),
    ),
    TableSpec(
        key="imu",
        table="IMU_DATA",
        filename="imu_data.json",
        create_sql=(
            "create table IMU_DATA(token text primary key references frame (frame_token),"
            "scaledaccelx text, scaledaccely text, scaledaccelz text);"
        ),
        columns=("token", "scaledaccelx", "scaledaccely", "scaledaccelz"),
    ),
    TableSpec(
        key="can",
        table="CAN_DATA",
        filename="can_data.json",
        create_sql=(
            "create table CAN_DATA(token text primary key references frame (frame_token),"
            "handleAngle text,turnLight text,vehicleSpeed text, gear text);"
        ),
        columns=("token", "handleAngle", "turnLight", "vehicleSpeed", "gear"),
    ),
)

TABLES: dict[str, TableSpec] = {spec.key: spec for spec in _SPECS}

# Frame data is known but not stored by default.
DEFAULT_ORDER: tuple[str, ...] = ("log", "frame", "scene", "lidar", "cam", "gps", "imu", "can")


def table(name: str) -> TableSpec:
    """Look up a table layout by its short name (case-insensitive)."""
    try:
        return TABLES[name.lower()]
    except KeyError:
        known = ", ".join(TABLES)
        raise KeyError(f"unknown table {name!r}; known tables: {known}") from None