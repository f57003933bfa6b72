import json
import sqlite3
from pathlib import Path

import pytest

from divastore.cli import main, run_all
from divastore.storing import data_path
from divastore.tables import table

STAMP = "20240105"


def _write(root: Path, name: str, records) -> None:
    path = data_path(root, table(name), STAMP)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(records), encoding="utf-8")


@pytest.fixture
def connection():
    conn = sqlite3.connect(":memory:")
    yield conn
    conn.close()


def test_run_all_counts(tmp_path, connection, capsys):
    _write(tmp_path, "frame", [{"frame_token": "a"}, {"frame_token": "b"}])
    _write(tmp_path, "cam", [{"token": "a", "fileformat": "jpeg", "filename": "x.jpg"}])
    results = run_all(connection, tmp_path, STAMP, ["frame", "cam"])
    assert results == {"frame": 2, "cam": 1}
    out = capsys.readouterr().out
    assert "[DBStoring] cam successfully" in out


def test_run_all_missing_export_creates_empty_table(tmp_path, connection):
    results = run_all(connection, tmp_path, STAMP, ["scene"])
    assert results == {"scene": 0}
    assert connection.execute("select count(*) from SCENE").fetchone()[0] == 0


def test_run_all_continues_after_failure(tmp_path, connection, capsys):
    connection.execute(table("cam").create_sql)
    _write(tmp_path, "log", [{"token": "l1", "vehicle": "car"}])
    results = run_all(connection, tmp_path, STAMP, ["cam", "log"])
    assert results == {"cam": None, "log": 1}
    assert "CAM_DATA" in capsys.readouterr().err


def test_run_all_unknown_table(tmp_path, connection):
    with pytest.raises(KeyError):
        run_all(connection, tmp_path, STAMP, ["nope"])


def test_main_stores_into_database(tmp_path, capsys):
    _write(tmp_path, "frame", [{"frame_token": "f1", "token_next": "f2"}])
    db = tmp_path / "store.sqlite"
    code = main(["--database", str(db), "--root", str(tmp_path), "--date", STAMP, "--table", "frame"])
    assert code == 0
    with sqlite3.connect(db) as conn:
        assert conn.execute("select * from FRAME").fetchall() == [("f1", "f2")]
    assert "[DBStoring] frame successfully" in capsys.readouterr().out


def test_main_rejects_unknown_table(tmp_path):
    with pytest.raises(SystemExit):
        main(["--database", str(tmp_path / "d.sqlite"), "--table", "bogus"])