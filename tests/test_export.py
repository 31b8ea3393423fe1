import csv
import json

import pytest

from manifest.export import FIELDS, export_csv, export_json, to_dicts
from manifest.models import Coordinate, ResolvedDependency, Role


def make_records():
    return [
        ResolvedDependency(Coordinate.parse("org.mybatis:mybatis"), "3.5.13", Role.OPTIONAL_COMPILE),
        ResolvedDependency(Coordinate.parse("h2"), "2.2.224", Role.TEST_ONLY),
    ]


def test_to_dicts():
    data = to_dicts(make_records())
    assert data[0] == {
        "group": "org.mybatis",
        "artifact": "mybatis",
        "coordinate": "org.mybatis:mybatis",
        "version": "3.5.13",
        "role": "optional-compile",
    }
    assert data[1]["group"] == ""


def test_export_json(tmp_path):
    out = tmp_path / "out.json"
    export_json(make_records(), str(out))

    data = json.loads(out.read_text(encoding="utf-8"))
    assert [d["coordinate"] for d in data] == ["org.mybatis:mybatis", "h2"]
    assert data[1]["role"] == "test-only"


def test_export_csv(tmp_path):
    out = tmp_path / "out.csv"
    export_csv(make_records(), str(out))

    rows = list(csv.reader(out.open("r", encoding="utf-8")))
    assert rows[0] == FIELDS
    assert rows[1] == ["org.mybatis", "mybatis", "org.mybatis:mybatis", "3.5.13", "optional-compile"]
    assert len(rows) == 3


def test_export_json_unwritable(tmp_path):
    with pytest.raises(SystemExit) as exc:
        export_json(make_records(), str(tmp_path / "missing" / "out.json"))
    assert exc.value.code == 1
