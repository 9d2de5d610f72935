import json
import logging
from pathlib import Path

import pytest

from gtenum.core.growtopia.items_json import ItemData, ItemsFile, load_items_file
from tests import RES_DIR


def _write(path: Path, data: object) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_load_sample() -> None:
    items = load_items_file(RES_DIR / "items.json")
    assert items.version == 21
    assert items.item_count == 14
    assert len(items) == 15
    assert items.items[0] == ItemData(item_id=0, name="Blank")
    assert items.items[-1] == ItemData(item_id=5006, name="World_Lock_2")


def test_load_keeps_order(tmp_path: Path) -> None:
    p = _write(tmp_path / "items.json", {"version": 1, "item_count": 3, "items": [{"item_id": 9, "name": "c"}, {"item_id": 1, "name": "a"}, {"item_id": 5, "name": "b"}]})
    assert [i.item_id for i in load_items_file(p).items] == [9, 1, 5]


def test_count_mismatch_is_only_a_warning(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    p = _write(tmp_path / "items.json", {"version": 1, "item_count": 10, "items": [{"item_id": 1, "name": "Dirt"}]})
    with caplog.at_level(logging.WARNING, logger="items_json"):
        items = load_items_file(p)

    assert items.item_count == 10
    assert len(items) == 1
    assert "does not match" in caplog.text


def test_missing_items_defaults_to_empty(tmp_path: Path) -> None:
    p = _write(tmp_path / "items.json", {"version": 1, "item_count": 0})
    assert load_items_file(p).items == []


def test_wrong_suffix(tmp_path: Path) -> None:
    p = tmp_path / "items.dat"
    p.write_bytes(b"\x00")
    with pytest.raises(ValueError, match="expected a .json file"):
        load_items_file(p)


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_items_file(tmp_path / "nope.json")


def test_directory(tmp_path: Path) -> None:
    d = tmp_path / "dir.json"
    d.mkdir()
    with pytest.raises(ValueError, match="not a valid file"):
        load_items_file(d)


def test_bad_json(tmp_path: Path) -> None:
    p = tmp_path / "items.json"
    p.write_text("{not json", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        load_items_file(p)


def test_missing_field(tmp_path: Path) -> None:
    p = _write(tmp_path / "items.json", {"version": 1, "item_count": 1, "items": [{"item_id": 1}]})
    with pytest.raises(ValueError, match="missing required field: name"):
        load_items_file(p)


@pytest.mark.parametrize("item_id", ["1", 1.5, True, None])
def test_non_integer_id(tmp_path: Path, item_id: object) -> None:
    p = _write(tmp_path / "items.json", {"version": 1, "item_count": 1, "items": [{"item_id": item_id, "name": "Dirt"}]})
    with pytest.raises(TypeError):
        load_items_file(p)


def test_non_string_name(tmp_path: Path) -> None:
    p = _write(tmp_path / "items.json", {"version": 1, "item_count": 1, "items": [{"item_id": 1, "name": 42}]})
    with pytest.raises(TypeError):
        load_items_file(p)


def test_items_not_a_list(tmp_path: Path) -> None:
    p = _write(tmp_path / "items.json", {"version": 1, "item_count": 1, "items": {"item_id": 1, "name": "Dirt"}})
    with pytest.raises(TypeError):
        load_items_file(p)


def test_top_level_not_an_object(tmp_path: Path) -> None:
    p = _write(tmp_path / "items.json", [1, 2, 3])
    with pytest.raises(TypeError):
        load_items_file(p)


def test_from_dict_roundtrip() -> None:
    items = ItemsFile.from_dict({"version": 3, "item_count": 1, "items": [{"item_id": 7, "name": "Rock"}]})
    assert items == ItemsFile(version=3, item_count=1, items=[ItemData(7, "Rock")])
    assert json.loads(items.to_json()) == {"version": 3, "item_count": 1, "items": [{"item_id": 7, "name": "Rock"}]}


def test_records_are_immutable() -> None:
    item = ItemData(1, "Dirt")
    with pytest.raises(AttributeError):
        item.name = "Rock"  # type: ignore
