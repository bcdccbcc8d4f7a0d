import pytest

from aoclient.inventory import (
    EvidenceItem,
    evidence_changed,
    load_inventory,
    save_inventory,
)


def test_round_trip_keeps_items_and_order(tmp_path):
    path = tmp_path / "inv.ini"
    items = [
        EvidenceItem(name="Knife", description="Found at the scene.", image="knife.png"),
        EvidenceItem(name="Letter", description="Line one\nLine two, with a comma", image="letter.png"),
        EvidenceItem(name="  padded ", description="", image="@odd.png"),
    ]
    save_inventory(path, items)
    assert load_inventory(path) == items


def test_save_replaces_previous_contents(tmp_path):
    path = tmp_path / "inv.ini"
    save_inventory(path, [EvidenceItem("a", "b", "c.png")] * 3)
    save_inventory(path, [EvidenceItem("x", "y", "z.png")])
    assert load_inventory(path) == [EvidenceItem("x", "y", "z.png")]


def test_save_empty_list_loads_empty(tmp_path):
    path = tmp_path / "inv.ini"
    save_inventory(path, [EvidenceItem("a", "b", "c.png")])
    save_inventory(path, [])
    assert load_inventory(path) == []


def test_save_creates_missing_directory(tmp_path):
    path = tmp_path / "inventories" / "autosave.ini"
    save_inventory(path, [EvidenceItem("a", "b", "c.png")])
    assert path.is_file()
    assert load_inventory(path)[0].name == "a"


def test_missing_keys_use_defaults(tmp_path):
    path = tmp_path / "inv.ini"
    path.write_text("[0]\nname=Knife\n", encoding="utf-8")
    assert load_inventory(path) == [
        EvidenceItem(name="Knife", description="<description>", image="empty.png")
    ]


def test_general_section_is_skipped(tmp_path):
    path = tmp_path / "inv.ini"
    path.write_text("[General]\nname=ignored\n\n[0]\nimage=a.png\n", encoding="utf-8")
    items = load_inventory(path)
    assert items == [EvidenceItem(name="<name>", description="<description>", image="a.png")]


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_inventory(tmp_path / "nothing.ini")


def test_evidence_changed_same_is_false():
    a = EvidenceItem("n", "d", "i.png")
    assert evidence_changed(a, EvidenceItem("n", "d", "i.png")) is False


@pytest.mark.parametrize(
    "other",
    [
        EvidenceItem("other", "d", "i.png"),
        EvidenceItem("n", "other", "i.png"),
        EvidenceItem("n", "d", "other.png"),
    ],
)
def test_evidence_changed_detects_each_field(other):
    assert evidence_changed(EvidenceItem("n", "d", "i.png"), other) is True