import pytest

from aoclient.evidence import EvidenceLocker
from aoclient.inventory import EvidenceItem, load_inventory


@pytest.fixture
def sent():
    return []


@pytest.fixture
def locker(sent):
    return EvidenceLocker(lambda header, contents: sent.append((header, contents)), per_page=2)


def _items(count):
    return [EvidenceItem(f"n{i}", f"d{i}", f"i{i}.png") for i in range(count)]


def test_zero_per_page_rejected(sent):
    with pytest.raises(ValueError):
        EvidenceLocker(lambda h, c: None, per_page=0)


def test_click_add_button_in_global_sends_new_evidence(locker, sent):
    locker.set_global_list(_items(1))
    assert locker.click(1) is None
    assert sent == [("PE", ["<name>", "<description>", "empty.png"])]


def test_click_add_button_in_private_appends(locker, sent):
    locker.switch(False)
    locker.click(0)
    assert sent == []
    assert locker.local_list == [EvidenceItem("<name>", "<description>", "empty.png")]
    assert locker.private_list == locker.local_list


def test_click_selects_item(locker):
    items = _items(3)
    locker.set_global_list(items)
    locker.current_page = 1
    assert locker.click(0) == items[2]
    assert locker.current_evidence == 2


def test_click_past_add_button_does_nothing(locker, sent):
    locker.set_global_list(_items(1))
    assert locker.click(5) is None
    assert sent == []
    assert locker.current_evidence == 0


def test_delete_global_sends_index(locker, sent):
    locker.set_global_list(_items(2))
    locker.click(1)
    locker.delete()
    assert sent == [("DE", ["1"])]
    assert locker.current_evidence == 0


def test_delete_private_autosaves(tmp_path, sent):
    path = tmp_path / "inventories" / "autosave.ini"
    locker = EvidenceLocker(lambda h, c: sent.append((h, c)), per_page=4, autosave_path=path)
    locker.switch(False)
    locker.click(0)
    locker.click(1)
    locker.click(0)
    locker.delete()
    assert len(locker.private_list) == 1
    assert load_inventory(path) == locker.private_list


def test_delete_private_out_of_range(locker):
    locker.switch(False)
    with pytest.raises(IndexError):
        locker.delete()


def test_commit_global_sends_edit(locker, sent):
    locker.set_global_list(_items(2))
    locker.click(1)
    locker.commit("name", "desc", "img.png")
    assert sent == [("EE", ["1", "name", "desc", "img.png"])]
    assert locker.local_list == _items(2)


def test_commit_private_replaces_and_saves(tmp_path):
    path = tmp_path / "autosave.ini"
    locker = EvidenceLocker(lambda h, c: None, per_page=4, autosave_path=path)
    locker.switch(False)
    locker.click(0)
    locker.commit("knife", "sharp", "knife.png")
    expected = [EvidenceItem("knife", "sharp", "knife.png")]
    assert locker.private_list == expected
    assert load_inventory(path) == expected


def test_autosave_is_loaded_at_start(tmp_path):
    path = tmp_path / "autosave.ini"
    first = EvidenceLocker(lambda h, c: None, autosave_path=path)
    first.switch(False)
    first.click(0)
    first.commit("a", "b", "c.png")
    second = EvidenceLocker(lambda h, c: None, autosave_path=path)
    assert second.private_list == first.private_list


def test_transfer_global_to_private(locker, sent):
    items = _items(2)
    locker.set_global_list(items)
    locker.click(1)
    assert locker.transfer() == items[1].name
    assert locker.private_list == [items[1]]
    assert sent == []


def test_transfer_private_to_global(locker, sent):
    locker.switch(False)
    locker.click(0)
    locker.commit("x", "y", "z.png")
    assert locker.transfer() == "x"
    assert sent == [("PE", ["x", "y", "z.png"])]


def test_transfer_nothing_selected(locker):
    assert locker.transfer() is None


def test_toggle_present(locker):
    assert locker.toggle_present() is True
    assert locker.toggle_present() is False
    locker.toggle_present()
    locker.switch(False)
    assert locker.presenting is False
    assert locker.toggle_present() is False


def test_global_update_while_private_keeps_local(locker):
    locker.switch(False)
    locker.set_global_list(_items(3))
    assert locker.local_list == []
    locker.switch(True)
    assert locker.local_list == _items(3)


def test_switch_resets_page(locker):
    locker.set_global_list(_items(5))
    locker.current_page = 2
    locker.switch(True)
    assert locker.current_page == 0


def test_layout_counts_add_button(locker):
    empty = locker.layout()
    assert list(empty.indices) == [0]
    locker.set_global_list(_items(3))
    layout = locker.layout()
    assert layout.show_right is True
    assert layout.show_left is False
    assert layout.items_on_page == locker.per_page