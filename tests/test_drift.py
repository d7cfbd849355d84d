from dataclasses import dataclass

from catalogsync.drift import Drift, detect, detect_drifts


@dataclass
class Item:
    key: str
    id: str = ""
    value: int = 0


def _copy_id(state, conf):
    conf.id = state.id


def _equal(a, b):
    return a.key == b.key and a.value == b.value


def test_detect_classifies_items():
    state = {"a": Item("a", "1", 1), "b": Item("b", "2", 2), "c": Item("c", "3", 3)}
    config = {"a": Item("a", value=1), "b": Item("b", value=20), "d": Item("d", value=4)}
    result = detect(state, config, _copy_id, _equal)
    assert list(result.created) == ["d"]
    assert list(result.updated) == ["b"]
    assert list(result.deleted) == ["c"]
    assert list(result.unchanged) == ["a"]


def test_detect_copies_state_into_config_items():
    state = {"a": Item("a", "id-a", 1), "b": Item("b", "id-b", 2)}
    config = {"a": Item("a", value=1), "b": Item("b", value=5)}
    created, updated, deleted, unchanged = detect(state, config, _copy_id, _equal)
    assert unchanged["a"] is config["a"]
    assert unchanged["a"].id == "id-a"
    assert updated["b"].id == "id-b"
    assert created == {} and deleted == {}


def test_detect_empty_inputs():
    result = detect({}, {}, _copy_id, _equal)
    assert result == Drift()


def test_detect_partition_covers_all_keys():
    state = {k: Item(k, k, i) for i, k in enumerate("abcd")}
    config = {k: Item(k, value=i) for i, k in enumerate("cdef")}
    result = detect(state, config, _copy_id, _equal)
    keys = set(result.created) | set(result.updated) | set(result.deleted) | set(result.unchanged)
    assert keys == set(state) | set(config)


def test_detect_drifts_lists():
    state = [Item("a", "1", 1), Item("b", "2", 2)]
    config = [Item("b", value=3), Item("c", value=4)]

    def set_id(item, value):
        item.id = value

    created, updated, deleted, unchanged = detect_drifts(
        state, config, lambda i: i.key, lambda i: i.id, set_id, _equal
    )
    assert created == [config[1]]
    assert updated == [config[0]]
    assert updated[0].id == "2"
    assert deleted == [state[0]]
    assert unchanged == []


def test_detect_drifts_unchanged_gets_state_id():
    state = [Item("a", "1", 1)]
    config = [Item("a", value=1)]

    def set_id(item, value):
        item.id = value

    result = detect_drifts(state, config, lambda i: i.key, lambda i: i.id, set_id, _equal)
    assert result.unchanged == [Item("a", "1", 1)]