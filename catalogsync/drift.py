"""Comparison of stored state against desired configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Mapping, Sequence, TypeVar

T = TypeVar("T")


@dataclass
class Drift:
    """Items split into created, updated, deleted and unchanged."""

    created: Any = field(default_factory=dict)
    updated: Any = field(default_factory=dict)
    deleted: Any = field(default_factory=dict)
    unchanged: Any = field(default_factory=dict)

    def __iter__(self) -> Iterator[Any]:
        yield self.created
        yield self.updated
        yield self.deleted
        yield self.unchanged


def detect(
    state: Mapping[str, T],
    config: Mapping[str, T],
    from_state_to_config: Callable[[T, T], None],
    is_equal: Callable[[T, T], bool],
) -> Drift:
    """Compare keyed state and config items.

    Items present in both get their state data copied into the config item
    before comparison; updated and unchanged hold the config items.
    """
    result = Drift()
    for key, state_item in state.items():
        config_item = config.get(key)
        if key not in config:
            result.deleted[key] = state_item
            continue
        from_state_to_config(state_item, config_item)
        if is_equal(state_item, config_item):
            result.unchanged[key] = config_item
        else:
            result.updated[key] = config_item
    for key, config_item in config.items():
        if key not in state:
            result.created[key] = config_item
    return result


def detect_drifts(
    state_list: Sequence[T],
    config_list: Sequence[T],
    get_unique_key: Callable[[T], str],
    get_id: Callable[[T], str],
    set_id: Callable[[T, str], None],
    is_equal: Callable[[T, T], bool],
) -> Drift:
    """Compare two lists keyed by ``get_unique_key``; the result holds lists."""
    state_map = {get_unique_key(item): item for item in state_list}
    config_map = {get_unique_key(item): item for item in config_list}

    result = Drift(created=[], updated=[], deleted=[], unchanged=[])
    for key, state_item in state_map.items():
        if key not in config_map:
            result.deleted.append(state_item)
            continue
        config_item = config_map[key]
        set_id(config_item, get_id(state_item))
        if is_equal(state_item, config_item):
            result.unchanged.append(config_item)
        else:
            result.updated.append(config_item)
    result.created.extend(
        item for key, item in config_map.items() if key not in state_map
    )
    return result