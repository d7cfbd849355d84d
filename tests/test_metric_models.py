import copy

import pytest

from catalogsync.metric_models import (
    MetricDTO,
    MetricMetadata,
    MetricSpec,
    MetricSpecFormat,
    from_state_to_config,
    get_metric_unique_key,
    is_equal_metric,
)


def _dto(spec_id="m1"):
    return MetricDTO(
        api_version="v1",
        kind="Metric",
        metadata=MetricMetadata(
            name="coverage",
            labels={"team": "core"},
            component_type=["service", "cloud-resource"],
            facts=[{"name": "fact"}],
        ),
        spec=MetricSpec(
            id=spec_id,
            name="Coverage",
            description="Test coverage",
            format=MetricSpecFormat(unit="%"),
        ),
    )


def test_unique_key_is_spec_name():
    dto = _dto()
    assert get_metric_unique_key(dto) == dto.spec.name


def test_from_state_to_config_copies_id():
    state, conf = _dto("remote-id"), _dto("")
    from_state_to_config(state, conf)
    assert conf.spec.id == "remote-id"


def test_equal_ignores_id():
    assert is_equal_metric(_dto("a"), _dto("b"))


@pytest.mark.parametrize(
    "change",
    [
        lambda d: setattr(d.spec, "name", "other"),
        lambda d: setattr(d.spec, "description", "other"),
        lambda d: setattr(d.spec.format, "unit", "ms"),
        lambda d: setattr(d.metadata, "name", "other"),
        lambda d: d.metadata.labels.update({"team": "other"}),
        lambda d: d.metadata.labels.update({"extra": "x"}),
        lambda d: d.metadata.component_type.reverse(),
        lambda d: d.metadata.facts.append({"name": "more"}),
    ],
)
def test_any_difference_makes_unequal(change):
    original = _dto()
    changed = copy.deepcopy(original)
    change(changed)
    assert not is_equal_metric(original, changed)
    assert not is_equal_metric(changed, original)