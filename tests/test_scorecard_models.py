from catalogsync.scorecard_models import (
    Criterion,
    MetricValue,
    ScorecardDTO,
    ScorecardMetadata,
    ScorecardSpec,
    from_state_criteria_to_config,
    from_state_to_config,
    get_scorecard_unique_key,
    is_component_type_ids_equal,
    is_criteria_equal,
    is_criterion_equal,
    is_scorecard_equal,
)


def _criterion(name="c1", weight=10, criterion_id="", definition="def-1"):
    return Criterion(
        has_metric_value=MetricValue(
            id=criterion_id,
            weight=weight,
            name=name,
            metric_name="metric",
            metric_definition_id=definition,
            comparator_value=5,
            comparator="GREATER_THAN",
        )
    )


def _scorecard(scorecard_id=None, importance="HIGH", criteria=None):
    return ScorecardDTO(
        api_version="v1",
        kind="Scorecard",
        metadata=ScorecardMetadata(name="meta"),
        spec=ScorecardSpec(
            id=scorecard_id,
            name="Quality",
            description="desc",
            owner_id="owner",
            state="ACTIVE",
            component_type_ids=["SERVICE"],
            importance=importance,
            scoring_strategy_type="WEIGHT_BASED",
            criteria=criteria if criteria is not None else [_criterion()],
        ),
    )


def test_unique_key_is_spec_name():
    scorecard = _scorecard()
    assert get_scorecard_unique_key(scorecard) == scorecard.spec.name


def test_from_state_to_config_copies_id():
    state = _scorecard(scorecard_id="remote-1")
    conf = _scorecard()
    from_state_to_config(state, conf)
    assert conf.spec.id == "remote-1"


def test_from_state_criteria_to_config_copies_id():
    state = _criterion(criterion_id="crit-1")
    conf = _criterion()
    from_state_criteria_to_config(state, conf)
    assert conf.has_metric_value.id == "crit-1"
    assert conf.has_metric_value.name == state.has_metric_value.name


def test_component_type_ids_equality():
    assert is_component_type_ids_equal(["a", "b"], ["a", "b"]) is True
    assert is_component_type_ids_equal(["a", "b"], ["b", "a"]) is False
    assert is_component_type_ids_equal(["a"], ["a", "b"]) is False


def test_criterion_equality_ignores_id():
    assert is_criterion_equal(_criterion(criterion_id="x"), _criterion(criterion_id="y")) is True


def test_criterion_equality_detects_changes():
    assert is_criterion_equal(_criterion(weight=10), _criterion(weight=20)) is False
    assert is_criterion_equal(_criterion(definition="a"), _criterion(definition="b")) is False


def test_criteria_equality_is_ordered():
    first, second = _criterion(name="a"), _criterion(name="b")
    assert is_criteria_equal([first, second], [first, second]) is True
    assert is_criteria_equal([first, second], [second, first]) is False
    assert is_criteria_equal([first], [first, second]) is False


def test_scorecard_equality_ignores_ids_and_metadata():
    s1 = _scorecard(scorecard_id="one")
    s2 = _scorecard(scorecard_id="two")
    s2.metadata.name = "other"
    assert is_scorecard_equal(s1, s2) is True


def test_scorecard_equality_detects_changes():
    assert is_scorecard_equal(_scorecard(importance="HIGH"), _scorecard(importance="LOW")) is False
    assert is_scorecard_equal(
        _scorecard(criteria=[_criterion(weight=1)]),
        _scorecard(criteria=[_criterion(weight=2)]),
    ) is False