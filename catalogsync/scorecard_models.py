"""Scorecard resources and the scorecard definitions read from configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence


@dataclass
class MetricValue:
    """A criterion that checks the value of a metric against a threshold."""

    id: str = ""
    weight: int = 0
    name: str = ""
    metric_name: str = ""
    metric_definition_id: str = ""
    comparator_value: int = 0
    comparator: str = ""


@dataclass
class Criterion:
    """One scorecard criterion."""

    has_metric_value: MetricValue = field(default_factory=MetricValue)


@dataclass
class Scorecard:
    """A scorecard as known to the remote catalogue."""

    id: Optional[str] = None
    name: str = ""
    description: str = ""
    owner_id: str = ""
    state: str = ""
    component_type_ids: list[str] = field(default_factory=list)
    importance: str = ""
    scoring_strategy_type: str = ""
    criteria: list[Criterion] = field(default_factory=list)


@dataclass
class ScorecardMetadata:
    name: str = ""


@dataclass
class ScorecardSpec:
    id: Optional[str] = None
    name: str = ""
    description: str = ""
    owner_id: str = ""
    state: str = ""
    component_type_ids: list[str] = field(default_factory=list)
    importance: str = ""
    scoring_strategy_type: str = ""
    criteria: list[Criterion] = field(default_factory=list)


@dataclass
class ScorecardDTO:
    """A scorecard definition document."""

    api_version: str = ""
    kind: str = ""
    metadata: ScorecardMetadata = field(default_factory=ScorecardMetadata)
    spec: ScorecardSpec = field(default_factory=ScorecardSpec)


def get_scorecard_unique_key(scorecard: ScorecardDTO) -> str:
    return scorecard.spec.name


def from_state_to_config(state: ScorecardDTO, conf: ScorecardDTO) -> None:
    """Carry the remote id from the stored state over to the config."""
    conf.spec.id = state.spec.id


def from_state_criteria_to_config(state: Criterion, conf: Criterion) -> None:
    """Carry the remote criterion id from the stored state over to the config."""
    conf.has_metric_value.id = state.has_metric_value.id


def is_component_type_ids_equal(t1: Sequence[str], t2: Sequence[str]) -> bool:
    return list(t1 or []) == list(t2 or [])


def is_criterion_equal(s1: Criterion, s2: Criterion) -> bool:
    """Compare two criteria, ignoring their ids."""
    a, b = s1.has_metric_value, s2.has_metric_value
    return (
        a.name == b.name
        and a.weight == b.weight
        and a.metric_name == b.metric_name
        and a.metric_definition_id == b.metric_definition_id
        and a.comparator_value == b.comparator_value
        and a.comparator == b.comparator
    )


def is_criteria_equal(c1: Sequence[Criterion], c2: Sequence[Criterion]) -> bool:
    """Compare criteria position by position."""
    c1, c2 = list(c1 or []), list(c2 or [])
    return len(c1) == len(c2) and all(
        is_criterion_equal(a, b) for a, b in zip(c1, c2)
    )


def is_scorecard_equal(s1: ScorecardDTO, s2: ScorecardDTO) -> bool:
    """Compare two scorecards by their spec, ignoring ids."""
    a, b = s1.spec, s2.spec
    return (
        a.name == b.name
        and a.description == b.description
        and a.owner_id == b.owner_id
        and a.state == b.state
        and is_component_type_ids_equal(a.component_type_ids, b.component_type_ids)
        and a.importance == b.importance
        and a.scoring_strategy_type == b.scoring_strategy_type
        and is_criteria_equal(a.criteria, b.criteria)
    )