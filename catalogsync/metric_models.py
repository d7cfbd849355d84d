"""Metric resources and the metric definitions read from configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from operator import attrgetter
from typing import Any, Callable


@dataclass
class MetricFormat:
    """Format of a metric: its unit of measurement."""

    unit: str = ""


@dataclass
class Metric:
    """A metric definition as known to the remote catalogue."""

    id: str = ""
    name: str = ""
    description: str = ""
    format: MetricFormat = field(default_factory=MetricFormat)


@dataclass
class MetricSpecFormat(MetricFormat):
    """Format of a metric as written in a definition document."""


@dataclass
class MetricSpec(Metric):
    """The specification part of a metric definition document."""

    format: MetricSpecFormat = field(default_factory=MetricSpecFormat)


@dataclass
class MetricMetadata:
    name: str = ""
    labels: dict[str, str] = field(default_factory=dict)
    component_type: list[str] = field(default_factory=list)
    facts: list[Any] = field(default_factory=list)


@dataclass
class MetricDTO:
    """A metric definition document."""

    api_version: str = ""
    kind: str = ""
    metadata: MetricMetadata = field(default_factory=MetricMetadata)
    spec: MetricSpec = field(default_factory=MetricSpec)


def get_metric_unique_key(metric: MetricDTO) -> str:
    return metric.spec.name


def from_state_to_config(state: MetricDTO, conf: MetricDTO) -> None:
    """Carry the remote id from the stored state over to the config."""
    conf.spec.id = state.spec.id


def _normalised(getter: Callable[[MetricDTO], Any], empty: Callable[[], Any]) -> Callable[[MetricDTO], Any]:
    return lambda metric: getter(metric) or empty()


_COMPARED_PARTS: tuple[Callable[[MetricDTO], Any], ...] = (
    attrgetter("spec.name"),
    attrgetter("spec.description"),
    attrgetter("spec.format"),
    attrgetter("metadata.name"),
    _normalised(attrgetter("metadata.labels"), dict),
    _normalised(attrgetter("metadata.component_type"), list),
    _normalised(attrgetter("metadata.facts"), list),
)


def is_equal_metric(m1: MetricDTO, m2: MetricDTO) -> bool:
    """Compare two metrics, ignoring their ids."""
    return all(part(m1) == part(m2) for part in _COMPARED_PARTS)