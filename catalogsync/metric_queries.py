"""GraphQL queries for metric definitions and their response shapes."""

from __future__ import annotations

import textwrap
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional

from catalogsync.compass import CompassError, error_messages
from catalogsync.metric_models import Metric


def _gql(text: str) -> str:
    """Lay out a query the way the API documents are stored: tab indented, two tabs deep."""

    def tabbed(line: str) -> str:
        stripped = line.lstrip(" ")
        return "\t" * ((len(line) - len(stripped)) // 4) + stripped

    lines = textwrap.dedent(text).strip("\n").splitlines()
    return "\n" + "\n".join("\t\t" + tabbed(line) for line in lines)


CREATE_METRIC_QUERY = _gql(
    """
    mutation createMetricDefinition ($cloudId: ID!, $name: String!, $description: String!, $unit: String!) {
        compass {
            createMetricDefinition(
                input: {
                    cloudId: $cloudId
                    name: $name
                    description: $description
                    format: {
                        suffix: { suffix: $unit }
                    }
                }
            ) {
                success
                createdMetricDefinition {
                    id
                }
                errors {
                    message
                }
            }
        }
    }"""
)

DELETE_METRIC_QUERY = _gql(
    """
    mutation deleteMetric($scorecardId: ID!) {
        compass {
            deleteMetric(scorecardId: $scorecardId) {
                scorecardId
                errors {
                    message
                }
                success
            }
        }
    }"""
)

SEARCH_METRICS_QUERY = _gql(
    """
    query searchMetricDefinition($cloudId: ID!) {
        compass {
            metricDefinitions(query: {cloudId: $cloudId, first: 100}) {
                ... on CompassMetricDefinitionsConnection {
                    nodes{
                        id
                        name
                    }
                }
            }
        }
    }"""
)

UPDATE_METRIC_QUERY = _gql(
    """
    mutation updateMetricDefinition ($cloudId: ID!, $id: ID!, $name: String!, $description: String!, $unit: String!) {
        compass {
            updateMetricDefinition(
                input: {
                    id: $id
                    cloudId: $cloudId
                    name: $name
                    description: $description
                    format: {
                        suffix: { suffix: $unit }
                    }
                }
            ) {
                success
                errors {
                    message
                }
            }
        }
    }"""
)


def _section(data: Optional[Mapping[str, Any]], key: str) -> Mapping[str, Any]:
    compass = (data or {}).get("compass") or {}
    return compass.get(key) or {}


@dataclass
class _Named:
    id: str = ""
    name: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]):
        data = data or {}
        return cls(id=str(data.get("id", "")), name=str(data.get("name", "")))


@dataclass
class _MutationStatus:
    """Success flag and error list that every mutation reports."""

    success: bool = False
    errors: list[CompassError] = field(default_factory=list)

    def _load_status(self, section: Mapping[str, Any]) -> None:
        self.success = bool(section.get("success", False))
        self.errors = CompassError.parse_list(section.get("errors"))


@dataclass
class MetricNode(_Named):
    """A metric definition as returned by the API."""


def _metric_variables(cloud_id: str, metric: Metric, with_id: bool) -> dict[str, Any]:
    variables: dict[str, Any] = {"cloudId": cloud_id}
    if with_id:
        variables["id"] = metric.id
    variables.update(name=metric.name, description=metric.description, unit=metric.format.unit)
    return variables


@dataclass
class CreateMetricInput:
    compass_cloud_id: str = ""
    metric: Metric = field(default_factory=Metric)
    pre_validation: Optional[Callable[[], None]] = None

    def get_query(self) -> str:
        return CREATE_METRIC_QUERY

    def variables(self) -> dict[str, Any]:
        return _metric_variables(self.compass_cloud_id, self.metric, with_id=False)


@dataclass
class CreateMetricOutput(_MutationStatus):
    definition: MetricNode = field(default_factory=MetricNode)

    def load(self, data: Mapping[str, Any]) -> None:
        section = _section(data, "createMetricDefinition")
        self._load_status(section)
        self.definition = MetricNode.from_dict(section.get("createdMetricDefinition"))

    def is_successful(self) -> bool:
        return self.success

    def get_errors(self) -> list[str]:
        return error_messages(self.errors)


@dataclass
class DeleteMetricInput:
    compass_cloud_id: str = ""
    metric_id: str = ""

    def get_query(self) -> str:
        return DELETE_METRIC_QUERY

    def variables(self) -> dict[str, Any]:
        return {"id": self.metric_id}


@dataclass
class DeleteMetricOutput(_MutationStatus):
    def load(self, data: Mapping[str, Any]) -> None:
        self._load_status(_section(data, "deleteMetricDefinition"))

    def is_successful(self) -> bool:
        return self.success

    def get_errors(self) -> list[str]:
        return error_messages(self.errors)


@dataclass
class SearchMetricsInput:
    compass_cloud_id: str = ""
    metric: Metric = field(default_factory=Metric)

    def get_query(self) -> str:
        return SEARCH_METRICS_QUERY

    def variables(self) -> dict[str, Any]:
        return {"cloudId": self.compass_cloud_id, "name": self.metric.name}


@dataclass
class SearchMetricsOutput:
    nodes: Optional[list[MetricNode]] = None

    def load(self, data: Mapping[str, Any]) -> None:
        raw = _section(data, "metricDefinitions").get("nodes")
        self.nodes = None if raw is None else [MetricNode.from_dict(node) for node in raw]

    def is_successful(self) -> bool:
        return self.nodes is not None

    def get_errors(self) -> list[str]:
        return []


@dataclass
class UpdateMetricInput:
    compass_cloud_id: str = ""
    metric: Metric = field(default_factory=Metric)

    def get_query(self) -> str:
        return UPDATE_METRIC_QUERY

    def variables(self) -> dict[str, Any]:
        return _metric_variables(self.compass_cloud_id, self.metric, with_id=True)


@dataclass
class UpdateMetricOutput(_MutationStatus):
    def load(self, data: Mapping[str, Any]) -> None:
        self._load_status(_section(data, "updateMetricDefinition"))

    def is_successful(self) -> bool:
        return self.success

    def get_errors(self) -> list[str]:
        return error_messages(self.errors)