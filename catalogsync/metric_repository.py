"""Remote storage of metric definitions."""

from __future__ import annotations

import dataclasses

from catalogsync.compass import CompassRequestError, CompassService
from catalogsync.metric_models import Metric
from catalogsync.metric_queries import (
    CreateMetricInput,
    CreateMetricOutput,
    DeleteMetricInput,
    DeleteMetricOutput,
    SearchMetricsInput,
    SearchMetricsOutput,
    UpdateMetricInput,
    UpdateMetricOutput,
)


class RepositoryError(Exception):
    """Raised when a remote catalogue operation fails."""


class MetricRepository:
    """Creates, updates, deletes and looks up metric definitions."""

    def __init__(self, compass: CompassService) -> None:
        self.compass = compass

    def create(self, metric: Metric) -> str:
        """Create the metric and return its remote id.

        If the remote side reports that the metric already exists, the
        existing definition is looked up, updated, and its id returned.
        """
        query = CreateMetricInput(compass_cloud_id=self.compass.cloud_id, metric=metric)
        output = CreateMetricOutput()

        def adopt_existing() -> None:
            if not self.compass.is_already_exists(output.errors):
                return
            remote = self.search(metric)
            self.update(dataclasses.replace(metric, id=remote.id))
            output.definition.id = remote.id
            output.errors = []
            output.success = True

        query.pre_validation = adopt_existing
        try:
            self.compass.run(query, output)
        except (CompassRequestError, RepositoryError) as exc:
            raise RepositoryError(f"Create error for {metric}: {exc}") from exc
        return output.definition.id

    def update(self, metric: Metric) -> None:
        query = UpdateMetricInput(compass_cloud_id=self.compass.cloud_id, metric=metric)
        try:
            self.compass.run(query, UpdateMetricOutput())
        except CompassRequestError as exc:
            raise RepositoryError(f"Update error for {metric}: {exc}") from exc

    def delete(self, metric_id: str) -> None:
        try:
            self.compass.run(DeleteMetricInput(metric_id=metric_id), DeleteMetricOutput())
        except CompassRequestError as exc:
            raise RepositoryError(f"Delete error for {metric_id}: {exc}") from exc

    def search(self, metric: Metric) -> Metric:
        """Find the remote metric with the same name; only its id is set."""
        output = SearchMetricsOutput()
        try:
            self.compass.run(SearchMetricsInput(metric=metric), output)
        except CompassRequestError as exc:
            raise RepositoryError(f"Search error for {metric.name}: {exc}") from exc

        for node in output.nodes or []:
            if node.name == metric.name:
                return Metric(id=node.id)
        raise RepositoryError(f"Search error for {metric.name}: metric not found")