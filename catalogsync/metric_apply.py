"""Reconciliation of configured metrics with the remote catalogue."""

from __future__ import annotations

from typing import Mapping

from catalogsync.drift import detect
from catalogsync.metric_models import (
    Metric,
    MetricDTO,
    MetricFormat,
    from_state_to_config,
    is_equal_metric,
)
from catalogsync.metric_repository import MetricRepository


def metric_dto_to_resource(metric_dto: MetricDTO) -> Metric:
    return Metric(
        id=metric_dto.spec.id,
        name=metric_dto.spec.name,
        description=metric_dto.spec.description,
        format=MetricFormat(unit=metric_dto.spec.format.unit),
    )


class MetricApplyHandler:
    """Applies the difference between stored state and configuration."""

    def __init__(self, repository: MetricRepository) -> None:
        self.repository = repository

    def apply(
        self,
        state_metrics: Mapping[str, MetricDTO],
        config_metrics: Mapping[str, MetricDTO],
    ) -> list[MetricDTO]:
        """Sync the remote side and return the metrics forming the new state.

        Deleted metrics are removed first; the result lists unchanged, then
        created, then updated metrics. Repository errors propagate.
        """
        drift = detect(state_metrics, config_metrics, from_state_to_config, is_equal_metric)

        for metric_dto in drift.deleted.values():
            self.repository.delete(metric_dto.spec.id)

        result = list(drift.unchanged.values())

        for metric_dto in drift.created.values():
            metric_dto.spec.id = self.repository.create(metric_dto_to_resource(metric_dto))
            result.append(metric_dto)

        for metric_dto in drift.updated.values():
            self.repository.update(metric_dto_to_resource(metric_dto))
            result.append(metric_dto)

        return result