"""Reconciliation of configured scorecards with the remote catalogue."""

from __future__ import annotations

import dataclasses
from typing import Iterable, Mapping, MutableMapping

from catalogsync.drift import detect
from catalogsync.metric_models import MetricDTO
from catalogsync.scorecard_models import (
    Criterion,
    Scorecard,
    ScorecardDTO,
    ScorecardSpec,
    from_state_criteria_to_config,
    from_state_to_config,
    is_criterion_equal,
    is_scorecard_equal,
)
from catalogsync.scorecard_repository import ScorecardRepository


def map_criteria(criteria: Iterable[Criterion]) -> dict[str, Criterion]:
    """Key criteria by name; a later criterion replaces an earlier one."""
    return {criterion.has_metric_value.name: criterion for criterion in criteria or ()}


def criteria_dto_to_resource(criteria: Mapping[str, Criterion]) -> list[Criterion]:
    """Copy the criteria of a mapping into a fresh list."""
    return [
        Criterion(has_metric_value=dataclasses.replace(criterion.has_metric_value))
        for criterion in criteria.values()
    ]


def scorecard_dto_to_resource(scorecard_dto: ScorecardDTO) -> Scorecard:
    spec = scorecard_dto.spec
    return Scorecard(
        id=spec.id,
        name=spec.name,
        description=spec.description,
        owner_id=spec.owner_id,
        state=spec.state,
        component_type_ids=spec.component_type_ids,
        importance=spec.importance,
        scoring_strategy_type=spec.scoring_strategy_type,
        criteria=criteria_dto_to_resource(map_criteria(spec.criteria)),
    )


def _merge_unchanged(state: ScorecardDTO, config: ScorecardDTO) -> ScorecardDTO:
    """Copy the state scorecard, taking metric definition ids from the config."""
    config_by_name = map_criteria(config.spec.criteria)
    criteria = []
    for state_criterion in state.spec.criteria:
        value = state_criterion.has_metric_value
        config_value = config_by_name[value.name].has_metric_value
        criteria.append(
            Criterion(
                has_metric_value=dataclasses.replace(
                    value, metric_definition_id=config_value.metric_definition_id
                )
            )
        )
    spec = state.spec
    return ScorecardDTO(
        api_version=state.api_version,
        kind=state.kind,
        metadata=dataclasses.replace(state.metadata),
        spec=ScorecardSpec(
            id=spec.id,
            name=spec.name,
            description=spec.description,
            owner_id=spec.owner_id,
            state=spec.state,
            component_type_ids=list(spec.component_type_ids or []),
            importance=spec.importance,
            scoring_strategy_type=spec.scoring_strategy_type,
            criteria=criteria,
        ),
    )


class ScorecardApplyHandler:
    """Applies the difference between stored scorecards and configuration."""

    def __init__(self, repository: ScorecardRepository) -> None:
        self.repository = repository

    def apply(
        self,
        config_scorecards: Mapping[str, ScorecardDTO],
        state_metrics: Mapping[str, MetricDTO],
        state_scorecards: Mapping[str, ScorecardDTO],
    ) -> list[ScorecardDTO]:
        """Sync the remote side and return the scorecards forming the new state.

        Criteria of configured scorecards get their metric definition id from
        the stored metric of the same name; a missing metric raises KeyError.
        Deleted scorecards are removed first; the result lists unchanged, then
        created, then updated scorecards. Repository errors propagate.
        """
        for scorecard in config_scorecards.values():
            for criterion in scorecard.spec.criteria:
                value = criterion.has_metric_value
                metric = state_metrics.get(value.metric_name)
                if metric is None:
                    raise KeyError(f"metric {value.metric_name!r} not found in state")
                value.metric_definition_id = metric.spec.id

        drift = detect(state_scorecards, config_scorecards, from_state_to_config, is_scorecard_equal)

        for scorecard_dto in drift.deleted.values():
            self.repository.delete(scorecard_dto.spec.id)

        result = [
            _merge_unchanged(state_scorecards[name], config_scorecards[name])
            for name in drift.unchanged
        ]
        result.extend(self._create(drift.created))
        result.extend(self._update(drift.updated, state_scorecards))
        return result

    def _create(self, scorecards: MutableMapping[str, ScorecardDTO]) -> list[ScorecardDTO]:
        created = []
        for scorecard_dto in scorecards.values():
            scorecard_id, criteria_ids = self.repository.create(
                scorecard_dto_to_resource(scorecard_dto)
            )
            scorecard_dto.spec.id = scorecard_id
            for criterion in scorecard_dto.spec.criteria:
                value = criterion.has_metric_value
                value.id = criteria_ids.get(value.name, "")
            created.append(scorecard_dto)
        return created

    def _update(
        self,
        scorecards: Mapping[str, ScorecardDTO],
        state_scorecards: Mapping[str, ScorecardDTO],
    ) -> list[ScorecardDTO]:
        updated = []
        for scorecard_dto in scorecards.values():
            state_scorecard = state_scorecards.get(scorecard_dto.spec.name)
            if state_scorecard is None:
                continue

            criteria_drift = detect(
                map_criteria(state_scorecard.spec.criteria),
                map_criteria(scorecard_dto.spec.criteria),
                from_state_criteria_to_config,
                is_criterion_equal,
            )
            deleted_ids = [
                criterion.has_metric_value.metric_definition_id
                for criterion in criteria_drift.deleted.values()
            ]
            self.repository.update(
                scorecard_dto_to_resource(scorecard_dto),
                criteria_dto_to_resource(criteria_drift.created),
                criteria_dto_to_resource(criteria_drift.updated),
                deleted_ids,
            )
            updated.append(scorecard_dto)
        return updated