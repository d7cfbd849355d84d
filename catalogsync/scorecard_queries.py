"""GraphQL queries for scorecards and their response shapes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from catalogsync.compass import error_messages
from catalogsync.metric_queries import _gql, _MutationStatus, _Named, _section
from catalogsync.scorecard_models import Criterion, Scorecard

CREATE_SCORECARD_QUERY = _gql(
    """
    mutation createScorecard ($cloudId: ID!, $scorecardDetails: CreateCompassScorecardInput!) {
        compass {
            createScorecard(cloudId: $cloudId, input: $scorecardDetails) {
                success
                scorecardDetails {
                    id
                    criterias {
                        id
                        name
                    }
                }
                errors {
                    message
                }
            }
        }
    }"""
)

DELETE_SCORECARD_QUERY = _gql(
    """
    mutation deleteScorecard($scorecardId: ID!) {
        compass {
            deleteScorecard(scorecardId: $scorecardId) {
                scorecardId
                errors {
                    message
                }
                success
            }
        }
    }"""
)

UPDATE_SCORECARD_QUERY = _gql(
    """
    mutation updateScorecard ($scorecardId: ID! $scorecardDetails: UpdateCompassScorecardInput!) {
        compass {
            updateScorecard(scorecardId: $scorecardId, input: $scorecardDetails) {
                success
                errors {
                    message
                }
            }
        }
    }"""
)


def _criterion_variables(criterion: Criterion, with_id: bool = False) -> dict[str, dict[str, str]]:
    value = criterion.has_metric_value
    details = {
        "weight": str(value.weight),
        "name": value.name,
        "metricDefinitionId": value.metric_definition_id,
        "comparatorValue": str(value.comparator_value),
        "comparator": value.comparator,
    }
    if with_id:
        details["id"] = value.id
    return {"hasMetricValue": details}


def _scorecard_details(scorecard: Scorecard) -> dict[str, Any]:
    details: dict[str, Any] = {
        "name": scorecard.name,
        "description": scorecard.description,
        "state": scorecard.state,
        "componentTypeIds": scorecard.component_type_ids,
        "importance": scorecard.importance,
        "scoringStrategyType": scorecard.scoring_strategy_type,
    }
    if scorecard.owner_id:
        details["ownerId"] = scorecard.owner_id
    return details


@dataclass
class CriterionDetails(_Named):
    """A criterion as returned by the API."""


@dataclass
class ScorecardDetails:
    """A created scorecard as returned by the API."""

    id: str = ""
    criteria: list[CriterionDetails] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "ScorecardDetails":
        data = data or {}
        return cls(
            id=str(data.get("id", "")),
            criteria=[CriterionDetails.from_dict(item) for item in data.get("criterias") or []],
        )


@dataclass
class CreateScorecardInput:
    compass_cloud_id: str = ""
    scorecard: Scorecard = field(default_factory=Scorecard)

    def get_query(self) -> str:
        return CREATE_SCORECARD_QUERY

    def variables(self) -> dict[str, Any]:
        details = _scorecard_details(self.scorecard)
        details["criterias"] = [_criterion_variables(c) for c in self.scorecard.criteria]
        return {"cloudId": self.compass_cloud_id, "scorecardDetails": details}


@dataclass
class CreateScorecardOutput(_MutationStatus):
    scorecard: ScorecardDetails = field(default_factory=ScorecardDetails)

    def load(self, data: Mapping[str, Any]) -> None:
        section = _section(data, "createScorecard")
        self._load_status(section)
        self.scorecard = ScorecardDetails.from_dict(section.get("scorecardDetails"))

    def is_successful(self) -> bool:
        return self.success

    def get_errors(self) -> list[str]:
        return error_messages(self.errors)


@dataclass
class DeleteScorecardInput:
    scorecard_id: str = ""

    def get_query(self) -> str:
        return DELETE_SCORECARD_QUERY

    def variables(self) -> dict[str, Any]:
        return {"scorecardId": self.scorecard_id}


@dataclass
class DeleteScorecardOutput(_MutationStatus):
    def load(self, data: Mapping[str, Any]) -> None:
        self._load_status(_section(data, "DeleteScorecardOutput"))

    def is_successful(self) -> bool:
        return self.success

    def get_errors(self) -> list[str]:
        return error_messages(self.errors)


@dataclass
class UpdateScorecardInput:
    scorecard: Scorecard = field(default_factory=Scorecard)
    create_criteria: list[Criterion] = field(default_factory=list)
    update_criteria: list[Criterion] = field(default_factory=list)
    delete_criteria: list[str] = field(default_factory=list)

    def get_query(self) -> str:
        return UPDATE_SCORECARD_QUERY

    def variables(self) -> dict[str, Any]:
        details = _scorecard_details(self.scorecard)
        details["createCriteria"] = [_criterion_variables(c) for c in self.create_criteria]
        details["updateCriteria"] = [
            _criterion_variables(c, with_id=True) for c in self.update_criteria
        ]
        details["deleteCriteria"] = self.delete_criteria
        return {"scorecardId": self.scorecard.id, "scorecardDetails": details}


@dataclass
class UpdateScorecardOutput(_MutationStatus):
    def load(self, data: Mapping[str, Any]) -> None:
        self._load_status(_section(data, "updateScorecard"))

    def is_successful(self) -> bool:
        return self.success

    def get_errors(self) -> list[str]:
        return error_messages(self.errors)