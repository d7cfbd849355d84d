"""Remote storage of scorecards."""

from __future__ import annotations

from typing import Sequence

from catalogsync.compass import CompassRequestError, CompassService
from catalogsync.metric_repository import RepositoryError
from catalogsync.scorecard_models import Criterion, Scorecard
from catalogsync.scorecard_queries import (
    CreateScorecardInput,
    CreateScorecardOutput,
    DeleteScorecardInput,
    DeleteScorecardOutput,
    UpdateScorecardInput,
    UpdateScorecardOutput,
)


class ScorecardRepository:
    """Creates, updates and deletes scorecards."""

    def __init__(self, compass: CompassService) -> None:
        self.compass = compass

    def create(self, scorecard: Scorecard) -> tuple[str, dict[str, str]]:
        """Create the scorecard; return its id and criterion ids by name."""
        query = CreateScorecardInput(compass_cloud_id=self.compass.cloud_id, scorecard=scorecard)
        output = CreateScorecardOutput()
        try:
            self.compass.run(query, output)
        except CompassRequestError as exc:
            raise RepositoryError(f"Create error for {scorecard.id}: {exc}") from exc

        details = output.scorecard
        return details.id, {criterion.name: criterion.id for criterion in details.criteria}

    def update(
        self,
        scorecard: Scorecard,
        create_criteria: Sequence[Criterion],
        update_criteria: Sequence[Criterion],
        delete_criteria: Sequence[str],
    ) -> None:
        query = UpdateScorecardInput(
            scorecard=scorecard,
            create_criteria=list(create_criteria),
            update_criteria=list(update_criteria),
            delete_criteria=list(delete_criteria),
        )
        try:
            self.compass.run(query, UpdateScorecardOutput())
        except CompassRequestError as exc:
            raise RepositoryError(f"Update error for {scorecard.id}: {exc}") from exc

    def delete(self, scorecard_id: str) -> None:
        try:
            self.compass.run(DeleteScorecardInput(scorecard_id=scorecard_id), DeleteScorecardOutput())
        except CompassRequestError as exc:
            raise RepositoryError(f"Delete error for {scorecard_id}: {exc}") from exc