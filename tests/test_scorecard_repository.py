import pytest

from catalogsync.compass import CompassService
from catalogsync.metric_repository import RepositoryError
from catalogsync.scorecard_models import Criterion, MetricValue, Scorecard
from catalogsync.scorecard_queries import (
    CREATE_SCORECARD_QUERY,
    DELETE_SCORECARD_QUERY,
    UPDATE_SCORECARD_QUERY,
)
from catalogsync.scorecard_repository import ScorecardRepository


class FakeTransport:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def __call__(self, query, variables):
        self.calls.append((query, variables))
        if self.error is not None:
            raise self.error
        return self.response


def _repo(transport):
    return ScorecardRepository(CompassService("cloud-id", transport))


def test_create_success():
    transport = FakeTransport(
        {
            "compass": {
                "createScorecard": {
                    "success": True,
                    "scorecardDetails": {
                        "id": "returned-id",
                        "criterias": [
                            {"id": "criterion-id-1", "name": "Criterion 1"},
                            {"id": "criterion-id-2", "name": "Criterion 2"},
                        ],
                    },
                }
            }
        }
    )
    scorecard_id, criteria = _repo(transport).create(Scorecard(id="test-id", name="Test Scorecard"))
    assert scorecard_id == "returned-id"
    assert criteria == {"Criterion 1": "criterion-id-1", "Criterion 2": "criterion-id-2"}
    query, variables = transport.calls[0]
    assert query == CREATE_SCORECARD_QUERY
    assert variables["cloudId"] == "cloud-id"
    assert variables["scorecardDetails"]["name"] == "Test Scorecard"


def test_create_error():
    transport = FakeTransport(error=RuntimeError("compass error"))
    with pytest.raises(RepositoryError) as info:
        _repo(transport).create(Scorecard(id="test-id", name="Test Scorecard"))
    assert str(info.value) == "Create error for test-id: compass error"


def test_create_unsuccessful_response_raises():
    transport = FakeTransport(
        {"compass": {"createScorecard": {"success": False, "errors": [{"message": "bad input"}]}}}
    )
    with pytest.raises(RepositoryError, match="bad input"):
        _repo(transport).create(Scorecard(id="test-id"))


def test_update_success():
    transport = FakeTransport({"compass": {"updateScorecard": {"success": True}}})
    _repo(transport).update(
        Scorecard(id="test-id", name="Updated Scorecard"),
        [Criterion(MetricValue(name="New Criterion"))],
        [Criterion(MetricValue(id="criterion-id-1", name="Updated Criterion"))],
        ["criterion-id-2"],
    )
    query, variables = transport.calls[0]
    assert query == UPDATE_SCORECARD_QUERY
    assert variables["scorecardId"] == "test-id"
    details = variables["scorecardDetails"]
    assert details["name"] == "Updated Scorecard"
    assert details["createCriteria"][0]["hasMetricValue"]["name"] == "New Criterion"
    assert details["updateCriteria"][0]["hasMetricValue"]["id"] == "criterion-id-1"
    assert details["deleteCriteria"] == ["criterion-id-2"]


def test_update_error():
    transport = FakeTransport(error=RuntimeError("compass error"))
    with pytest.raises(RepositoryError) as info:
        _repo(transport).update(Scorecard(id="test-id", name="Updated Scorecard"), [], [], [])
    assert str(info.value) == "Update error for test-id: compass error"


def test_delete_success():
    transport = FakeTransport({"compass": {"DeleteScorecardOutput": {"success": True}}})
    _repo(transport).delete("test-id")
    assert transport.calls == [(DELETE_SCORECARD_QUERY, {"scorecardId": "test-id"})]


def test_delete_error():
    transport = FakeTransport(error=RuntimeError("compass error"))
    with pytest.raises(RepositoryError) as info:
        _repo(transport).delete("test-id")
    assert str(info.value) == "Delete error for test-id: compass error"