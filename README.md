# catalogsync

`catalogsync` keeps the metric definitions and scorecards in a
Compass-style software catalog in step with the definitions you keep in
configuration. It compares the configuration with the last known state and
sorts each item into created, updated, deleted or unchanged. It then sends
the GraphQL mutations that each case needs. At the end it returns the new
state, with remote ids filled in.

## Installing

```
pip install .
```

To install the test tools as well:

```
pip install .[test]
```

## Modules

### `catalogsync.drift`

- `detect(state, config, from_state_to_config, is_equal)` compares two
  mappings keyed by name and returns a `Drift`.
  - `deleted` holds the state items whose key is missing from the config.
  - `created` holds the config items whose key is missing from the state.
  - For a key found in both, `from_state_to_config` first copies state data,
    such as the remote id, onto the config item. The config item then goes
    to `unchanged` if `is_equal` holds, and to `updated` if it does not.
  - Each of the four members is a dict.
- `detect_drifts(state_list, config_list, get_unique_key, get_id, set_id, is_equal)`
  does the same for two lists and fills `Drift` with lists.
- A `Drift` unpacks in the order created, updated, deleted, unchanged:
  `created, updated, deleted, unchanged = detect(...)`.

### `catalogsync.metric_models`

- `Metric` and `MetricFormat` describe a metric as sent to the catalog.
- `MetricDTO` is a metric definition document. It has `api_version`, `kind`,
  `metadata` (a `MetricMetadata`) and `spec` (a `MetricSpec`).
- `get_metric_unique_key` returns `spec.name`.
- `from_state_to_config` copies `spec.id` from the state onto the config.
- `is_equal_metric` compares two documents and ignores their ids. It
  compares the spec name, description and format, and the metadata name,
  labels, component types and facts.

### `catalogsync.scorecard_models`

- `Scorecard`, `Criterion` and `MetricValue` describe a scorecard and its
  criteria.
- `ScorecardDTO` is a scorecard definition document. It has `metadata` (a
  `ScorecardMetadata`) and `spec` (a `ScorecardSpec`).
- Helpers used for drift detection:
  - `get_scorecard_unique_key`
  - `from_state_to_config`
  - `from_state_criteria_to_config`
  - `is_component_type_ids_equal`
  - `is_criteria_equal`
  - `is_criterion_equal`
  - `is_scorecard_equal`
- None of the equality checks look at ids. `is_criteria_equal` compares the
  criteria position by position.

### `catalogsync.metric_queries` and `catalogsync.scorecard_queries`

These modules hold one input and one output class for each GraphQL
operation.

Metric operations:

| Operation | Input | Output |
| --- | --- | --- |
| Create | `CreateMetricInput` | `CreateMetricOutput` |
| Update | `UpdateMetricInput` | `UpdateMetricOutput` |
| Delete | `DeleteMetricInput` | `DeleteMetricOutput` |
| Search | `SearchMetricsInput` | `SearchMetricsOutput` |

Scorecard operations:

| Operation | Input | Output |
| --- | --- | --- |
| Create | `CreateScorecardInput` | `CreateScorecardOutput` |
| Update | `UpdateScorecardInput` | `UpdateScorecardOutput` |
| Delete | `DeleteScorecardInput` | `DeleteScorecardOutput` |

- Every input has `get_query()` and `variables()`.
- Every output has `load(data)`, `is_successful()` and `get_errors()`.
- In the scorecard variables, weights and comparator values are sent as
  strings.
- `ownerId` is sent only when an owner id is set.

### `catalogsync.compass`

`CompassService(cloud_id, transport)` runs query objects.

- `transport` is a callable that takes the query text and its variables and
  returns the `data` member of the GraphQL response.
- `run(query_input, output)` works in this order:
  1. It calls the transport and loads the response into `output`.
  2. It calls the input's `pre_validation` hook, if the input has one.
  3. If the output does not report success, it raises
     `CompassRequestError`. The `errors` attribute of that exception holds
     the error messages.
- Any exception raised by the transport is also re-raised as
  `CompassRequestError`.
- `is_already_exists(errors)` is true when a `CompassError` message
  contains "already exists", in any letter case.
- `error_messages(errors)` lists the messages of the errors it is given.

### `catalogsync.metric_repository`

`MetricRepository(compass)` has `create`, `update`, `delete` and `search`.

- `create` returns the new remote id. When the catalog reports that the
  metric already exists, `create` looks up the metric by name, updates it,
  and returns that metric's id.
- `search` returns a `Metric` with only `id` set. It raises when no remote
  metric has the same name.
- Failures raise `RepositoryError`. The message starts with
  "Create error for", "Update error for", "Delete error for" or
  "Search error for".

### `catalogsync.scorecard_repository`

`ScorecardRepository(compass)` has three methods:

- `create(scorecard)` returns the new id and a dict that maps criterion
  names to criterion ids.
- `update(scorecard, create_criteria, update_criteria, delete_criteria)`
- `delete(scorecard_id)`

Failures raise `RepositoryError`.

### `catalogsync.metric_apply`

`MetricApplyHandler(repository).apply(state_metrics, config_metrics)` takes
two mappings from metric name to `MetricDTO`. It:

1. deletes the removed metrics;
2. creates the new metrics and stores their ids;
3. updates the changed metrics;
4. returns the new state as a list: unchanged, then created, then updated.

`metric_dto_to_resource` turns a `MetricDTO` into a `Metric`.

### `catalogsync.scorecard_apply`

`ScorecardApplyHandler(repository).apply(config_scorecards, state_metrics, state_scorecards)`
works like the metric handler, with these extra steps:

- First, it sets each configured criterion's `metric_definition_id` from
  the stored metric named by `metric_name`. It raises `KeyError` if that
  metric is not in the state.
- For each updated scorecard, it works out which criteria to create, update
  and delete, and sends them in one update.
- Unchanged scorecards come back as copies of the stored scorecard. They
  keep the stored criterion ids and take the metric definition ids from the
  configuration.

Helpers: `map_criteria`, `criteria_dto_to_resource`,
`scorecard_dto_to_resource`.

## Example

```python
from catalogsync.compass import CompassService
from catalogsync.metric_apply import MetricApplyHandler
from catalogsync.metric_models import MetricDTO, MetricSpec, MetricSpecFormat
from catalogsync.metric_repository import MetricRepository


def transport(query, variables):
    # Send the query to your catalog here and return response["data"].
    return {
        "compass": {
            "createMetricDefinition": {
                "success": True,
                "createdMetricDefinition": {"id": "metric-1"},
                "errors": [],
            }
        }
    }


compass = CompassService("cloud-1", transport)
handler = MetricApplyHandler(MetricRepository(compass))

coverage = MetricDTO(
    spec=MetricSpec(
        name="coverage",
        description="Line coverage",
        format=MetricSpecFormat(unit="%"),
    )
)
new_state = handler.apply({}, {"coverage": coverage})
assert new_state[0].spec.id == "metric-1"
```

## What the package does not do

- It has no command-line interface.
- It does not read or write definition or state files. You load the
  `MetricDTO` and `ScorecardDTO` mappings yourself, and you store the list
  that `apply` returns yourself.
- It has no HTTP client or authentication. You supply the transport that
  sends the GraphQL requests.

## Running the tests

```
pytest
```