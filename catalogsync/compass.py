"""Access to the Compass GraphQL API: error values and request execution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping, Optional, Protocol

ALREADY_EXISTS = "already exists"

Transport = Callable[[str, dict], Optional[Mapping[str, Any]]]


@dataclass(frozen=True)
class CompassError:
    """One error entry reported by the Compass API."""

    message: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "CompassError":
        return cls(message=str((data or {}).get("message", "")))

    @classmethod
    def parse_list(cls, raw: Optional[Iterable[Mapping[str, Any]]]) -> list["CompassError"]:
        return [cls.from_dict(item) for item in raw or []]


def error_messages(errors: Iterable[CompassError]) -> list[str]:
    """Return the message of every error, in order."""
    return [error.message for error in errors]


class CompassRequestError(Exception):
    """Raised when a Compass request fails or reports no success."""

    def __init__(self, message: str, errors: Iterable[str] = ()) -> None:
        super().__init__(message)
        self.errors = list(errors)


class QueryInput(Protocol):
    def get_query(self) -> str: ...

    def variables(self) -> dict: ...


class QueryOutput(Protocol):
    def load(self, data: Mapping[str, Any]) -> None: ...

    def is_successful(self) -> bool: ...

    def get_errors(self) -> list[str]: ...


class CompassService:
    """Runs query objects against Compass through a transport callable.

    The transport receives the query text and its variables and returns the
    ``data`` member of the GraphQL response.
    """

    def __init__(self, cloud_id: str, transport: Transport) -> None:
        self.cloud_id = cloud_id
        self._transport = transport

    def run(self, query_input: QueryInput, output: QueryOutput) -> None:
        """Send the query, fill ``output`` and raise unless it succeeded.

        An input may carry a ``pre_validation`` callable; it runs after the
        response is loaded and before success is checked.
        """
        try:
            data = self._transport(query_input.get_query(), query_input.variables())
        except CompassRequestError:
            raise
        except Exception as exc:
            raise CompassRequestError(str(exc)) from exc

        output.load(data or {})

        hook = getattr(query_input, "pre_validation", None)
        if hook is not None:
            hook()

        if not output.is_successful():
            errors = output.get_errors()
            raise CompassRequestError(
                "; ".join(errors) or "operation was not successful", errors
            )

    def is_already_exists(self, errors: Iterable[CompassError]) -> bool:
        """Tell whether any error says the resource already exists."""
        return any(ALREADY_EXISTS in error.message.lower() for error in errors or ())