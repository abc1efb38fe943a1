from __future__ import annotations

"""Error taxonomy shared by the services and mapped to HTTP in main."""


class StateFactsError(Exception):
    """Base error carrying an HTTP status and a client-safe message."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidStateCode(StateFactsError):
    """The two-letter code does not name a known state."""

    status_code = 400

    def __init__(self, code: str) -> None:
        super().__init__("Invalid state abbreviation parameter")
        self.code = code


class InvalidInput(StateFactsError):
    status_code = 400


class NotFound(StateFactsError):
    """A valid state has no fact data for the request."""

    status_code = 404


class StoreError(StateFactsError):
    """Persistence failure. The client only ever sees a generic message."""

    status_code = 500

    def __init__(self, detail: str) -> None:
        super().__init__("Internal server error")
        self.detail = detail

    def __str__(self) -> str:
        return self.detail


class NoFactsFound(NotFound):
    """No fact record exists for the state, or its list is empty."""


class FactIndexOutOfRange(NotFound):
    """A 1-based fact index falls outside the state's fact list."""
