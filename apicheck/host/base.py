"""
Accessor interfaces for the host context.

Helpers only ever touch a request/response through these two
interfaces, so anything that provides them can back a Sandbox.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class ResponseAccessor(ABC):
    """
    Read-only view of the current response.

    Implementations expose `status_code` and `elapsed_ms` as attributes
    (or properties) and parse the body on each call to records().
    """

    status_code: int
    elapsed_ms: float

    @abstractmethod
    def records(self) -> list[Any]:
        """
        Parse the body into its ordered sequence of records.

        Raises:
            PreconditionError: If the body isn't a record sequence
        """
        pass


class RequestAccessor(ABC):
    """Read-only view of the outgoing request."""

    @abstractmethod
    def query_parameter_names(self) -> set[str]:
        """Return the names of the query parameters present on the request."""
        pass

    @abstractmethod
    def raw_query_string(self) -> str:
        """Return the query string as sent, without the leading '?'."""
        pass
