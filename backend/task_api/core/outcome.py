"""Outcome — the uniform, transport-independent success result.

Invariants:
    - success is always True here; failures travel as TaskApiError subclasses
    - data is omitted from the envelope when the operation carries no payload

Design Decisions:
    - Failures raise instead of returning Outcome(success=False): the global
      handler renders them with the same {success, message} shape (ADR: one
      code path for every failure, whether raised by the service or FastAPI)
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Outcome:
    success: bool = True
    data: Any = None
    has_data: bool = True

    @classmethod
    def ok(cls, data: Any) -> "Outcome":
        return cls(success=True, data=data)

    @classmethod
    def empty(cls) -> "Outcome":
        return cls(success=True, has_data=False)

    def to_response(self) -> dict:
        response: dict[str, Any] = {"success": self.success}
        if self.has_data:
            response["data"] = self.data
        return response
