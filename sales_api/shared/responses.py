# sales_api/shared/responses.py
"""
Uniform response envelope and the tagged result returned by every service.

Services never build HTTP responses themselves; they return a ``ServiceResult``
whose ``outcome`` decides the status code when the router renders it.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel


class ResponseMessages:
    ADDED = "Added"
    MODIFIED = "Modified"
    DELETED = "Deleted"
    SUCCESSFUL = "Successful"
    NOT_FOUND = "Not found"
    INVALID_DATA = "Invalid data"
    CONFLICT = "Already exists"
    UNAUTHORIZED = "Invalid credentials"
    NOT_LOGGED_IN = "User is not logged in."
    FORBIDDEN = "Insufficient permissions"
    EXCEPTION = "An error occurred while processing the request."


class Outcome(str, Enum):
    SUCCESS = "success"
    CREATED = "created"
    INVALID_INPUT = "invalid_input"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    PERSISTENCE_FAILURE = "persistence_failure"

    @property
    def is_success(self) -> bool:
        return self in (Outcome.SUCCESS, Outcome.CREATED)


OUTCOME_STATUS = {
    Outcome.SUCCESS: status.HTTP_200_OK,
    Outcome.CREATED: status.HTTP_201_CREATED,
    Outcome.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    Outcome.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    Outcome.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    Outcome.CONFLICT: status.HTTP_409_CONFLICT,
    Outcome.PERSISTENCE_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class ResponseEnvelope(BaseModel):
    is_success: bool
    is_error: bool
    message: str
    data: Optional[Any] = None


@dataclass
class ServiceResult:
    outcome: Outcome
    message: str
    data: Any = None

    # ----- constructors -----

    @classmethod
    def success(cls, data: Any = None, message: str = ResponseMessages.SUCCESSFUL) -> "ServiceResult":
        return cls(Outcome.SUCCESS, message, data)

    @classmethod
    def created(cls, data: Any = None, message: str = ResponseMessages.ADDED) -> "ServiceResult":
        return cls(Outcome.CREATED, message, data)

    @classmethod
    def not_found(cls, message: str = ResponseMessages.NOT_FOUND) -> "ServiceResult":
        return cls(Outcome.NOT_FOUND, message)

    @classmethod
    def invalid_input(cls, message: str = ResponseMessages.INVALID_DATA) -> "ServiceResult":
        return cls(Outcome.INVALID_INPUT, message)

    @classmethod
    def conflict(cls, message: str = ResponseMessages.CONFLICT) -> "ServiceResult":
        return cls(Outcome.CONFLICT, message)

    @classmethod
    def unauthorized(cls, message: str = ResponseMessages.UNAUTHORIZED) -> "ServiceResult":
        return cls(Outcome.UNAUTHORIZED, message)

    @classmethod
    def persistence_failure(cls) -> "ServiceResult":
        # Store details are logged by the caller, never returned
        return cls(Outcome.PERSISTENCE_FAILURE, ResponseMessages.EXCEPTION)

    # ----- rendering -----

    @property
    def status_code(self) -> int:
        return OUTCOME_STATUS[self.outcome]

    def to_envelope(self) -> ResponseEnvelope:
        return ResponseEnvelope(
            is_success=self.outcome.is_success,
            is_error=not self.outcome.is_success,
            message=self.message,
            data=self.data,
        )

    def to_response(self) -> JSONResponse:
        return JSONResponse(
            status_code=self.status_code,
            content=jsonable_encoder(self.to_envelope()),
        )


def error_response(status_code: int, message: str) -> JSONResponse:
    """Envelope for failures raised outside a service (auth gate, dependencies)"""
    envelope = ResponseEnvelope(is_success=False, is_error=True, message=message)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(envelope))
