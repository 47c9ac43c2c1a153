"""Result values returned by the outbound delivery strategies."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class FailureKind(str, Enum):
    """Why a delivery attempt did not succeed."""

    NOT_CONFIGURED = "not_configured"
    MISSING_CHANNEL = "missing_channel"
    PROVIDER_ERROR = "provider_error"  # Response received, but not a success
    NO_RESPONSE = "no_response"  # Request sent, nothing came back (timeout/network)
    REQUEST_FAILED = "request_failed"  # Request could not be built or sent


class PostOutcome(BaseModel):
    """Outcome of a single delivery attempt. Strategies return, never raise."""

    model_config = ConfigDict(frozen=True)

    ok: bool
    failure: FailureKind | None = None
    detail: str | None = None
    status_code: int | None = None

    @classmethod
    def success(cls) -> "PostOutcome":
        return cls(ok=True)

    @classmethod
    def failed(
        cls, failure: FailureKind, detail: str, status_code: int | None = None
    ) -> "PostOutcome":
        return cls(ok=False, failure=failure, detail=detail, status_code=status_code)
