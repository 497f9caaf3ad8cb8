"""Response envelope returned by every BFHL endpoint."""
from typing import Any, Dict, Optional

from pydantic import BaseModel, model_validator


class ResponseEnvelope(BaseModel):
    """Fixed-shape wrapper around a success value or an error message.

    ``data`` is only present on success and ``error`` only on failure; use
    :meth:`to_payload` rather than ``model_dump`` so the absent field is
    omitted instead of rendered as ``null``.
    """

    is_success: bool
    official_email: str = ""
    data: Any = None
    error: Optional[str] = None

    @model_validator(mode="after")
    def _check_exclusive(self) -> "ResponseEnvelope":
        if self.is_success and self.error is not None:
            raise ValueError("a successful envelope cannot carry an error")
        if not self.is_success and self.data is not None:
            raise ValueError("a failed envelope cannot carry data")
        if not self.is_success and self.error is None:
            raise ValueError("a failed envelope requires an error")
        return self

    @classmethod
    def success(cls, official_email: str, data: Any = None) -> "ResponseEnvelope":
        return cls(is_success=True, official_email=official_email, data=data)

    @classmethod
    def failure(cls, official_email: str, error: str) -> "ResponseEnvelope":
        return cls(is_success=False, official_email=official_email, error=error)

    def to_payload(self, include_data: bool = True) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "is_success": self.is_success,
            "official_email": self.official_email,
        }
        if self.is_success:
            if include_data:
                payload["data"] = self.data
        else:
            payload["error"] = self.error
        return payload
