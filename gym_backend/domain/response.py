from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ..errors import ServiceError


@dataclass
class ServiceResponse:
    """Uniform envelope returned by every service call: {status, message, data}."""

    status: bool = False
    status_code: int = 200
    message: str = ""
    data: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def ok(cls, message: str, status_code: int = 200, **data: Any) -> "ServiceResponse":
        return cls(status=True, status_code=status_code, message=message, data=dict(data))

    @classmethod
    def fail(cls, status_code: int, message: str) -> "ServiceResponse":
        return cls(status=False, status_code=status_code, message=message)

    @classmethod
    def from_error(cls, err: ServiceError) -> "ServiceResponse":
        return cls.fail(err.status_code, err.message)

    def set_data(self, key: str, value: Any) -> None:
        self.data[key] = value

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        return self.data.get(key, default)

    def to_dict(self) -> dict:
        out: dict = {"status": self.status, "message": self.message}
        if self.data:
            out["data"] = self.data
        return out
