from typing import Any
from pydantic import BaseModel, model_validator


class NotificationRequest(BaseModel):
    # Absent fields decode as "" and are rejected by the handler, not here.
    message: str = ""
    user_id: str = ""

    @model_validator(mode="before")
    @classmethod
    def fold_keys(cls, data: Any) -> Any:
        """Accept a JSON null body and match field names case-insensitively.

        A null field value is skipped; with repeated keys the last non-null
        one wins.
        """
        if data is None:
            return {}
        if not isinstance(data, dict):
            return data
        folded = {}
        for key, value in data.items():
            name = key.lower()
            if name in cls.model_fields and value is not None:
                folded[name] = value
        return folded


class NotificationResponse(BaseModel):
    status: str = "success"
    message: str = "notification sent"


class HealthResponse(BaseModel):
    status: str = "healthy"


class ErrorResponse(BaseModel):
    error: str
