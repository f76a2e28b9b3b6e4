from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional


class PasswordAssessment(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    is_breached: bool = Field(alias="isBreached")
    is_weak: bool = Field(alias="isWeak")

    breach_count: Optional[int] = Field(default=None, alias="breachCount")
    issues: Optional[List[str]] = None
    message: Optional[str] = None

    # Set only when the breach corpus could not be consulted
    api_error: Optional[bool] = Field(default=None, alias="apiError")

    def to_response(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None
