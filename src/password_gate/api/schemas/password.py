"""Password check request/response schemas."""

from pydantic import BaseModel


class PasswordRequest(BaseModel):
    password: str


class SubmitResponse(BaseModel):
    accepted: bool = True


class RequirementsResponse(BaseModel):
    requirements: list[str]
    min_length: int
    max_length: int
    min_classes_required: int
    max_consecutive_repeat: int
