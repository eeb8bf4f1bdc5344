from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class InterviewFields(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: str = "unknown"
    interview_type: str = "technical"
    level: str = "junior"
    techstack: List[str] = Field(default_factory=list)
    amount: str = "5"
    user_id: str = "anonymous"
    user_name: str = "Unknown User"


class InterviewRecord(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    role: str
    interview_type: str = Field(alias="type")
    level: str
    techstack: Tuple[str, ...]
    amount: str
    questions: Tuple[str, ...]
    user_id: str = Field(alias="userId")
    user_name: str = Field(alias="userName")
    finalized: bool = True
    cover_image: str = Field(alias="coverImage")
    created_at: str = Field(alias="createdAt")


class GenerateInterviewResponse(BaseModel):
    success: bool = True
    data: InterviewRecord


class StatusResponse(BaseModel):
    success: bool = True
    message: str


class ServerErrorResponse(BaseModel):
    success: bool = False
    message: str = "Server crashed"
    error: str
    stack: Optional[str] = None

    @classmethod
    def from_exception(cls, exc: BaseException, stack: Optional[str] = None) -> "ServerErrorResponse":
        return cls(error=str(exc), stack=stack)
