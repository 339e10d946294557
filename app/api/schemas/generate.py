from typing import Any

from pydantic import BaseModel, ConfigDict

from app.utils.truthiness import is_truthy


class GenerateInterviewRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: Any = None
    role: Any = None
    level: Any = None
    techstack: Any = None
    amount: Any = None
    userid: Any = None

    def has_required_fields(self) -> bool:
        return all(is_truthy(value) for value in (self.role, self.amount, self.userid))


class GenerateInterviewResponse(BaseModel):
    success: bool = True


class GenerateProbeResponse(BaseModel):
    success: bool = True
    data: str = "Thank you!"
