from app.api.schemas.generate import (
    GenerateInterviewRequest,
    GenerateInterviewResponse,
    GenerateProbeResponse
)

__all__ = [
    "GenerateInterviewRequest",
    "GenerateInterviewResponse",
    "GenerateProbeResponse"
]
