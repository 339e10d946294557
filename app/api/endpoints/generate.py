import logging

from fastapi import APIRouter, Depends, Request

from app.api.deps import get_use_case
from app.api.schemas import GenerateInterviewRequest, GenerateInterviewResponse, GenerateProbeResponse
from app.core.use_case import GenerateInterviewUseCase
from app.system.exceptions import BaseHTTPException, InternalServerError, MissingFieldsError

logger = logging.getLogger(__name__)
generate_router = APIRouter()


@generate_router.get("/generate", response_model=GenerateProbeResponse)
async def generate_probe():
    return GenerateProbeResponse()


@generate_router.post("/generate", response_model=GenerateInterviewResponse)
async def generate_interview(request: Request, use_case: GenerateInterviewUseCase = Depends(get_use_case)):
    try:
        payload = await request.json()
        if payload is not None and not isinstance(payload, dict):
            payload = {}
        body = GenerateInterviewRequest.model_validate(payload)

        if not body.has_required_fields():
            logger.info("Rejected generate request with missing required fields")
            raise MissingFieldsError()

        use_case.logger.log("Handler", f"Generating {body.amount} questions", {"role": body.role, "user_id": body.userid})
        await use_case.generate(
            role=body.role,
            level=body.level,
            techstack=body.techstack,
            type=body.type,
            amount=body.amount,
            user_id=body.userid,
        )
        return GenerateInterviewResponse(success=True)
    except BaseHTTPException:
        raise
    except Exception as e:
        logger.error(f"Error in generate_interview: {e}", exc_info=True)
        raise InternalServerError(str(e) or e.__class__.__name__)
