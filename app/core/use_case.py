import asyncio
from datetime import datetime, timezone
from typing import Any, List

from app.core.covers import get_random_interview_cover
from app.core.engine import OpenRouterEngine
from app.core.extraction import ExtractionError, extract_question_list
from app.core.models import InterviewRecord
from app.core.prompts import build_interview_prompt
from app.system.exceptions import AIOutputParseError


def normalize_techstack(techstack: Any) -> List[str]:
    if isinstance(techstack, str):
        return techstack.split(",")
    if isinstance(techstack, list):
        return techstack
    return []


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class GenerateInterviewUseCase:
    def __init__(self, engine: OpenRouterEngine, storage: Any):
        self.engine = engine
        self.storage = storage
        self.logger = engine.logger

    async def generate(
        self,
        *,
        role: Any,
        level: Any,
        techstack: Any,
        type: Any,
        amount: Any,
        user_id: Any
    ) -> str:
        """
        Draft the questions, have the model double check them, then persist the interview.

        Returns the identifier the storage assigned to the new interview.
        """
        prompt = build_interview_prompt(role=role, level=level, techstack=techstack, type=type, amount=amount)

        draft = await self.engine.draft(prompt)
        raw_output = await self.engine.double_check(prompt, draft)

        try:
            questions = extract_question_list(raw_output)
        except ExtractionError as e:
            self.logger.log("Extractor", f"Could not extract questions: {e}", {"ai_output": str(raw_output)[:500]})
            raise AIOutputParseError(str(e), raw_output) from e
        self.logger.log("Extractor", f"Extracted {len(questions)} questions", {"requested": amount})

        interview: InterviewRecord = {
            "role": role,
            "type": type,
            "level": level,
            "techstack": normalize_techstack(techstack),
            "questions": questions,
            "userId": user_id,
            "finalized": True,
            "coverImage": get_random_interview_cover(),
            "createdAt": utc_timestamp(),
        }

        interview_id = await asyncio.to_thread(self.storage.add, interview)
        self.logger.log("Storage", "Interview saved", {"id": interview_id, "user_id": user_id})
        return interview_id
