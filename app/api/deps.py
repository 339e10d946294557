from typing import Any

from app.config.settings import settings
from app.core.engine import OpenRouterEngine
from app.core.use_case import GenerateInterviewUseCase
from app.storages.firestore_storage import FirestoreInterviewStorage
from app.storages.interview_storage import InterviewStorage

_engine: OpenRouterEngine | None = None
_storage: Any = None
_use_case: GenerateInterviewUseCase | None = None


def get_engine() -> OpenRouterEngine:
    global _engine
    if _engine is None:
        _engine = OpenRouterEngine()
    return _engine


def get_storage() -> Any:
    global _storage
    if _storage is None:
        if settings.STORAGE_BACKEND == "firestore":
            _storage = FirestoreInterviewStorage()
        else:
            _storage = InterviewStorage()
    return _storage


def get_use_case() -> GenerateInterviewUseCase:
    global _use_case
    if _use_case is None:
        _use_case = GenerateInterviewUseCase(get_engine(), get_storage())
    return _use_case


async def close_engine() -> None:
    global _engine, _use_case
    if _engine is not None:
        await _engine.aclose()
    _engine = None
    _use_case = None
