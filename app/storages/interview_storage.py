import copy
import uuid
from typing import Dict

from app.core.models import InterviewRecord


class InterviewStorage:
    """Append-only in-memory interview collection."""

    def __init__(self):
        self._interviews: Dict[str, InterviewRecord] = {}

    def add(self, record: InterviewRecord) -> str:
        interview_id = uuid.uuid4().hex
        self._interviews[interview_id] = copy.deepcopy(record)
        return interview_id
