from typing import Any, List, Literal, NotRequired, TypedDict


class ChatMessage(TypedDict):
    role: Literal["user", "assistant"]
    content: str
    reasoning_details: NotRequired[Any]


class InterviewRecord(TypedDict):
    role: Any
    type: Any
    level: Any
    techstack: List[str]
    questions: List[str]
    userId: Any
    finalized: bool
    coverImage: str
    createdAt: str
