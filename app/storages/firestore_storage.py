from typing import Any

from google.cloud import firestore

from app.config.settings import settings
from app.core.models import InterviewRecord


class FirestoreInterviewStorage:
    def __init__(self, client: Any | None = None, collection: str | None = None):
        self.client = client or firestore.Client(project=settings.FIRESTORE_PROJECT)
        self.collection = collection or settings.INTERVIEWS_COLLECTION

    def add(self, record: InterviewRecord) -> str:
        _, document = self.client.collection(self.collection).add(dict(record))
        return document.id
