"""API request/response models."""

from docqa.models.common import ErrorResponse, MessageResponse
from docqa.models.rag import AnswerData, GlobalQuestionRequest

__all__ = [
    "AnswerData",
    "ErrorResponse",
    "GlobalQuestionRequest",
    "MessageResponse",
]
