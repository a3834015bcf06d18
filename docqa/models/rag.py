"""
Question/answer models and schemas.

Request/response schemas for global and instant questions.

Dependencies: pydantic
System role: Q&A API contracts
"""

from pydantic import BaseModel, Field, field_validator


class GlobalQuestionRequest(BaseModel):
    """Request schema for a question over the knowledge base."""

    question: str = Field(description="Natural-language question", examples=["What is the refund policy?"])

    @field_validator("question")
    @classmethod
    def question_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("question must not be blank")
        return value


class AnswerData(BaseModel):
    """Question with its generated answer."""

    question: str
    answer: str
