"""
Knowledge base question endpoint.

Routes: POST /rag/ask-global

Dependencies: fastapi, docqa.core.rag_query
System role: Global Q&A HTTP API
"""

from fastapi import APIRouter, Depends

from docqa.api.deps import get_rag_orchestrator
from docqa.core.rag_query import RagOrchestrator
from docqa.models import AnswerData, GlobalQuestionRequest, MessageResponse

router = APIRouter(prefix="/rag", tags=["rag"])


@router.post("/ask-global", response_model=MessageResponse[AnswerData])
async def ask_global_question(
    request: GlobalQuestionRequest,
    orchestrator: RagOrchestrator = Depends(get_rag_orchestrator),
) -> MessageResponse[AnswerData]:
    """Answer a question from every document indexed so far."""
    answer = await orchestrator.answer_global_question(request.question)
    return MessageResponse[AnswerData](
        message="Answer generated from the knowledge base",
        data=AnswerData(question=request.question, answer=answer),
    )
