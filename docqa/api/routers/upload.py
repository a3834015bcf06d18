"""
Upload API endpoints.

Routes:
- POST /upload - Store a file and index it into the knowledge base
- POST /upload/ask-instant - Ask a question about a file without storing it

Dependencies: fastapi, docqa.application.services
System role: Upload HTTP API
"""

import logging

from fastapi import APIRouter, Depends, File, Form, UploadFile

from docqa.api.deps import get_upload_service
from docqa.api.validation import validate_question, validate_upload
from docqa.application.services import UploadResult, UploadService
from docqa.models import AnswerData, MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/upload", tags=["upload"])


@router.post("", response_model=MessageResponse[UploadResult])
async def upload_file(
    file: UploadFile = File(...),
    upload_service: UploadService = Depends(get_upload_service),
) -> MessageResponse[UploadResult]:
    """
    Upload a file and index it into the persistent knowledge base.

    Indexing failures are reported in data.ingestion; the upload still succeeds.

    Args:
        file: Uploaded file (multipart form)
        upload_service: Injected UploadService

    Returns:
        MessageResponse[UploadResult]: Stored file and indexing outcome

    Raises:
        ValidationError (422): Invalid file type or size
        StorageError (500): File could not be saved
    """
    content = await file.read()
    filename = validate_upload(file.filename, content)

    logger.info(
        "Upload request received",
        extra={"file_name": filename, "size_bytes": len(content)},
    )

    result = await upload_service.upload(content, filename, file.content_type)

    if result.ingestion.status == "persisted":
        message = "File uploaded and indexed successfully"
    else:
        message = "File uploaded; indexing failed"
    return MessageResponse[UploadResult](message=message, data=result)


@router.post("/ask-instant", response_model=MessageResponse[AnswerData])
async def ask_instant_question(
    file: UploadFile = File(...),
    message: str = Form(...),
    upload_service: UploadService = Depends(get_upload_service),
) -> MessageResponse[AnswerData]:
    """
    Answer a question about an uploaded file without persisting it.

    Args:
        file: Uploaded file (multipart form)
        message: Question about the file (form field)
        upload_service: Injected UploadService

    Returns:
        MessageResponse[AnswerData]: Question and answer

    Raises:
        ValidationError (422): Invalid file or blank question
        ParsingError (422): File content cannot be decoded
        ProviderError (502/504): Embedding or generation failed
    """
    content = await file.read()
    filename = validate_upload(file.filename, content)
    question = validate_question(message, field="message")

    answer = await upload_service.ask_instant(content, filename, question)

    return MessageResponse[AnswerData](
        message="Answer generated from the document (in memory)",
        data=AnswerData(question=question, answer=answer),
    )
