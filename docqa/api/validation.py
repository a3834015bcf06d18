"""
Upload input validation.

Size and extension limits for uploaded files, and the non-blank rule for
questions sent as form fields.

Dependencies: docqa.core.exceptions
System role: HTTP input validation
"""

from pathlib import Path

from docqa.core.exceptions import ValidationError

MAX_FILE_SIZE = 20 * 1024 * 1024  # 20MB
ALLOWED_EXTENSIONS = {".pdf", ".png", ".jpg", ".jpeg", ".txt", ".csv"}


def validate_upload(filename: str | None, content: bytes) -> str:
    """
    Check an uploaded file against the size and type limits.

    Args:
        filename: Client-supplied file name
        content: File bytes

    Returns:
        str: The validated file name

    Raises:
        ValidationError: Missing name, disallowed extension, empty or oversized file
    """
    if not filename:
        raise ValidationError("Filename is required", field="file")

    file_ext = Path(filename).suffix.lower()
    if file_ext not in ALLOWED_EXTENSIONS:
        raise ValidationError(
            f"File type '{file_ext}' not allowed. Allowed: {', '.join(sorted(ALLOWED_EXTENSIONS))}",
            field="file",
        )

    if not content:
        raise ValidationError("File is empty", field="file")

    if len(content) > MAX_FILE_SIZE:
        raise ValidationError(
            f"File too large. Maximum size: {MAX_FILE_SIZE // (1024 * 1024)}MB",
            field="file",
            details={"size_bytes": len(content)},
        )

    return filename


def validate_question(question: str | None, field: str = "message") -> str:
    """Reject missing or blank questions."""
    if question is None or not question.strip():
        raise ValidationError("Question must not be blank", field=field)
    return question
