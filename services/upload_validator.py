import logging
from typing import Optional

from config import settings
from services.exceptions import FileTooLargeError, InvalidFileTypeError, MissingFieldsError

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"


def validate_resume_upload(content_type: Optional[str], size: int,
                           max_bytes: Optional[int] = None) -> None:
    """
    Reject non-PDF uploads and files over the size limit
    """
    limit = settings.max_upload_bytes if max_bytes is None else max_bytes

    if content_type != PDF_CONTENT_TYPE:
        logger.warning(f"Rejected upload with content type: {content_type}")
        raise InvalidFileTypeError(content_type)

    if size > limit:
        logger.warning(f"Rejected upload of {size} bytes (limit {limit})")
        raise FileTooLargeError(size, limit)


def require_fields(resume_present: bool, job_description: Optional[str]) -> None:
    """Both a resume and a non-blank job description are needed to analyze"""
    if not resume_present or not job_description or not job_description.strip():
        raise MissingFieldsError()
