"""
Local file storage for candidate uploads
"""
import os
from pathlib import Path
from fastapi import UploadFile
import structlog

from recruitment.core.config import settings
from recruitment.core.exceptions import ValidationError
from recruitment.core.timeutils import utcnow

logger = structlog.get_logger()

CV_DOCUMENT_TYPE = "CV"


def _upload_rules(document_type: str):
    """(sub directory, allowed extensions, max size in MB) for a document type"""
    if document_type.strip().lower() == CV_DOCUMENT_TYPE.lower():
        return "cvs", settings.CV_ALLOWED_EXTENSIONS, settings.CV_MAX_SIZE_MB
    return "documents", settings.DOCUMENT_ALLOWED_EXTENSIONS, settings.DOCUMENT_MAX_SIZE_MB


def build_file_name(candidate_id: int, document_type: str, extension: str) -> str:
    """{candidateId}_{type}_{YYYYmmddHHMMSS}{ext}"""
    type_part = document_type.strip().lower().replace(" ", "_")
    return f"{candidate_id}_{type_part}_{utcnow():%Y%m%d%H%M%S}{extension}"


def save_upload(file: UploadFile, candidate_id: int, document_type: str) -> str:
    """Validate and write an uploaded file, returning its stored path"""
    if not file or not file.filename:
        raise ValidationError("No file uploaded")

    sub_dir, allowed, max_size_mb = _upload_rules(document_type)

    # Validate file type
    extension = Path(file.filename).suffix.lower()
    if extension.lstrip(".") not in allowed:
        raise ValidationError(
            f"File type not allowed. Allowed types: {', '.join(allowed)}",
            details={"allowed_extensions": list(allowed)},
        )

    # Validate file size
    file_content = file.file.read()
    if not file_content:
        raise ValidationError("Uploaded file is empty")
    if len(file_content) > max_size_mb * 1024 * 1024:
        raise ValidationError(f"File size exceeds maximum allowed size of {max_size_mb}MB")

    target_dir = os.path.join(settings.UPLOAD_DIR, sub_dir)
    os.makedirs(target_dir, exist_ok=True)
    file_path = os.path.join(target_dir, build_file_name(candidate_id, document_type, extension))

    with open(file_path, "wb") as f:
        f.write(file_content)

    logger.info(
        "file_stored",
        candidate_id=candidate_id,
        document_type=document_type,
        size_bytes=len(file_content),
        path=file_path,
    )
    return file_path


def remove_file(file_path: str) -> bool:
    """Delete a stored file; a file that is already gone is not an error"""
    try:
        os.remove(file_path)
        return True
    except FileNotFoundError:
        logger.warning("stored_file_missing", path=file_path)
        return False
