"""
Custom exception classes for the application
"""
from typing import Optional, Dict, Any, List


class RecruitmentException(Exception):
    """Base exception for the recruitment API"""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class AuthenticationError(RecruitmentException):
    """Authentication related errors"""

    def __init__(self, message: str = "Authentication failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=401, details=details)


class AuthorizationError(RecruitmentException):
    """Authorization/permission errors"""

    def __init__(self, message: str = "Insufficient permissions", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=403, details=details)


class NotFoundError(RecruitmentException):
    """Resource not found errors"""

    def __init__(self, resource: str, identifier: Optional[str] = None):
        message = f"{resource} not found"
        if identifier:
            message += f": {identifier}"
        super().__init__(message, status_code=404)


class ValidationError(RecruitmentException):
    """Validation errors"""

    def __init__(self, message: str = "Validation failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=400, details=details)


class ConflictError(RecruitmentException):
    """Duplicate records (already applied, username taken, ...)"""

    def __init__(self, message: str = "Resource already exists", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=400, details=details)


class DuplicateAccountError(ConflictError):
    """Username or email already taken by another account"""

    def __init__(self, field: str, message: Optional[str] = None):
        super().__init__(message or f"{field.capitalize()} already exists", details={"field": field})


class AlreadyAppliedError(ConflictError):
    """Candidate applying twice for the same job"""

    def __init__(self, job_id: int):
        super().__init__("Already applied for this job", details={"job_id": job_id})


class JobNotOpenError(ValidationError):
    """Applications are only accepted while a job is Open"""

    def __init__(self, job_id: int, status: str):
        super().__init__("Job is not open for applications", details={"job_id": job_id, "status": status})


class InvalidStatusError(ValidationError):
    """Status value outside a closed set"""

    def __init__(self, entity: str, value: str, allowed: List[str]):
        super().__init__(f"Invalid {entity} status: {value}", details={"allowed_statuses": allowed})
