"""
Exception classes raised while turning a brief into a production plan
"""
from typing import Any, Dict, Optional


class MemeForgeError(Exception):
    """Base exception carrying the HTTP status it maps to"""
    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message}


class ConfigurationError(MemeForgeError):
    """Raised when the provider credential is missing from the environment"""
    status_code = 500


class ValidationError(MemeForgeError):
    """Raised when a brief is missing its topic or vibe"""
    status_code = 400


class GenerationError(MemeForgeError):
    """Raised when the provider answers without usable text"""
    status_code = 500
