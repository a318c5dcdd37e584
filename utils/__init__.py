"""Utility modules for Alfred."""

from .log_sanitizer import sanitize_log, redact_secret

__all__ = ["sanitize_log", "redact_secret"]
