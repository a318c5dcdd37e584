"""Log sanitizer - keeps API keys and tokens out of log files."""

import re

# Patterns to detect and redact sensitive data
SENSITIVE_PATTERNS = [
    # Query string credentials (?key=..., &token=...)
    (r'([?&](?:key|token|api_key|apikey)=)[^&\s]+', r'\1REDACTED'),

    # key=value style secrets in free text
    (r'(password|secret|token|api_key|apikey|bearer)["\s:=]+[^\s,}"\']{8,}',
     r'\1=[REDACTED]'),

    # Bearer / Bot authorization headers
    (r'(Bearer|Bot)\s+[A-Za-z0-9\-_\.]{20,}', r'\1 [REDACTED]'),

    # Discord bot tokens (three dot-separated base64 segments)
    (r'[A-Za-z0-9_-]{23,28}\.[A-Za-z0-9_-]{6}\.[A-Za-z0-9_-]{27,}', '[DISCORD_TOKEN]'),
]

_COMPILED_PATTERNS = [(re.compile(p, re.IGNORECASE), r) for p, r in SENSITIVE_PATTERNS]


def sanitize_log(text: str) -> str:
    """Remove sensitive data from text for safe logging.

    Args:
        text: The text to sanitize

    Returns:
        Sanitized text with sensitive data replaced by placeholders
    """
    if not text:
        return text

    result = text
    for pattern, replacement in _COMPILED_PATTERNS:
        result = pattern.sub(replacement, result)

    return result


def redact_secret(text: str, secret: str | None) -> str:
    """Replace every occurrence of a known secret, then apply the generic patterns."""
    if not text:
        return text
    if secret:
        text = text.replace(secret, "REDACTED")
    return sanitize_log(text)
