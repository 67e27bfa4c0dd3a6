"""
Log sanitization to prevent sensitive data leakage.

Automatically redacts sensitive information from log lines:
- Bearer and JWT tokens
- Passwords and secrets
- Database URLs with passwords
- Phone numbers
"""
import re
import logging


class SanitizingFormatter(logging.Formatter):
    """
    Log formatter that redacts sensitive data after formatting.
    """

    PATTERNS = [
        # Bearer tokens
        (re.compile(r'Bearer\s+([a-zA-Z0-9_\-\.]{20,})', re.IGNORECASE), r'Bearer [REDACTED]'),

        # JWT tokens (header.payload.signature format)
        (re.compile(r'eyJ[a-zA-Z0-9_\-]+\.eyJ[a-zA-Z0-9_\-]+\.[a-zA-Z0-9_\-]+'), r'[REDACTED_JWT]'),

        # Passwords
        (re.compile(r'password["\s:=]+([^\s,\]}"\']+)', re.IGNORECASE), r'password=[REDACTED]'),

        # Secrets
        (re.compile(r'secret[_-]?key["\']?\s*[:=]\s*["\']?([^\s,\]}"\']+)', re.IGNORECASE), r'secret_key=[REDACTED]'),

        # Database and cache URLs with passwords
        (re.compile(r'://([^:/\s]+):([^@\s]+)@'), r'://\1:[REDACTED]@'),

        # Phone numbers (E.164 format)
        (re.compile(r'\+\d{1,3}\d{6,14}'), r'[REDACTED_PHONE]'),

        # Authorization headers
        (re.compile(r'Authorization["\s:]+([^\s,\]}"\']+)', re.IGNORECASE), r'Authorization: [REDACTED]'),
    ]

    @classmethod
    def sanitize(cls, text):
        for pattern, replacement in cls.PATTERNS:
            text = pattern.sub(replacement, text)
        return text

    def format(self, record):
        return self.sanitize(super().format(record))


class SanitizingFilter(logging.Filter):
    """
    Logging filter that sanitizes the message and args of each record.

    Runs before formatting, so it also protects handlers using the JSON
    formatter.
    """

    def filter(self, record):
        if isinstance(record.msg, str):
            record.msg = SanitizingFormatter.sanitize(record.msg)

        if record.args and isinstance(record.args, tuple):
            record.args = tuple(
                SanitizingFormatter.sanitize(arg) if isinstance(arg, str) else arg
                for arg in record.args
            )

        return True
