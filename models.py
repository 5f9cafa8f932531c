"""
Models - Contact submission entity and its boundary validation
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

REQUIRED_FIELDS = ('name', 'email')


class ValidationError(ValueError):
    """Raised when a request body cannot become a Submission"""

    def __init__(self, fields, message='Name and email are required'):
        super().__init__(message)
        self.fields = list(fields)
        self.message = message


def _is_text(value):
    """True for strings that can be stored as UTF-8 (no lone surrogates)"""
    if not isinstance(value, str):
        return False
    try:
        value.encode('utf-8')
    except UnicodeEncodeError:
        return False
    return True


def _utcnow():
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Submission:
    """A single contact-form record. Immutable once built."""
    name: str
    email: str
    message: Optional[str] = None
    created_at: datetime = field(default_factory=_utcnow)

    @classmethod
    def from_payload(cls, payload):
        """
        Coerce an untyped request body into a Submission

        Args:
            payload: Decoded JSON body (anything; only dicts are accepted)

        Returns:
            Submission: Validated submission with stripped text fields

        Raises:
            ValidationError: If name/email are missing or empty, or a field has the wrong type or is not valid UTF-8
        """
        if not isinstance(payload, dict):
            raise ValidationError(REQUIRED_FIELDS, 'Request body must be a JSON object')

        invalid = []
        values = {}
        for key in REQUIRED_FIELDS:
            value = payload.get(key)
            if not _is_text(value) or not value.strip():
                invalid.append(key)
            else:
                values[key] = value.strip()

        message = payload.get('message')
        if message is not None and not _is_text(message):
            invalid.append('message')

        if invalid:
            raise ValidationError(invalid)

        return cls(name=values['name'], email=values['email'],
                   message=message.strip() if message is not None else None)

    def to_document(self):
        """Build the document written to the store"""
        document = {
            'name': self.name,
            'email': self.email,
            'created_at': self.created_at,
        }
        if self.message is not None:
            document['message'] = self.message
        return document


__all__ = ['Submission', 'ValidationError', 'REQUIRED_FIELDS']
