"""
utils/validation_utils.py

Purpose: Input validation

- Email, name and age checks for user payloads
- Ordered error messages for create and partial update
- UUID format check, input sanitization and required-field checks

is_valid_uuid, sanitize_string and validate_required are general helpers
for callers of this module; the user request pipeline does not use them.
"""

import re
from numbers import Real
from typing import Any, Dict, Iterable, List


EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$", re.IGNORECASE)
UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
AGE_MIN = 0
AGE_MAX = 150

NAME_ERROR = "Name must be at least 2 characters long"
EMAIL_ERROR = "Valid email is required"
AGE_ERROR = "Age must be a number between 0 and 150"


def is_valid_email(email: Any) -> bool:
    """
    Validates email shape: local@domain.tld with no whitespace and a single @.

    Args:
        email: Value to check

    Returns:
        True if valid, False otherwise
    """
    if not email or not isinstance(email, str):
        return False

    return bool(EMAIL_PATTERN.fullmatch(email))


def is_valid_name(name: Any) -> bool:
    """
    Validates a display name (2-100 characters once trimmed).
    """
    if not name or not isinstance(name, str):
        return False

    return NAME_MIN_LENGTH <= len(name.strip()) <= NAME_MAX_LENGTH


def is_valid_age(age: Any) -> bool:
    """
    Validates age is a number between 0 and 150 inclusive.
    Booleans are rejected even though Python treats them as integers.
    """
    if isinstance(age, bool) or not isinstance(age, Real):
        return False

    return AGE_MIN <= age <= AGE_MAX


def validate_for_create(data: Dict[str, Any]) -> List[str]:
    """
    Validates a full user payload for creation.

    Missing fields count as invalid. Errors are ordered name, email, age.

    Args:
        data: Request payload

    Returns:
        List of error messages, empty when the payload is valid
    """
    errors = []

    if not is_valid_name(data.get("name")):
        errors.append(NAME_ERROR)

    if not is_valid_email(data.get("email")):
        errors.append(EMAIL_ERROR)

    if not is_valid_age(data.get("age")):
        errors.append(AGE_ERROR)

    return errors


def validate_for_update(patch: Dict[str, Any]) -> List[str]:
    """
    Validates a partial update. Only fields present in the patch are checked,
    so an explicit null counts as present (and fails).

    Args:
        patch: Fields to change

    Returns:
        List of error messages, empty when the patch is valid
    """
    errors = []

    if "name" in patch and not is_valid_name(patch["name"]):
        errors.append(NAME_ERROR)

    if "email" in patch and not is_valid_email(patch["email"]):
        errors.append(EMAIL_ERROR)

    if "age" in patch and not is_valid_age(patch["age"]):
        errors.append(AGE_ERROR)

    return errors


def is_valid_uuid(value: Any) -> bool:
    """
    Validates RFC 4122 UUID format (versions 1-5).
    """
    if not value or not isinstance(value, str):
        return False

    return bool(UUID_PATTERN.fullmatch(value))


def sanitize_string(text: Any) -> str:
    """
    Sanitizes user input by trimming and removing angle brackets.

    Args:
        text: Raw input

    Returns:
        Sanitized string, empty for non-string input
    """
    if not text or not isinstance(text, str):
        return ""

    return text.strip().replace("<", "").replace(">", "")


def validate_required(data: Dict[str, Any], required_fields: Iterable[str]) -> List[str]:
    """
    Checks that each required field is present and truthy.

    Returns:
        One "<field> is required" message per missing field
    """
    return [f"{field} is required" for field in required_fields if not data.get(field)]
