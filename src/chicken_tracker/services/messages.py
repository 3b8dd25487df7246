"""User-facing wording for validation issues."""

from chicken_tracker.domain.errors import ErrorKind, ValidationIssue

_DISPLAY_MESSAGES: dict[tuple[str, ErrorKind], str] = {
    ("count", ErrorKind.COUNT_NOT_INTEGER): (
        "Egg count must be a whole number (no decimals)."
    ),
    ("count", ErrorKind.COUNT_NEGATIVE): (
        "Egg count cannot be negative. It must be 0 or greater."
    ),
    ("date", ErrorKind.DATE_IN_FUTURE): (
        "You cannot log eggs for a future date. "
        "Please select today or an earlier date."
    ),
}


def display_message(field: str, kind: ErrorKind, fallback: str) -> str:
    """Return display text for a field/rule pair, or ``fallback`` if unmapped."""
    return _DISPLAY_MESSAGES.get((field, kind), fallback)


def issue_details(issues: list[ValidationIssue]) -> list[dict[str, str]]:
    """Render issues as ``{"field", "message"}`` pairs using display text."""
    return [
        {
            "field": issue.field,
            "message": display_message(issue.field, issue.kind, issue.message),
        }
        for issue in issues
    ]
