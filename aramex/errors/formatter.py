"""Error formatting utilities.

Renders AramexError instances and Aramex notification lists for
human display and log lines.
"""

from typing import Any

from aramex.errors.registry import get_error
from aramex.errors.types import AramexError


def format_notifications(notifications: list[dict[str, Any]] | None) -> str:
    """Render notification entries as a single line.

    Args:
        notifications: List of {"Code", "Message"} dicts as returned by Aramex.

    Returns:
        "[CODE] message; [CODE] message", or empty string when there are none.
    """
    if not notifications:
        return ""
    parts = []
    for note in notifications:
        if not isinstance(note, dict):
            parts.append(str(note))
            continue
        code = note.get("Code") or "?"
        message = note.get("Message") or ""
        parts.append(f"[{code}] {message}".rstrip())
    return "; ".join(parts)


def format_error(error: AramexError) -> str:
    """Format an error for user display.

    Args:
        error: The AramexError to format.

    Returns:
        Multi-line string: code/title header, message, context,
        notifications and remediation.
    """
    entry = get_error(error.kind)
    lines = [f"Error {entry.code}: {entry.title}", "", error.message]

    context = [
        f"{label}: {value}"
        for label, value in (
            ("Service", error.service),
            ("Operation", error.operation),
            ("Field", error.field_name),
        )
        if value
    ]
    if context:
        lines.append("")
        lines.extend(context)

    rendered = format_notifications(error.notifications)
    if rendered:
        lines.append("")
        lines.append(f"Notifications: {rendered}")

    if error.cause is not None:
        lines.append("")
        lines.append(f"Cause: {type(error.cause).__name__}: {error.cause}")

    lines.append("")
    lines.append(f"Suggestion: {entry.remediation}")
    return "\n".join(lines)
