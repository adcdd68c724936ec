"""Credential redaction for safe logging.

Every Aramex request carries a ClientInfo block with the account
password and PIN. Anything that reaches a log line (request dicts,
serialized errors, raw SOAP envelopes) goes through here first.
Key matching is case-insensitive substring matching.
"""

import re

# Substring patterns matched case-insensitively against dict keys
_DEFAULT_SENSITIVE_PATTERNS = frozenset({
    "password", "accountpin", "account_pin", "secret", "token",
    "authorization", "credential",
})

# Keys whose entire value is redacted (regardless of content type)
_CONTAINER_KEYS = frozenset({"credentials", "headers"})

_REDACTED = "***REDACTED***"

# ClientInfo children whose text content is masked in SOAP envelopes.
_ENVELOPE_SENSITIVE_ELEMENTS = ("Password", "AccountPin")

_ENVELOPE_PATTERN = re.compile(
    r"(<(?P<prefix>[\w.-]+:)?(?P<tag>" + "|".join(_ENVELOPE_SENSITIVE_ELEMENTS) + r")\b[^>]*>)"
    r"[^<]*"
    r"(</(?P=prefix)?(?P=tag)>)"
)


def _is_sensitive_key(key: str, sensitive_patterns: frozenset[str]) -> bool:
    """Check if a key matches any sensitive pattern (case-insensitive substring).

    Args:
        key: Dict key to check.
        sensitive_patterns: Patterns to match against.

    Returns:
        True if the key matches any sensitive pattern.
    """
    key_lower = key.lower()
    return any(pattern in key_lower for pattern in sensitive_patterns)


def redact_for_logging(
    obj: dict,
    sensitive_patterns: frozenset[str] = _DEFAULT_SENSITIVE_PATTERNS,
) -> dict:
    """Redact sensitive values from a dict for safe logging.

    Args:
        obj: Dict to redact (not mutated, a copy is returned).
        sensitive_patterns: Substring patterns whose matching keys' values
            should be replaced. Matching is case-insensitive.

    Returns:
        New dict with sensitive values replaced by '***REDACTED***'.
        Handles nested dicts, lists of dicts, and container keys recursively.
    """
    result = {}
    for key, value in obj.items():
        key_lower = str(key).lower()
        if key_lower in _CONTAINER_KEYS:
            result[key] = _REDACTED
        elif _is_sensitive_key(str(key), sensitive_patterns):
            result[key] = _REDACTED
        elif isinstance(value, dict):
            result[key] = redact_for_logging(value, sensitive_patterns)
        elif isinstance(value, list):
            result[key] = [
                redact_for_logging(item, sensitive_patterns) if isinstance(item, dict) else item
                for item in value
            ]
        else:
            result[key] = value
    return result


def redact_envelope(xml: str | None) -> str | None:
    """Mask credential element text inside a raw SOAP envelope.

    Handles namespaced (``<ns0:Password>``) and bare element names.

    Args:
        xml: Serialized SOAP envelope (None passes through).

    Returns:
        Envelope with Password/AccountPin contents replaced.
    """
    if xml is None:
        return None
    return _ENVELOPE_PATTERN.sub(lambda m: f"{m.group(1)}{_REDACTED}{m.group(4)}", xml)
