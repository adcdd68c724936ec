"""Error kind registry with A-XXXX format codes.

Every failure raised by the client is tagged with exactly one ErrorKind.
Each kind maps to a registry entry carrying a code, title, message
template, remediation and retry guidance:
- A-1xxx: Configuration errors
- A-2xxx: Binding and dispatch errors
- A-3xxx: Transport errors
- A-4xxx: Remote business errors (HasErrors=true)
- A-5xxx: Client-side argument validation errors
"""

from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of failure kinds."""

    CONFIG = "config"
    BINDING_CONSTRUCTION = "binding_construction"
    OPERATION_NOT_FOUND = "operation_not_found"
    TRANSPORT = "transport"
    API = "api"
    VALIDATION = "validation"


@dataclass(frozen=True)
class ErrorCode:
    """Definition of an error kind with metadata.

    Attributes:
        code: Error code in A-XXXX format.
        kind: The ErrorKind this entry describes.
        title: Short title for display.
        message_template: Message with {placeholders} for context.
        remediation: Action the caller should take to resolve.
        is_retryable: Whether repeating the same call may succeed.
    """

    code: str
    kind: ErrorKind
    title: str
    message_template: str
    remediation: str
    is_retryable: bool = False


ERROR_REGISTRY: dict[ErrorKind, ErrorCode] = {
    ErrorKind.CONFIG: ErrorCode(
        code="A-1001",
        kind=ErrorKind.CONFIG,
        title="Invalid Configuration",
        message_template="Configuration field '{field}' is missing or invalid.",
        remediation="Provide every required credential field and retry.",
    ),
    ErrorKind.BINDING_CONSTRUCTION: ErrorCode(
        code="A-2001",
        kind=ErrorKind.BINDING_CONSTRUCTION,
        title="Service Binding Failed",
        message_template="Could not build a SOAP binding for the '{service}' service.",
        remediation="Check the WSDL files and endpoint URLs, then retry the call.",
        is_retryable=True,
    ),
    ErrorKind.OPERATION_NOT_FOUND: ErrorCode(
        code="A-2002",
        kind=ErrorKind.OPERATION_NOT_FOUND,
        title="Unknown Operation",
        message_template="SOAP operation '{operation}' not found in {service} service.",
        remediation="Use an operation name declared in the service WSDL (case-sensitive).",
    ),
    ErrorKind.TRANSPORT: ErrorCode(
        code="A-3001",
        kind=ErrorKind.TRANSPORT,
        title="SOAP Call Failed",
        message_template="SOAP call failed: {service}.{operation}",
        remediation="Inspect the cause; network faults and timeouts may succeed on retry.",
        is_retryable=True,
    ),
    ErrorKind.API: ErrorCode(
        code="A-4001",
        kind=ErrorKind.API,
        title="Aramex Rejected Request",
        message_template="Aramex returned errors for {service}.{operation}.",
        remediation="Review the notifications returned by Aramex and correct the request.",
    ),
    ErrorKind.VALIDATION: ErrorCode(
        code="A-5001",
        kind=ErrorKind.VALIDATION,
        title="Invalid Argument",
        message_template="Argument '{field}' is invalid.",
        remediation="Correct the argument before calling the service.",
    ),
}


def get_error(kind: ErrorKind) -> ErrorCode:
    """Look up the registry entry for an error kind.

    Args:
        kind: ErrorKind to look up.

    Returns:
        The ErrorCode for that kind.
    """
    return ERROR_REGISTRY[kind]


def get_error_by_code(code: str) -> ErrorCode | None:
    """Look up a registry entry by its A-XXXX code.

    Args:
        code: Error code in A-XXXX format.

    Returns:
        The ErrorCode if found, None otherwise.
    """
    for entry in ERROR_REGISTRY.values():
        if entry.code == code:
            return entry
    return None
