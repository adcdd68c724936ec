"""AramexError: the single exception type raised by the client.

Failures are discriminated by an explicit ``kind`` tag rather than by
subclass. Each factory fills in the structured payload that matters for
its kind (service/operation context, original cause, notifications).

Usage:
    try:
        await sdk.rate.calculate_rate(request)
    except AramexError as e:
        if e.kind is ErrorKind.TRANSPORT and e.is_retryable:
            ...
"""

from dataclasses import dataclass, field
from typing import Any

from aramex.errors.registry import ErrorKind, get_error


@dataclass
class AramexError(Exception):
    """Tagged client error.

    Attributes:
        kind: Which failure this is.
        message: Human-readable error message.
        service: Logical service name, when the failure is tied to one.
        operation: SOAP operation name, when the failure is tied to one.
        field_name: Offending configuration field or argument name.
        notifications: Aramex notification entries, verbatim.
        cause: Original exception for transport/binding failures.
    """

    kind: ErrorKind
    message: str
    service: str | None = None
    operation: str | None = None
    field_name: str | None = None
    notifications: list[dict[str, Any]] = field(default_factory=list)
    cause: BaseException | None = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    @property
    def code(self) -> str:
        """Registry code for this error's kind."""
        return get_error(self.kind).code

    @property
    def is_retryable(self) -> bool:
        """Whether the same call may succeed if repeated."""
        return get_error(self.kind).is_retryable

    @property
    def remediation(self) -> str:
        """Suggested fix from the registry."""
        return get_error(self.kind).remediation

    def to_dict(self) -> dict[str, Any]:
        """Serialize for structured logs and API error bodies.

        Returns:
            Dict with kind, code, message, context and notifications.
        """
        data: dict[str, Any] = {
            "kind": self.kind.value,
            "code": self.code,
            "message": self.message,
            "is_retryable": self.is_retryable,
        }
        if self.service is not None:
            data["service"] = self.service
        if self.operation is not None:
            data["operation"] = self.operation
        if self.field_name is not None:
            data["field"] = self.field_name
        if self.notifications:
            data["notifications"] = list(self.notifications)
        if self.cause is not None:
            data["cause"] = f"{type(self.cause).__name__}: {self.cause}"
        return data

    # ── Factories ──────────────────────────────────────────────────────

    @classmethod
    def config(cls, field_name: str, reason: str = "") -> "AramexError":
        """Required configuration field missing, empty or invalid."""
        message = get_error(ErrorKind.CONFIG).message_template.format(field=field_name)
        if reason:
            message = f"{message} {reason}"
        return cls(kind=ErrorKind.CONFIG, message=message, field_name=field_name)

    @classmethod
    def binding_construction(cls, service: str, cause: BaseException) -> "AramexError":
        """WSDL/endpoint resolution or transport construction failed."""
        template = get_error(ErrorKind.BINDING_CONSTRUCTION).message_template
        return cls(
            kind=ErrorKind.BINDING_CONSTRUCTION,
            message=f"{template.format(service=service)} {cause}",
            service=service,
            cause=cause,
        )

    @classmethod
    def operation_not_found(cls, service: str, operation: str) -> "AramexError":
        """Operation name absent from the service's operation registry."""
        template = get_error(ErrorKind.OPERATION_NOT_FOUND).message_template
        return cls(
            kind=ErrorKind.OPERATION_NOT_FOUND,
            message=template.format(service=service, operation=operation),
            service=service,
            operation=operation,
        )

    @classmethod
    def transport(cls, service: str, operation: str, cause: BaseException) -> "AramexError":
        """Network failure, SOAP fault or timeout during a remote call."""
        template = get_error(ErrorKind.TRANSPORT).message_template
        detail = str(cause) or type(cause).__name__
        return cls(
            kind=ErrorKind.TRANSPORT,
            message=f"{template.format(service=service, operation=operation)} - {detail}",
            service=service,
            operation=operation,
            cause=cause,
        )

    @classmethod
    def api(
        cls,
        message: str,
        notifications: list[dict[str, Any]] | None,
        service: str | None = None,
        operation: str | None = None,
    ) -> "AramexError":
        """Transport succeeded but the response carried HasErrors=true."""
        return cls(
            kind=ErrorKind.API,
            message=message,
            service=service,
            operation=operation,
            notifications=list(notifications or []),
        )

    @classmethod
    def validation(cls, field_name: str, reason: str) -> "AramexError":
        """Client-side argument check failed before any remote call."""
        return cls(kind=ErrorKind.VALIDATION, message=reason, field_name=field_name)
