"""Layout construction errors.

Every error is fatal for the generation run: the builder never returns a
partial layout set.  Each class carries a stable ``code`` that the service
layer copies into :class:`~borshgen.services.result.ServiceError`.
"""

from __future__ import annotations

from typing import Any, ClassVar


class LayoutError(Exception):
    """Base class for schema-to-layout translation failures."""

    code: ClassVar[str] = "LAYOUT_ERROR"

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail


class UnresolvedReference(LayoutError):
    """A referenced (or requested root) type name is absent from the container."""

    code = "UNRESOLVED_REFERENCE"

    def __init__(self, name: str, *, referenced_by: str | None = None) -> None:
        if referenced_by is None:
            message = f"Type {name!r} is not declared in the schema container"
        else:
            message = f"Type {name!r} referenced by {referenced_by!r} is not declared"
        super().__init__(message, name=name, referenced_by=referenced_by)
        self.name = name
        self.referenced_by = referenced_by


class MalformedUnion(LayoutError):
    """A tagged-union declaration has no variants."""

    code = "MALFORMED_UNION"

    def __init__(self, name: str) -> None:
        super().__init__(f"Enum {name!r} declares zero variants", name=name)
        self.name = name


class UnsupportedPrimitive(LayoutError):
    """An unrecognized scalar tag."""

    code = "UNSUPPORTED_PRIMITIVE"

    def __init__(self, tag: str, *, owner: str | None = None) -> None:
        message = f"Unsupported primitive type {tag!r}"
        if owner is not None:
            message += f" in {owner!r}"
        super().__init__(message, tag=tag, owner=owner)
        self.tag = tag


class MalformedDeclaration(LayoutError):
    """A type declaration string does not parse."""

    code = "MALFORMED_DECLARATION"

    def __init__(self, declaration: str, reason: str) -> None:
        super().__init__(
            f"Malformed type declaration {declaration!r}: {reason}",
            declaration=declaration,
            reason=reason,
        )
        self.declaration = declaration


class InvalidName(LayoutError):
    """A type or member name cannot be emitted as a TypeScript identifier."""

    code = "INVALID_NAME"

    def __init__(self, name: str, reason: str, *, owner: str | None = None) -> None:
        message = f"Invalid name {name!r}"
        if owner is not None:
            message += f" in {owner!r}"
        super().__init__(f"{message}: {reason}", name=name, owner=owner, reason=reason)
        self.name = name
        self.owner = owner
        self.reason = reason
