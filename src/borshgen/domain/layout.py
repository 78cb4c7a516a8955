"""Layout construction — declaration parsing and recursive type resolution.

Entry points:

- :func:`parse_declaration` turns one Borsh declaration string into a
  :data:`~borshgen.domain.types.TypeDescriptor`.
- :func:`build_layouts` walks a :class:`SchemaContainer` from the requested
  roots and returns one :class:`Layout` per reachable type name.
- :func:`format_declaration` renders a descriptor back into declaration
  syntax (used for human-readable output).

INVARIANT: Resolution is pure and deterministic. The same container and
roots always yield equal layout lists, in the same order.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from typing import NoReturn

from borshgen.domain.container import EnumDefinition, SchemaContainer, StructDefinition
from borshgen.domain.errors import (
    MalformedDeclaration,
    MalformedUnion,
    UnresolvedReference,
    UnsupportedPrimitive,
)
from borshgen.domain.types import (
    PRIMITIVE_ALIASES,
    Field,
    FixedArrayType,
    Layout,
    LayoutKind,
    MapType,
    OptionType,
    PrimitiveType,
    SequenceType,
    TypeDescriptor,
    TypeRef,
)

logger = logging.getLogger(__name__)

# Generic wrapper name -> number of type arguments.
_WRAPPER_ARITY: dict[str, int] = {
    "Vec": 1,
    "Option": 1,
    "Box": 1,
    "HashMap": 2,
    "BTreeMap": 2,
}

_TOKEN_RE = re.compile(r"\s*(?:(?P<ident>[A-Za-z_]\w*)|(?P<int>\d+)|(?P<punct>[<>\[\];,]))")


def _tokenize(declaration: str) -> list[str]:
    tokens: list[str] = []
    pos = 0
    end = len(declaration.rstrip())
    while pos < end:
        match = _TOKEN_RE.match(declaration, pos)
        if match is None:
            msg = f"unexpected character {declaration[pos:].lstrip()[:1]!r}"
            raise MalformedDeclaration(declaration, msg)
        tokens.append(match.group(match.lastgroup or 0))
        pos = match.end()
    return tokens


class _DeclarationParser:
    """Recursive-descent parser over declaration tokens."""

    def __init__(self, declaration: str, container: SchemaContainer, owner: str | None) -> None:
        self._declaration = declaration
        self._container = container
        self._owner = owner
        self._tokens = _tokenize(declaration)
        self._pos = 0

    def parse(self) -> TypeDescriptor:
        descriptor = self._type()
        if self._pos != len(self._tokens):
            self._fail(f"unexpected trailing {self._tokens[self._pos]!r}")
        return descriptor

    def _fail(self, reason: str) -> NoReturn:
        raise MalformedDeclaration(self._declaration, reason)

    def _peek(self) -> str | None:
        return self._tokens[self._pos] if self._pos < len(self._tokens) else None

    def _next(self) -> str:
        token = self._peek()
        if token is None:
            self._fail("unexpected end of declaration")
        self._pos += 1
        return token

    def _expect(self, token: str) -> None:
        found = self._next()
        if found != token:
            self._fail(f"expected {token!r}, found {found!r}")

    def _type(self) -> TypeDescriptor:
        token = self._next()
        if token == "[":
            element = self._type()
            self._expect(";")
            length = self._next()
            if not length.isdigit():
                self._fail(f"array length must be an integer, found {length!r}")
            self._expect("]")
            return FixedArrayType(element=element, length=int(length))
        if not (token[0].isalpha() or token[0] == "_"):
            self._fail(f"expected a type, found {token!r}")
        if self._peek() == "<":
            return self._generic(token)
        return self._resolve(token)

    def _generic(self, wrapper: str) -> TypeDescriptor:
        arity = _WRAPPER_ARITY.get(wrapper)
        if arity is None:
            self._fail(f"unsupported generic type {wrapper!r}")
        self._expect("<")
        args = [self._type()]
        while self._peek() == ",":
            self._pos += 1
            args.append(self._type())
        self._expect(">")
        if len(args) != arity:
            self._fail(f"{wrapper} takes {arity} type argument(s), got {len(args)}")

        match wrapper:
            case "Vec":
                return SequenceType(element=args[0])
            case "Option":
                return OptionType(inner=args[0])
            case "Box":
                return args[0]
            case _:
                return MapType(key=args[0], value=args[1])

    def _resolve(self, name: str) -> TypeDescriptor:
        primitive = PRIMITIVE_ALIASES.get(name)
        if primitive is not None:
            return PrimitiveType(name=primitive)
        if name in self._container:
            return TypeRef(name=name)
        if name[0].islower():
            raise UnsupportedPrimitive(name, owner=self._owner)
        raise UnresolvedReference(name, referenced_by=self._owner)


def parse_declaration(
    declaration: str,
    container: SchemaContainer,
    *,
    owner: str | None = None,
) -> TypeDescriptor:
    """Parse a Borsh declaration string against *container*.

    Identifiers resolve to primitives first, then to container types.
    Unknown lowercase identifiers are unsupported scalars; unknown
    capitalized identifiers are unresolved references.

    Raises:
        MalformedDeclaration: Syntax errors or unknown generic wrappers.
        UnsupportedPrimitive: Unrecognized scalar tag.
        UnresolvedReference: Type name absent from *container*.
    """
    return _DeclarationParser(declaration, container, owner).parse()


def build_layout(container: SchemaContainer, name: str) -> Layout:
    """Build the Layout of a single declared type (references not followed).

    Raises:
        InvalidName: The type or one of its members cannot be emitted.
    """
    container.check_names([name])
    definition = container.get(name)
    match definition:
        case StructDefinition(fields=members):
            kind = LayoutKind.STRUCT
        case EnumDefinition(variants=members):
            if not members:
                raise MalformedUnion(name)
            kind = LayoutKind.ENUM
        case _:
            raise UnresolvedReference(name)

    fields = tuple(
        Field(name=member, type=parse_declaration(declaration, container, owner=name))
        for member, declaration in members
    )
    layout = Layout(name=name, kind=kind, fields=fields)
    logger.debug("Built %s layout %s with %d field(s)", kind, name, len(fields))
    return layout


def build_layouts(
    container: SchemaContainer,
    roots: Iterable[str] | None = None,
) -> list[Layout]:
    """Resolve every type reachable from *roots* into an ordered Layout list.

    Order is pre-order depth-first encounter order: each type precedes the
    types it references, references are followed in field order, and the
    first occurrence of a name wins.  ``roots=None`` requests every
    declared type in declaration order.

    Every declared name is checked before resolution starts, so a type that
    shadows a primitive is rejected even though references never reach it.
    """
    container.check_names()
    requested = container.names() if roots is None else list(roots)
    layouts: dict[str, Layout] = {}

    for root in requested:
        if root not in container:
            raise UnresolvedReference(root)
        stack = [root]
        while stack:
            name = stack.pop()
            if name in layouts:
                continue
            layout = build_layout(container, name)
            layouts[name] = layout
            pending = [ref for ref in dict.fromkeys(layout.references()) if ref not in layouts]
            stack.extend(reversed(pending))

    logger.debug("Resolved %d layout(s) from roots %s", len(layouts), requested)
    return list(layouts.values())


def format_declaration(descriptor: TypeDescriptor) -> str:
    """Render *descriptor* back into canonical declaration syntax."""
    match descriptor:
        case PrimitiveType(name=name):
            return name.value
        case FixedArrayType(element=element, length=length):
            return f"[{format_declaration(element)}; {length}]"
        case SequenceType(element=element):
            return f"Vec<{format_declaration(element)}>"
        case OptionType(inner=inner):
            return f"Option<{format_declaration(inner)}>"
        case MapType(key=key, value=value):
            return f"HashMap<{format_declaration(key)}, {format_declaration(value)}>"
        case TypeRef(name=name):
            return name
    msg = f"Unknown type descriptor: {descriptor!r}"
    raise TypeError(msg)
