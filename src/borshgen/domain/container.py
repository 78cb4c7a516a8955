"""Schema container and the declarative registration API.

The container is the input to layout construction: a mapping from type
name to a struct or enum definition whose members carry Borsh declaration
strings (``"u32"``, ``"[u8; 32]"``, ``"Vec<Point>"``, ``"Option<string>"``,
``"HashMap<string, u64>"``).  It replaces compile-time reflection with an
explicit registration call per type::

    container = (
        SchemaContainer()
        .declare_struct("Point", {"x": "u32", "y": "u32"})
        .declare_enum("Shape", [("Dot", "Point"), ("Label", "string")])
    )

The same shape validates from a plain mapping (``{"types": {...}}``), which
is what the TOML/JSON/YAML loaders produce.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Annotated, Any, Literal, Self

from pydantic import BaseModel, Field, field_validator

from borshgen.domain.errors import InvalidName
from borshgen.domain.types import PRIMITIVE_ALIASES

Members = Mapping[str, str] | Iterable[tuple[str, str]]

IDENTIFIER_RE = re.compile(r"[A-Za-z_$][\w$]*", re.ASCII)

# Names the generated preamble imports or declares.
PREAMBLE_NAMES = frozenset(
    {
        "BN",
        "BinaryReader",
        "BinaryWriter",
        "Enum",
        "PublicKey",
        "SCHEMA",
        "Struct",
        "borshPublicKeyHack",
        "borshSignedIntegers",
    }
)

# Reserved words that cannot name a TypeScript class.
_TS_RESERVED = frozenset(
    {
        "any", "boolean", "break", "case", "catch", "class", "const", "continue",
        "debugger", "default", "delete", "do", "else", "enum", "export", "extends",
        "false", "finally", "for", "function", "if", "implements", "import", "in",
        "instanceof", "interface", "let", "never", "new", "null", "number", "object",
        "package", "private", "protected", "public", "return", "static", "string",
        "super", "switch", "symbol", "this", "throw", "true", "try", "typeof",
        "undefined", "unknown", "var", "void", "while", "with", "yield",
    }
)  # fmt: skip


def _as_pairs(value: Any) -> Any:
    """Accept either an ordered mapping or a list of ``[name, decl]`` pairs."""
    if isinstance(value, Mapping):
        return list(value.items())
    return value


class StructDefinition(BaseModel):
    """Named fields in declaration order."""

    model_config = {"frozen": True, "extra": "forbid"}

    kind: Literal["struct"] = "struct"
    fields: list[tuple[str, str]] = Field(default_factory=list)

    @field_validator("fields", mode="before")
    @classmethod
    def _fields_as_pairs(cls, value: Any) -> Any:
        return _as_pairs(value)


class EnumDefinition(BaseModel):
    """Variants in declaration order; each variant carries one payload type."""

    model_config = {"frozen": True, "extra": "forbid"}

    kind: Literal["enum"] = "enum"
    variants: list[tuple[str, str]] = Field(default_factory=list)

    @field_validator("variants", mode="before")
    @classmethod
    def _variants_as_pairs(cls, value: Any) -> Any:
        return _as_pairs(value)


Definition = Annotated[StructDefinition | EnumDefinition, Field(discriminator="kind")]


class SchemaContainer(BaseModel):
    """Type name -> definition, in declaration order."""

    model_config = {"extra": "forbid"}

    types: dict[str, Definition] = Field(default_factory=dict)

    def declare_struct(self, name: str, fields: Members = ()) -> Self:
        """Register (or replace) a struct definition."""
        self.types[name] = StructDefinition(fields=list(_as_pairs(fields)))
        return self

    def declare_enum(self, name: str, variants: Members = ()) -> Self:
        """Register (or replace) an enum definition."""
        self.types[name] = EnumDefinition(variants=list(_as_pairs(variants)))
        return self

    def get(self, name: str) -> StructDefinition | EnumDefinition | None:
        return self.types.get(name)

    def names(self) -> list[str]:
        return list(self.types)

    def __contains__(self, name: object) -> bool:
        return name in self.types

    def check_names(self, names: Iterable[str] | None = None) -> None:
        """Check that *names* (default: every type) can be emitted as TypeScript.

        Type names must be identifiers that shadow neither a primitive
        spelling nor a name the preamble declares.  Member names must be
        identifiers, unique within their type, and no enum variant may be
        called ``enum`` (the base class stores the active tag there).
        Names absent from the container are skipped.

        Raises:
            InvalidName: The first offending name.
        """
        for name in self.names() if names is None else names:
            definition = self.types.get(name)
            if definition is not None:
                _check_definition(name, definition)


def _check_type_name(name: str) -> None:
    if not IDENTIFIER_RE.fullmatch(name):
        raise InvalidName(name, "type names must be identifiers")
    if name in PRIMITIVE_ALIASES:
        raise InvalidName(name, "shadows a primitive type")
    if name in PREAMBLE_NAMES:
        raise InvalidName(name, "clashes with a name declared by the generated preamble")
    if name in _TS_RESERVED:
        raise InvalidName(name, "is a TypeScript reserved word")


def _check_definition(name: str, definition: StructDefinition | EnumDefinition) -> None:
    _check_type_name(name)
    if isinstance(definition, EnumDefinition):
        members = definition.variants
    else:
        members = definition.fields
    seen: set[str] = set()
    for member, _declaration in members:
        if not IDENTIFIER_RE.fullmatch(member):
            raise InvalidName(member, "member names must be identifiers", owner=name)
        if member in seen:
            raise InvalidName(member, "declared more than once", owner=name)
        if isinstance(definition, EnumDefinition) and member == "enum":
            raise InvalidName(member, "reserved for the active variant tag", owner=name)
        seen.add(member)
