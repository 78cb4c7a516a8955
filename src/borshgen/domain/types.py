"""Type descriptors, fields, and layouts.

A :class:`Layout` is the normalized, order-preserving description of one
declared type.  Field order is load-bearing: it is the Borsh wire order and
the generated constructor order.

``TypeDescriptor`` is a closed discriminated union.  Composite descriptors
own their children structurally; :class:`TypeRef` points at another Layout
by name only, so mutually recursive declarations never build a cyclic
object graph.

INVARIANT: Layouts are frozen. They are built once and never mutated.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, Field as PydanticField


class Primitive(StrEnum):
    """Scalar types with a fixed Borsh wire representation."""

    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    U128 = "u128"
    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    I128 = "i128"
    BOOL = "bool"
    STRING = "string"
    PUBKEY = "pubkey"


# Declaration spellings of each primitive.
PRIMITIVE_ALIASES: dict[str, Primitive] = {
    **{primitive.value: primitive for primitive in Primitive},
    "String": Primitive.STRING,
    "Pubkey": Primitive.PUBKEY,
    "PublicKey": Primitive.PUBKEY,
}


class LayoutKind(StrEnum):
    """Declared type kinds."""

    STRUCT = "struct"
    ENUM = "enum"


class PrimitiveType(BaseModel):
    model_config = {"frozen": True}

    kind: Literal["primitive"] = "primitive"
    name: Primitive


class FixedArrayType(BaseModel):
    """Exactly ``length`` elements, no length prefix on the wire."""

    model_config = {"frozen": True}

    kind: Literal["fixed_array"] = "fixed_array"
    element: TypeDescriptor
    length: int = PydanticField(ge=0)


class SequenceType(BaseModel):
    """Variable-length list, u32 length prefix on the wire."""

    model_config = {"frozen": True}

    kind: Literal["sequence"] = "sequence"
    element: TypeDescriptor


class OptionType(BaseModel):
    model_config = {"frozen": True}

    kind: Literal["option"] = "option"
    inner: TypeDescriptor


class MapType(BaseModel):
    model_config = {"frozen": True}

    kind: Literal["map"] = "map"
    key: TypeDescriptor
    value: TypeDescriptor


class TypeRef(BaseModel):
    """Reference to another declared Layout, resolved by name at emission."""

    model_config = {"frozen": True}

    kind: Literal["ref"] = "ref"
    name: str


TypeDescriptor = Annotated[
    PrimitiveType | FixedArrayType | SequenceType | OptionType | MapType | TypeRef,
    PydanticField(discriminator="kind"),
]

FixedArrayType.model_rebuild()
SequenceType.model_rebuild()
OptionType.model_rebuild()
MapType.model_rebuild()


def iter_references(descriptor: TypeDescriptor) -> Iterator[str]:
    """Yield referenced type names depth-first, left to right."""
    match descriptor:
        case TypeRef(name=name):
            yield name
        case FixedArrayType(element=element) | SequenceType(element=element):
            yield from iter_references(element)
        case OptionType(inner=inner):
            yield from iter_references(inner)
        case MapType(key=key, value=value):
            yield from iter_references(key)
            yield from iter_references(value)
        case _:
            return


class Field(BaseModel):
    """One named field (or, for enums, one variant and its payload type)."""

    model_config = {"frozen": True}

    name: str
    type: TypeDescriptor


class Layout(BaseModel):
    """Normalized description of one declared struct or enum.

    For :attr:`LayoutKind.ENUM` each field is a variant.  Exactly one
    variant is active at runtime; that rule is enforced by the emitted
    ``Enum`` base class, not here.
    """

    model_config = {"frozen": True}

    name: str
    kind: LayoutKind
    fields: tuple[Field, ...] = ()

    @property
    def is_enum(self) -> bool:
        return self.kind is LayoutKind.ENUM

    def references(self) -> Iterator[str]:
        """Yield every referenced type name in field order (may repeat)."""
        for field in self.fields:
            yield from iter_references(field.type)
