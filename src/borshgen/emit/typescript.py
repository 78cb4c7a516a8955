"""TypeScript emitter for the borsh-js 0.7 runtime.

Renders each :class:`Layout` twice: once as a class declaration routed
through the ``Struct`` or ``Enum`` base, once as an entry of the ``SCHEMA``
map that ``borsh.serialize``/``borsh.deserialize`` walk.  Both renderings
keep Layout field order, which is the wire order.

Type references are emitted by class name only; the generated classes never
inline referenced structure, so declaration order between classes does not
matter.  The shared preamble always precedes every class.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from borshgen.config.models import GeneratorConfig
from borshgen.domain.types import (
    FixedArrayType,
    Layout,
    MapType,
    OptionType,
    Primitive,
    PrimitiveType,
    SequenceType,
    TypeDescriptor,
    TypeRef,
)
from borshgen.infrastructure.templates import build_template_environment

TEMPLATE_GROUP = "typescript"

# Schema names that differ from the primitive name.  borsh-js 0.7 has no bool
# reader (a bool is one 0/1 byte, same as u8) and dispatches PublicKey through
# the methods patched on in the preamble.  Signed integers keep their names;
# the preamble patches ``readI*``/``writeI*`` onto the reader and writer.
_SCHEMA_NAMES: dict[Primitive, str] = {
    Primitive.BOOL: "u8",
    Primitive.PUBKEY: "publicKeyHack",
}

_TS_PRIMITIVES: dict[Primitive, str] = {
    Primitive.U8: "number",
    Primitive.U16: "number",
    Primitive.U32: "number",
    Primitive.I8: "number",
    Primitive.I16: "number",
    Primitive.I32: "number",
    Primitive.U64: "BN",
    Primitive.U128: "BN",
    Primitive.I64: "BN",
    Primitive.I128: "BN",
    Primitive.BOOL: "number",
    Primitive.STRING: "string",
    Primitive.PUBKEY: "PublicKey",
}

_BYTE = PrimitiveType(name=Primitive.U8)


def schema_type(descriptor: TypeDescriptor) -> str:
    """Render *descriptor* in the borsh-js schema vocabulary."""
    match descriptor:
        case PrimitiveType(name=name):
            return f"'{_SCHEMA_NAMES.get(name, name.value)}'"
        case FixedArrayType(element=element, length=length) if element == _BYTE:
            return f"[{length}]"
        case FixedArrayType(element=element, length=length):
            return f"[{schema_type(element)}, {length}]"
        case SequenceType(element=element):
            return f"[{schema_type(element)}]"
        case OptionType(inner=inner):
            return f"{{ kind: 'option', type: {schema_type(inner)} }}"
        case MapType(key=key, value=value):
            return f"{{ kind: 'map', key: {schema_type(key)}, value: {schema_type(value)} }}"
        case TypeRef(name=name):
            return name
    msg = f"Unknown type descriptor: {descriptor!r}"
    raise TypeError(msg)


def typescript_type(descriptor: TypeDescriptor) -> str:
    """Render the TypeScript type a decoded value of *descriptor* has."""
    match descriptor:
        case PrimitiveType(name=name):
            return _TS_PRIMITIVES[name]
        case FixedArrayType(element=element) if element == _BYTE:
            return "Uint8Array"
        case FixedArrayType(element=element) | SequenceType(element=element):
            inner = typescript_type(element)
            return f"({inner})[]" if " " in inner else f"{inner}[]"
        case OptionType(inner=inner):
            return f"{typescript_type(inner)} | undefined"
        case MapType(key=key, value=value):
            return f"Map<{typescript_type(key)}, {typescript_type(value)}>"
        case TypeRef(name=name):
            return name
    msg = f"Unknown type descriptor: {descriptor!r}"
    raise TypeError(msg)


class TypeScriptEmitter:
    """Render layouts into one ``schema.ts`` document.

    Rendering is deterministic: identical layouts and config produce
    byte-identical text.
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        *,
        project_root: Path | None = None,
    ) -> None:
        self._config = config or GeneratorConfig()
        self._env = build_template_environment(TEMPLATE_GROUP, project_root=project_root)

    def render_schema_entry(self, layout: Layout) -> str:
        """Render the ``[Class, { kind, fields|values }]`` SCHEMA entry."""
        template = self._env.get_template("schema_entry.ts.j2")
        return template.render(
            name=layout.name,
            is_enum=layout.is_enum,
            fields=[
                {"name": field.name, "schema_type": schema_type(field.type)}
                for field in layout.fields
            ],
        )

    def render_class(self, layout: Layout) -> str:
        """Render the class declaration, extending ``Enum`` or ``Struct``."""
        template = self._env.get_template("class.ts.j2")
        typed = self._config.typed_fields
        return template.render(
            name=layout.name,
            base="Enum" if layout.is_enum else "Struct",
            optional=layout.is_enum,
            fields=[
                {"name": field.name, "ts_type": typescript_type(field.type) if typed else "any"}
                for field in layout.fields
            ],
        )

    def render_document(self, layouts: Sequence[Layout]) -> str:
        """Render preamble, every class, then the SCHEMA map, in layout order."""
        template = self._env.get_template("schema.ts.j2")
        return template.render(
            pubkey_module=self._config.pubkey_module,
            classes=[self.render_class(layout) for layout in layouts],
            entries=[self.render_schema_entry(layout) for layout in layouts],
        )
