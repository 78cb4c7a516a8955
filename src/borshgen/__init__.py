"""borshgen — Borsh schema to TypeScript class and SCHEMA table generator.

Library usage::

    from borshgen import SchemaContainer, build_layouts, generate_output

    container = SchemaContainer().declare_struct("Point", {"x": "u32", "y": "u32"})
    generate_output(build_layouts(container), "generated")
"""

from __future__ import annotations

from borshgen.domain.container import SchemaContainer
from borshgen.domain.errors import (
    InvalidName,
    LayoutError,
    MalformedDeclaration,
    MalformedUnion,
    UnresolvedReference,
    UnsupportedPrimitive,
)
from borshgen.domain.layout import build_layouts, parse_declaration
from borshgen.domain.types import Field, Layout, LayoutKind
from borshgen.emit.typescript import TypeScriptEmitter
from borshgen.services.generate import generate_output

__version__ = "0.1.0"

__all__ = [
    "Field",
    "InvalidName",
    "Layout",
    "LayoutError",
    "LayoutKind",
    "MalformedDeclaration",
    "MalformedUnion",
    "SchemaContainer",
    "TypeScriptEmitter",
    "UnresolvedReference",
    "UnsupportedPrimitive",
    "__version__",
    "build_layouts",
    "generate_output",
    "parse_declaration",
]
