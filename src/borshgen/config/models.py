"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, borshgen.toml only contains
overrides.  A project needs no config file at all.
"""

from __future__ import annotations

from pydantic import BaseModel


class GeneratorConfig(BaseModel):
    """[generator] section."""

    model_config = {"frozen": True}

    output_dir: str = "generated"
    output_filename: str = "schema.ts"
    typed_fields: bool = False
    pubkey_module: str = "@velas/web3"

