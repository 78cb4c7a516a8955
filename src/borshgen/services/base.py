"""BaseService — shared foundation for borshgen services.

Every service receives the resolved :class:`BorshgenSettings` at
construction time and reads paths and generator options from it.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from borshgen.config.settings import BorshgenSettings


class BaseService:
    """Base for service-layer classes.

    Usage::

        class GenerateService(BaseService):
            def generate(self, container_path: Path, ...) -> ServiceResult:
                output_dir = self._output_dir(None)
                ...
    """

    def __init__(self, settings: BorshgenSettings) -> None:
        self._settings = settings

    def _output_dir(self, override: Path | str | None) -> Path:
        """Resolve the output directory: explicit override, else config."""
        target = override if override is not None else self._settings.generator.output_dir
        return self._settings.resolve_path(target)
