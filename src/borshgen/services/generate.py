"""GenerateService — container file to ``schema.ts``.

The pipeline is: load container -> :func:`build_layouts` -> render with
:class:`TypeScriptEmitter` -> :func:`generate_output` writes one file.
Domain and I/O failures become ``ServiceResult`` errors here; the pure
:func:`generate_output` helper lets ``OSError`` through untouched for
library callers.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from jinja2 import TemplateError

from borshgen.config.models import GeneratorConfig
from borshgen.domain.container import SchemaContainer
from borshgen.domain.errors import LayoutError
from borshgen.domain.layout import build_layouts
from borshgen.domain.types import Layout
from borshgen.emit.typescript import TypeScriptEmitter
from borshgen.infrastructure.filesystem import write_generated_file
from borshgen.infrastructure.loaders import ContainerLoadError, load_container
from borshgen.services.base import BaseService
from borshgen.services.result import ServiceResult

logger = logging.getLogger(__name__)


def generate_output(
    layouts: Sequence[Layout],
    output_directory: Path | str,
    *,
    config: GeneratorConfig | None = None,
    project_root: Path | None = None,
) -> Path:
    """Render *layouts* and write them to ``output_directory/schema.ts``.

    Creates the directory tree if needed and overwrites any existing file.
    Returns the written path.  ``OSError`` from directory creation or the
    write propagates unmodified.
    """
    config = config or GeneratorConfig()
    text = TypeScriptEmitter(config, project_root=project_root).render_document(layouts)
    path = write_generated_file(Path(output_directory), config.output_filename, text)
    logger.info("Wrote %d layout(s) to %s", len(layouts), path)
    return path


class GenerateService(BaseService):
    """Build layouts from a schema container and emit TypeScript."""

    def generate(
        self,
        container: SchemaContainer | Path,
        *,
        roots: Iterable[str] | None = None,
        output_dir: Path | str | None = None,
    ) -> ServiceResult:
        """Generate ``schema.ts`` for *roots* (all declared types when None)."""
        op = "generate"
        loaded = self._load(op, container)
        if isinstance(loaded, ServiceResult):
            return loaded
        layouts = self._build(op, loaded, roots)
        if isinstance(layouts, ServiceResult):
            return layouts

        target = self._output_dir(output_dir)
        try:
            path = generate_output(
                layouts,
                target,
                config=self._settings.generator,
                project_root=self._settings.project_root,
            )
        except TemplateError as exc:
            return ServiceResult.failure(op, "TEMPLATE_ERROR", str(exc))
        except OSError as exc:
            return ServiceResult.failure(op, "IO_ERROR", str(exc), output_dir=str(target))

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "output_path": str(path),
                "layout_count": len(layouts),
                "layouts": [layout.name for layout in layouts],
            },
            warnings=_unreachable_warnings(loaded, layouts),
        )

    def inspect(
        self,
        container: SchemaContainer | Path,
        *,
        roots: Iterable[str] | None = None,
    ) -> ServiceResult:
        """Resolve layouts without emitting anything."""
        op = "layouts"
        loaded = self._load(op, container)
        if isinstance(loaded, ServiceResult):
            return loaded
        layouts = self._build(op, loaded, roots)
        if isinstance(layouts, ServiceResult):
            return layouts
        return ServiceResult(
            ok=True,
            op=op,
            data={"layouts": [layout.model_dump(mode="json") for layout in layouts]},
            warnings=_unreachable_warnings(loaded, layouts),
        )

    def _load(self, op: str, container: SchemaContainer | Path) -> SchemaContainer | ServiceResult:
        if isinstance(container, SchemaContainer):
            return container
        try:
            return load_container(self._settings.resolve_path(container))
        except ContainerLoadError as exc:
            return ServiceResult.failure(op, exc.code, str(exc), path=str(exc.path))

    def _build(
        self,
        op: str,
        container: SchemaContainer,
        roots: Iterable[str] | None,
    ) -> list[Layout] | ServiceResult:
        try:
            return build_layouts(container, roots)
        except LayoutError as exc:
            logger.debug("Layout construction failed: %s", exc.message)
            return ServiceResult.failure(op, exc.code, exc.message, **exc.detail)


def _unreachable_warnings(container: SchemaContainer, layouts: Sequence[Layout]) -> list[str]:
    emitted = {layout.name for layout in layouts}
    skipped = [name for name in container.names() if name not in emitted]
    if not skipped:
        return []
    return [f"Declared but not reachable from the requested roots: {', '.join(skipped)}"]
