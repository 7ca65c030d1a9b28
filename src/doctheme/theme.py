# topmark:header:start
#
#   project      : DocTheme
#   file         : theme.py
#   file_relpath : src/doctheme/theme.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Theme entry point: prepare a documentation context and render it.

This is the invocation contract used by documentation build orchestrators:

    ```python
    from doctheme.theme import render

    render("site/", {"data": items, "groups": {"grid": "Grid system"}})
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from doctheme.config.keys import Ctx
from doctheme.config.logging import get_logger
from doctheme.prepare import prepare_context
from doctheme.rendering.renderer import ThemeRenderer

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from doctheme.config.logging import DocthemeLogger
    from doctheme.rendering.renderer import RenderResult

logger: DocthemeLogger = get_logger(__name__)


def render(
    dest: Path | str,
    ctx: Mapping[str, Any],
    *,
    jobs: int = 1,
    theme_dir: Path | None = None,
) -> RenderResult:
    """Prepare ``ctx`` and render the theme into ``dest``.

    Args:
        dest (Path | str): Output directory.
        ctx (Mapping[str, Any]): Raw documentation context; not mutated.
        jobs (int): Number of pages rendered concurrently.
        theme_dir (Path | None): Alternative theme directory (``views/`` + ``assets/``).

    Returns:
        RenderResult: The copied assets directory and written pages.
    """
    prepared: dict[str, Any] = prepare_context(ctx)
    logger.info("Rendering %d documentation item(s) into %s", len(prepared[Ctx.RAW_DATA]), dest)
    return ThemeRenderer(theme_dir).render(dest, prepared, jobs=jobs)
