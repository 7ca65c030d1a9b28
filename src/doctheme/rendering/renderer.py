# topmark:header:start
#
#   project      : DocTheme
#   file         : renderer.py
#   file_relpath : src/doctheme/rendering/renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Theme renderer: copy the assets and render the five page templates.

For a destination directory the renderer produces::

    dest/
      assets/...      (verbatim copy of the theme's assets tree)
      index.html
      grid.html
      theme.html
      view.html
      utils.html

The page renders are independent of each other; with ``jobs > 1`` they run in
a thread pool. Templates are rendered to memory before anything is written, so
a template error leaves the destination untouched. Filesystem and template
errors propagate to the caller.
"""

from __future__ import annotations

import shutil
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from doctheme.config.logging import get_logger
from doctheme.constants import (
    ASSETS_DIR_NAME,
    OUTPUT_SUFFIX,
    TEMPLATE_NAMES,
    TEMPLATE_SUFFIX,
    THEME_DIR,
    VIEWS_DIR_NAME,
)
from doctheme.rendering.engine import create_environment, partials_config

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from jinja2 import Environment

    from doctheme.config.logging import DocthemeLogger

logger: DocthemeLogger = get_logger(__name__)


@dataclass
class RenderResult:
    """Outcome of a theme render.

    Attributes:
        dest: The destination directory.
        assets_dir: Where the assets tree was copied.
        pages: The written HTML files, in template order.
    """

    dest: Path
    assets_dir: Path
    pages: list[Path] = field(default_factory=list)


class ThemeRenderer:
    """Render a prepared documentation context with a theme directory.

    Args:
        theme_dir (Path | None): Theme root holding ``views/`` and ``assets/``;
            the bundled theme when omitted.
        templates (Sequence[str]): Page template names to render.
        strict (bool): Fail on undefined template variables.
    """

    def __init__(
        self,
        theme_dir: Path | None = None,
        *,
        templates: Sequence[str] = TEMPLATE_NAMES,
        strict: bool = False,
    ) -> None:
        self.theme_dir: Path = theme_dir or THEME_DIR
        self.templates: tuple[str, ...] = tuple(templates)
        self.env: Environment = create_environment(
            self.theme_dir / VIEWS_DIR_NAME,
            strict=strict,
        )

    def render_page(self, name: str, ctx: Mapping[str, Any]) -> str:
        """Render a single page template to a string.

        Args:
            name (str): Template name, e.g. ``"index"``.
            ctx (Mapping[str, Any]): Prepared documentation context.

        Returns:
            str: The rendered HTML.
        """
        template = self.env.get_template(f"{name}{TEMPLATE_SUFFIX}")
        data: dict[str, Any] = dict(ctx)
        data.update(partials_config())
        logger.trace("Rendering template %s", template.name)
        return template.render(data)

    def copy_assets(self, dest: Path) -> Path:
        """Copy the theme's assets tree into ``dest`` and return the target path."""
        source: Path = self.theme_dir / ASSETS_DIR_NAME
        target: Path = dest / ASSETS_DIR_NAME
        shutil.copytree(source, target, dirs_exist_ok=True)
        logger.debug("Copied assets %s -> %s", source, target)
        return target

    def render(self, dest: Path | str, ctx: Mapping[str, Any], *, jobs: int = 1) -> RenderResult:
        """Copy the assets and render every page into ``dest``.

        Args:
            dest (Path | str): Destination directory (created if missing).
            ctx (Mapping[str, Any]): Prepared documentation context.
            jobs (int): Number of pages rendered concurrently.

        Returns:
            RenderResult: Paths of the copied assets and written pages.
        """
        dest = Path(dest)
        dest.mkdir(parents=True, exist_ok=True)

        if jobs > 1:
            with ThreadPoolExecutor(max_workers=jobs) as pool:
                html_pages: list[str] = list(
                    pool.map(lambda name: self.render_page(name, ctx), self.templates)
                )
        else:
            html_pages = [self.render_page(name, ctx) for name in self.templates]

        result = RenderResult(dest=dest, assets_dir=self.copy_assets(dest))
        for name, html in zip(self.templates, html_pages):
            page: Path = dest / f"{name}{OUTPUT_SUFFIX}"
            page.write_text(html, encoding="utf-8")
            result.pages.append(page)
            logger.info("Wrote %s", page)
        return result
