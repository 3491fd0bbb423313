"""Global magazine config and style baseline, read once at startup."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError

from periodical.content.sources import read_json_object
from periodical.errors import MalformedError, NotFoundError
from periodical.models.theme import GlobalConfig, GlobalStyle, SiteContent

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def load_site_content(global_dir: Path) -> SiteContent:
    """Load ``config.json`` and ``styles.json`` from ``global_dir``.

    Both files are required; a missing or invalid file aborts startup.
    """
    config_data = read_json_object(global_dir / "config.json")
    style_data = read_json_object(global_dir / "styles.json")
    if config_data is None:
        raise NotFoundError(f"Missing {global_dir / 'config.json'}")
    if style_data is None:
        raise NotFoundError(f"Missing {global_dir / 'styles.json'}")
    try:
        site = SiteContent(
            config=GlobalConfig.model_validate(config_data),
            style=GlobalStyle.model_validate(style_data),
        )
    except ValidationError as exc:
        raise MalformedError(f"Invalid global content in {global_dir}: {exc}") from exc
    logger.info("Loaded global content for %s", site.config.magazine_name)
    return site
