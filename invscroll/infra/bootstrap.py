"""Process bootstrap for hosts embedding the scroll helper."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from invscroll.infra.config import load_default_env_files
from invscroll.infra.logging import setup_logging
from invscroll.runtime.config import HelperConfig, initialize_helper_config

logger = logging.getLogger(__name__)


def initialize(*, env_files: Sequence[str] | None = None) -> HelperConfig:
    """Load env files, install logging and activate helper configuration.

    Call once at host startup, before the first `ContainerScreenHelper` is
    created. Returns the active configuration.
    """
    load_default_env_files(paths=env_files)
    setup_logging()
    config = initialize_helper_config()
    logger.info(
        "helper_config directional_scrolling=%s hotbar_scoping=%s",
        config.scrolling.directional_scrolling,
        config.general.hotbar_scoping,
    )
    return config
