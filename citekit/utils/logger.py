"""Logging setup for citekit.

Library modules log through ``logging.getLogger(__name__)``; everything lands
under the ``citekit`` logger configured here once, at CLI startup.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from citekit.api.config.CitekitConfig import CitekitConfig

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(config: CitekitConfig | None = None) -> None:
    """Attach a rotating file handler and a stderr handler for warnings to the ``citekit`` logger."""
    global _CONFIGURED
    if _CONFIGURED:
        return

    if config is None:
        from citekit.api.config.CitekitConfig import CitekitConfig

        config = CitekitConfig.load()

    log_path = config.log_path
    log_path.parent.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger("citekit")
    root_logger.setLevel(config.log.level)
    formatter = logging.Formatter(LOG_FORMAT)

    file_handler = RotatingFileHandler(log_path, maxBytes=config.log.max_bytes, backupCount=config.log.backup_count)
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    stderr_handler = logging.StreamHandler()
    stderr_handler.setLevel(logging.WARNING)
    stderr_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    root_logger.addHandler(stderr_handler)

    _CONFIGURED = True

