"""Local file storage helpers."""

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


def delete_directory(root: Path, directory: str) -> bool:
    """Recursively delete *directory* under the storage *root*.

    Returns False when the directory does not exist, True once it has been
    removed.  Errors other than a missing directory propagate.
    """
    target = Path(root) / directory
    if not target.is_dir():
        logger.debug("Storage directory %s does not exist; nothing to clear", target)
        return False

    shutil.rmtree(target)
    logger.info("Cleared storage directory %s", target)
    return True
