"""Reading and writing the per-directory ``.unirc`` marker file."""

import logging
from pathlib import Path

from uni.registry import lookup

logger = logging.getLogger(__name__)

MARKER_FILE = ".unirc"


def read_marker(directory: Path) -> str | None:
    """Return the stripped marker contents, or None if missing or unreadable."""
    marker = Path(directory) / MARKER_FILE
    try:
        return marker.read_text(encoding="utf-8").strip()
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Ignoring unreadable marker %s: %s", marker, e)
        return None


def write_marker(directory: Path, identifier: str) -> Path:
    """
    Record ``identifier`` as the manager for ``directory``.

    Raises:
        UnsupportedManager: If the identifier is not registered.
    """
    lookup(identifier)
    marker = Path(directory) / MARKER_FILE
    marker.write_text(identifier, encoding="utf-8")
    logger.debug("Wrote %s -> %s", marker, identifier)
    return marker
