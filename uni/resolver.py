"""
Package manager resolution.

Picks exactly one manager for the current invocation. Precedence, highest
first:

1. explicit override (``--pkg`` / ``UNI_PKG``)
2. ``.unirc`` marker file naming a registered manager
3. lock files (and project descriptor files) in the working directory
4. the system manager, if its executable is on PATH
5. the configured fallback manager

Only an unknown explicit override can make resolution fail.
"""

import logging
import os
import shutil
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from uni.exceptions import UnsupportedManager
from uni.marker import MARKER_FILE, read_marker
from uni.registry import (
    DEFAULT_MANAGER,
    SYSTEM_MANAGER,
    ManagerProfile,
    all_profiles,
    lookup,
)

logger = logging.getLogger(__name__)


class ResolutionSource(Enum):
    OVERRIDE = "override"
    MARKER = "marker"
    LOCK_FILE = "lock file"
    SYSTEM = "system"
    DEFAULT = "default"


@dataclass(frozen=True)
class ResolutionContext:
    """Inputs for a single resolution call."""

    override: str | None = None
    marker: str | None = None
    files: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def from_directory(cls, directory: Path | str, override: str | None = None) -> "ResolutionContext":
        directory = Path(directory)
        try:
            files = frozenset(os.listdir(directory))
        except OSError as e:
            logger.debug("Cannot list %s: %s", directory, e)
            files = frozenset()
        return cls(override=override or None, marker=read_marker(directory), files=files)


@dataclass(frozen=True)
class Resolution:
    profile: ManagerProfile
    source: ResolutionSource
    detail: str = ""

    @property
    def message(self) -> str:
        if self.source is ResolutionSource.MARKER:
            return f"Found '{MARKER_FILE}' config file, using {self.profile.name}."
        if self.source is ResolutionSource.LOCK_FILE:
            return f"Found '{self.detail}' lock file, using {self.profile.name}."
        if self.source in (ResolutionSource.SYSTEM, ResolutionSource.DEFAULT):
            return (
                "No project file detected, falling back to system package manager "
                f"{self.profile.name}."
            )
        return f"Using {self.profile.name} (--pkg={self.profile.identifier})."


class Resolver:
    """Applies the resolution precedence to a ResolutionContext."""

    def __init__(self, fallback_manager: str = DEFAULT_MANAGER):
        self.fallback_manager = fallback_manager

    def resolve(self, context: ResolutionContext) -> Resolution:
        """
        Pick the manager for ``context``.

        Raises:
            UnsupportedManager: If the explicit override is not registered.
        """
        if context.override:
            resolution = Resolution(lookup(context.override), ResolutionSource.OVERRIDE)
            logger.debug("Resolved %s from override", resolution.profile.identifier)
            return resolution

        resolution = (
            self._from_marker(context)
            or self._from_lock_files(context)
            or self._from_system()
            or Resolution(self._fallback(), ResolutionSource.DEFAULT)
        )
        logger.debug(
            "Resolved %s from %s", resolution.profile.identifier, resolution.source.value
        )
        return resolution

    def _from_marker(self, context: ResolutionContext) -> Resolution | None:
        if not context.marker:
            return None
        try:
            return Resolution(lookup(context.marker), ResolutionSource.MARKER, MARKER_FILE)
        except UnsupportedManager:
            logger.debug("Marker names unknown manager '%s', ignoring", context.marker)
            return None

    def _from_lock_files(self, context: ResolutionContext) -> Resolution | None:
        for profile in all_profiles():
            for name in profile.signature_files:
                if name in context.files:
                    return Resolution(profile, ResolutionSource.LOCK_FILE, name)
        return None

    def _from_system(self) -> Resolution | None:
        system = lookup(SYSTEM_MANAGER)
        if shutil.which(system.executable):
            return Resolution(system, ResolutionSource.SYSTEM, system.executable)
        return None

    def _fallback(self) -> ManagerProfile:
        try:
            return lookup(self.fallback_manager)
        except UnsupportedManager:
            logger.warning(
                "Configured fallback manager '%s' is not supported, using %s",
                self.fallback_manager,
                DEFAULT_MANAGER,
            )
            return lookup(DEFAULT_MANAGER)


def resolve_manager(
    directory: Path | str = ".",
    override: str | None = None,
    fallback_manager: str = DEFAULT_MANAGER,
) -> Resolution:
    """Build a context for ``directory`` and resolve it."""
    context = ResolutionContext.from_directory(directory, override=override)
    return Resolver(fallback_manager).resolve(context)
