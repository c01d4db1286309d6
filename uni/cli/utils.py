"""Helpers shared by the CLI handlers."""

import argparse
import os

from uni.branding import uni_print
from uni.config import UniConfig
from uni.registry import ManagerProfile
from uni.resolver import ResolutionSource, resolve_manager


def resolve_profile(args: argparse.Namespace, config: UniConfig) -> ManagerProfile:
    """
    Resolve the manager for the current directory and announce how it was found.

    Raises:
        UnsupportedManager: If ``--pkg`` names an unknown manager.
    """
    resolution = resolve_manager(
        os.getcwd(),
        override=getattr(args, "pkg", None),
        fallback_manager=config.fallback_manager,
    )
    if resolution.source is not ResolutionSource.OVERRIDE:
        uni_print(resolution.message, "warning")
    return resolution.profile


def usage_error(usage: str) -> int:
    uni_print(f"Usage: {usage}", "error")
    return 1
