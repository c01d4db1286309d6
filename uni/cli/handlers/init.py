"""Init command handler for uni CLI."""

import argparse
import os

from uni.branding import uni_print
from uni.cli.utils import usage_error
from uni.config import UniConfig
from uni.dispatcher import Dispatcher
from uni.marker import MARKER_FILE, write_marker
from uni.registry import ManagerProfile, identifiers, lookup


class InitHandler:
    """Handler for init command."""

    def __init__(self, verbose: bool = False, dry_run: bool = False, config: UniConfig | None = None):
        self.verbose = verbose
        self.config = config or UniConfig()
        self.dry_run = dry_run
        self.dispatcher = Dispatcher(dry_run=dry_run)

    def init(self, args: argparse.Namespace) -> int:
        """Record the manager for this directory and run its own init command."""
        if len(args.args) != 1:
            return usage_error(f"uni init <{'|'.join(identifiers())}>")

        identifier = args.args[0]
        profile = lookup(identifier)
        uni_print(f"Initializing new {profile.name} project...", "success")
        if self.dry_run:
            uni_print(f"[Dry Run] would write '{identifier}' to {MARKER_FILE}", "info")
            return self._run_init_args(profile)
        try:
            write_marker(os.getcwd(), identifier)
        except OSError as e:
            uni_print(f"Failed to write {MARKER_FILE} file: {e}", "error")
            return 1
        uni_print(f"Created '{MARKER_FILE}' to use {profile.name} in this directory.", "success")
        return self._run_init_args(profile)

    def _run_init_args(self, profile: ManagerProfile) -> int:
        if not profile.init_args:
            return 0
        uni_print(f"Running '{profile.executable} {' '.join(profile.init_args)}'...", "info")
        return self.dispatcher.execute(profile, profile.init_args)
