"""Exec command handler for uni CLI."""

import argparse

from uni.cli.utils import resolve_profile, usage_error
from uni.config import UniConfig
from uni.dispatcher import Dispatcher


class ExecHandler:
    """Handler for x/exec command."""

    def __init__(self, verbose: bool = False, dry_run: bool = False, config: UniConfig | None = None):
        self.verbose = verbose
        self.config = config or UniConfig()
        self.dispatcher = Dispatcher(dry_run=dry_run)

    def exec(self, args: argparse.Namespace) -> int:
        """Run a package binary without installing it (npx, bunx, dlx...)."""
        if not args.args:
            return usage_error("uni x <command> [args...]")
        profile = resolve_profile(args, self.config)
        return self.dispatcher.exec(profile, args.args)
