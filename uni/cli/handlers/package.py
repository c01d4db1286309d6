"""Install, uninstall and pass-through command handler for uni CLI."""

import argparse

from uni.branding import uni_print
from uni.cli.utils import resolve_profile
from uni.config import UniConfig
from uni.dispatcher import Dispatcher


class PackageHandler:
    """Handler for commands forwarded to the package manager."""

    def __init__(self, verbose: bool = False, dry_run: bool = False, config: UniConfig | None = None):
        self.verbose = verbose
        self.config = config or UniConfig()
        self.dispatcher = Dispatcher(dry_run=dry_run)

    def forward(self, args: argparse.Namespace) -> int:
        """Translate the command for the resolved manager and run it.

        install/i/add and uninstall/remove/rm/un are mapped onto the
        manager's own verbs; every other command is passed through as is.
        """
        profile = resolve_profile(args, self.config)
        uni_print(f"Using {profile.name}...", "info")
        return self.dispatcher.run(profile, [args.command, *args.args])
