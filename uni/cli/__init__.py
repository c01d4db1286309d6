"""uni CLI - Main package.

This module provides the UniCLI facade. Each command is delegated to a
handler; commands uni does not know are passed through to the resolved
package manager.
"""

import argparse
import logging
import os

from uni.branding import VERSION, uni_print
from uni.cli.handlers import (
    ExecHandler,
    InfoHandler,
    InitHandler,
    PackageHandler,
    SearchHandler,
)
from uni.config import UniConfig
from uni.exceptions import ExecutableNotFound, UniError

logger = logging.getLogger(__name__)


class UniCLI:
    """Facade class for uni CLI - delegates to modular handlers."""

    def __init__(self, verbose: bool = False, dry_run: bool = False, config: UniConfig | None = None):
        self.verbose = verbose
        self.config = config or UniConfig()
        options = {"verbose": verbose, "dry_run": dry_run, "config": self.config}
        self._package_handler = PackageHandler(**options)
        self._search_handler = SearchHandler(**options)
        self._exec_handler = ExecHandler(**options)
        self._init_handler = InitHandler(**options)
        self._info_handler = InfoHandler(**options)

    # Delegate methods to handlers

    def forward(self, args: argparse.Namespace) -> int:
        """Handle install, uninstall and pass-through commands."""
        return self._package_handler.forward(args)

    def search(self, args: argparse.Namespace) -> int:
        """Handle search command."""
        return self._search_handler.search(args)

    def exec(self, args: argparse.Namespace) -> int:
        """Handle x/exec command."""
        return self._exec_handler.exec(args)

    def init(self, args: argparse.Namespace) -> int:
        """Handle init command."""
        return self._init_handler.init(args)

    def which(self, args: argparse.Namespace) -> int:
        """Handle which command."""
        return self._info_handler.which(args)

    def managers(self, args: argparse.Namespace) -> int:
        """Handle managers command."""
        return self._info_handler.managers(args)

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create the argument parser for the global options.

        The command and its arguments are not parsed here, see parse_args.
        """
        parser = argparse.ArgumentParser(
            prog="uni",
            usage="uni [options] <command> [args...]",
            description="The Universal Package Manager Wrapper",
            allow_abbrev=False,
        )
        parser.add_argument(
            "--pkg",
            metavar="MANAGER",
            default=os.environ.get("UNI_PKG") or None,
            help="Use this package manager instead of detecting one",
        )
        parser.add_argument(
            "--dry-run", action="store_true", help="Print commands instead of running them"
        )
        parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose output")
        parser.add_argument("--version", "-V", action="version", version=f"uni {VERSION}")
        return parser

    @classmethod
    def parse_args(cls, argv: list[str]) -> argparse.Namespace:
        """Parse global options, then hand the command and its arguments over verbatim.

        Global options must come before the command. Everything from the
        command onwards, including any ``--`` separator, is kept as typed so
        manager flags pass through.
        """
        index = 0
        while index < len(argv):
            token = argv[index]
            if token == "--":
                index += 1
                break
            if token == "--pkg":
                index += 2
            elif token.startswith("-") and token != "-":
                index += 1
            else:
                break

        head = [token for token in argv[:index] if token != "--"]
        args = cls.create_parser().parse_args(head)
        tail = argv[index:]
        args.command = tail[0] if tail else None
        args.args = tail[1:]
        return args

    def dispatch(self, args: argparse.Namespace) -> int:
        """Dispatch command to appropriate handler.

        Returns exit code (0 for success, 1 for failure, or the package
        manager's own exit code).
        """
        command = args.command

        command_handlers = {
            "search": self.search,
            "s": self.search,
            "x": self.exec,
            "exec": self.exec,
            "init": self.init,
            "which": self.which,
            "managers": self.managers,
        }
        handler = command_handlers.get(command, self.forward)
        logger.debug("Dispatching %r to %s", command, handler.__name__)

        try:
            return handler(args)
        except ExecutableNotFound as e:
            uni_print(f"Error: {e}.", "error")
            if e.hint:
                uni_print(f"Hint: {e.hint}", "warning")
            return 1
        except UniError as e:
            uni_print(f"Error: {e}", "error")
            return 1


# Re-export main so `uni.cli:main` works as an entry point
from uni.cli_main import main as main  # noqa: E402

__all__ = ["UniCLI", "main"]
