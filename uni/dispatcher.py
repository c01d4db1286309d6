"""
Verb translation and subprocess dispatch.

Maps the manager-agnostic verbs (install, uninstall, exec) onto a
ManagerProfile's concrete command line and runs it with the invoking
process's standard streams.
"""

import logging
import shlex
import shutil
import subprocess
from collections.abc import Sequence

from uni.branding import uni_print
from uni.exceptions import ExecutableNotFound, UnsupportedOperation
from uni.registry import ExecStyle, ManagerProfile

logger = logging.getLogger(__name__)

INSTALL_ALIASES = frozenset({"install", "i", "add"})
UNINSTALL_ALIASES = frozenset({"uninstall", "remove", "rm", "un"})


def translate(profile: ManagerProfile, args: Sequence[str]) -> list[str]:
    """
    Translate a user argument vector into ``profile``'s syntax.

    Only the first argument is inspected. Install and uninstall aliases are
    replaced with the manager's verb; anything else passes through so
    manager-specific sub-commands keep working.

    Args:
        profile: The resolved package manager.
        args: Arguments as typed by the user, without the executable.

    Returns:
        list[str]: Arguments to pass to ``profile.executable``.

    Raises:
        UnsupportedOperation: If the verb has no mapping for this manager.
    """
    args = list(args)
    if not args:
        return args

    verb, rest = args[0], args[1:]
    if verb in INSTALL_ALIASES:
        if not rest and profile.install_cmd_without_args:
            return shlex.split(profile.install_cmd_without_args)
        if not profile.install_cmd:
            raise UnsupportedOperation(profile.name, "install")
        return shlex.split(profile.install_cmd) + rest

    if verb in UNINSTALL_ALIASES:
        if not profile.uninstall_cmd:
            raise UnsupportedOperation(profile.name, "uninstall")
        return shlex.split(profile.uninstall_cmd) + rest

    return args


def exec_command(profile: ManagerProfile, args: Sequence[str]) -> list[str]:
    """
    Build the command line for running an ad-hoc package binary.

    Raises:
        UnsupportedOperation: If the manager has no execution-prefix verb.
    """
    if not profile.execution_cmd:
        raise UnsupportedOperation(profile.name, "exec")
    if profile.exec_style is ExecStyle.JOINED:
        return [profile.executable, " ".join([profile.execution_cmd, *args])]
    return [profile.execution_cmd, *args]


class Dispatcher:
    """Runs translated commands for a resolved package manager."""

    def __init__(self, dry_run: bool = False):
        self.dry_run = dry_run

    def run(self, profile: ManagerProfile, args: Sequence[str]) -> int:
        """Translate ``args`` and run them with the manager's executable."""
        argv = translate(profile, args)
        return self.execute(profile, argv)

    def execute(self, profile: ManagerProfile, argv: Sequence[str]) -> int:
        """Run ``argv`` with the manager's executable, without translation."""
        return self._spawn(profile, [profile.executable, *argv])

    def exec(self, profile: ManagerProfile, args: Sequence[str]) -> int:
        """Run a not-installed package's binary via the execution-prefix verb."""
        cmd = exec_command(profile, args)
        uni_print(f"Executing command: {' '.join([profile.execution_cmd, *args])}", "info")
        return self._spawn(profile, cmd)

    def _spawn(self, profile: ManagerProfile, cmd: list[str]) -> int:
        cmd_str = shlex.join(cmd)
        if not shutil.which(cmd[0]):
            if not self.dry_run:
                raise ExecutableNotFound(cmd[0], profile.name, profile.installation_hint)
            uni_print(
                f"{profile.name} ({cmd[0]}) is not installed. Hint: {profile.installation_hint}",
                "warning",
            )

        if self.dry_run:
            uni_print(f"[Dry Run] would execute: {cmd_str}", "info")
            return 0

        uni_print(f"+ {cmd_str}", "command")
        logger.debug("Spawning %s", cmd)
        try:
            result = subprocess.run(cmd)
        except OSError as e:
            logger.debug("Failed to start %s: %s", cmd[0], e)
            raise ExecutableNotFound(cmd[0], profile.name, profile.installation_hint) from e

        if result.returncode != 0:
            logger.debug("%s exited with %d", cmd[0], result.returncode)
        return result.returncode
