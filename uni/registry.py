"""
Supported package managers.

Each manager is described by a ManagerProfile. The registry is an ordered
tuple; its order is the order in which lock files are scanned.
"""

from dataclasses import dataclass
from enum import Enum

from uni.exceptions import UnsupportedManager


class ExecStyle(Enum):
    """How the execution-prefix verb is combined with the user's command."""

    SEPARATE = "separate"  # npx cowsay hi
    JOINED = "joined"  # pnpm "dlx cowsay hi"


@dataclass(frozen=True)
class ManagerProfile:
    """Static metadata describing one package manager."""

    identifier: str
    name: str
    executable: str
    lock_files: tuple[str, ...] = ()
    project_files: tuple[str, ...] = ()
    init_args: tuple[str, ...] = ()
    install_cmd: str = ""
    install_cmd_without_args: str = ""
    execution_cmd: str = ""
    exec_style: ExecStyle = ExecStyle.SEPARATE
    uninstall_cmd: str = ""
    search_backend: str | None = None
    installation_hint: str = ""

    @property
    def search_api_support(self) -> bool:
        return self.search_backend is not None

    @property
    def signature_files(self) -> tuple[str, ...]:
        """Lock files followed by project descriptor files."""
        return self.lock_files + self.project_files


_PROFILES: tuple[ManagerProfile, ...] = (
    # Node
    ManagerProfile(
        identifier="npm",
        name="NPM",
        executable="npm",
        lock_files=("package-lock.json",),
        init_args=("init", "-y"),
        install_cmd="install",
        install_cmd_without_args="install",
        execution_cmd="npx",
        uninstall_cmd="uninstall",
        search_backend="npm",
        installation_hint="Install Node.js and npm from https://nodejs.org/",
    ),
    ManagerProfile(
        identifier="pnpm",
        name="PNPM",
        executable="pnpm",
        lock_files=("pnpm-lock.yaml",),
        init_args=("init",),
        install_cmd="add",
        install_cmd_without_args="install",
        execution_cmd="dlx",
        exec_style=ExecStyle.JOINED,
        uninstall_cmd="remove",
        search_backend="npm",
        installation_hint="Run: npm install -g pnpm",
    ),
    ManagerProfile(
        identifier="yarn",
        name="Yarn",
        executable="yarn",
        lock_files=("yarn.lock",),
        init_args=("init", "-y"),
        install_cmd="add",
        install_cmd_without_args="install",
        execution_cmd="dlx",
        exec_style=ExecStyle.JOINED,
        uninstall_cmd="remove",
        search_backend="npm",
        installation_hint="Run: npm install -g yarn",
    ),
    ManagerProfile(
        identifier="bun",
        name="Bun",
        executable="bun",
        lock_files=("bun.lockb", "bun.lock"),
        init_args=("init", "-y"),
        install_cmd="add",
        install_cmd_without_args="install",
        execution_cmd="bunx",
        uninstall_cmd="remove",
        search_backend="npm",
        installation_hint="Run: curl -fsSL https://bun.sh/install | bash",
    ),
    # CocoaPods
    ManagerProfile(
        identifier="pod",
        name="CocoaPods",
        executable="pod",
        lock_files=("Podfile.lock",),
        project_files=("Podfile",),
        init_args=("init",),
        install_cmd="install",
        search_backend="cocoapods",
        installation_hint="Run: sudo gem install cocoapods",
    ),
    # System package managers
    ManagerProfile(
        identifier="brew",
        name="Homebrew",
        executable="brew",
        install_cmd="install",
        uninstall_cmd="uninstall",
        search_backend="brew",
        installation_hint="Install Homebrew from https://brew.sh/",
    ),
    ManagerProfile(
        identifier="pkgx",
        name="pkgx",
        executable="pkgx",
        lock_files=("pkgx.yaml",),
        install_cmd="install",
        execution_cmd="pkgx",
        uninstall_cmd="uninstall",
        installation_hint="Run: curl -fsS https://pkgx.sh | sh",
    ),
    # Python
    ManagerProfile(
        identifier="pip",
        name="Pip",
        executable="pip",
        lock_files=("requirements.txt",),
        install_cmd="install",
        uninstall_cmd="uninstall",
        installation_hint="Install Python and pip from https://www.python.org/",
    ),
    ManagerProfile(
        identifier="pipx",
        name="Pipx",
        executable="pipx",
        lock_files=("pipx.json",),
        install_cmd="install",
        uninstall_cmd="uninstall",
        installation_hint="Run: pip install --user pipx && python -m pipx ensurepath",
    ),
    ManagerProfile(
        identifier="uv",
        name="uv",
        executable="uv",
        lock_files=("uv.lock", "pylock.toml"),
        init_args=("init",),
        install_cmd="add",
        uninstall_cmd="remove",
        installation_hint="Install uv from https://docs.astral.sh/uv",
    ),
    # Go
    ManagerProfile(
        identifier="go",
        name="Go",
        executable="go",
        lock_files=("go.mod",),
        install_cmd="get",
        uninstall_cmd="get -u",
        installation_hint="Install Go from https://golang.org/dl/",
    ),
)

_BY_ID: dict[str, ManagerProfile] = {profile.identifier: profile for profile in _PROFILES}

# System manager probed on PATH when no project signal is found
SYSTEM_MANAGER = "brew"
# Returned when nothing else matches
DEFAULT_MANAGER = "pkgx"


def lookup(identifier: str) -> ManagerProfile:
    """
    Return the profile registered under ``identifier``.

    Raises:
        UnsupportedManager: If the identifier is unknown.
    """
    try:
        return _BY_ID[identifier]
    except KeyError:
        raise UnsupportedManager(identifier) from None


def all_profiles() -> tuple[ManagerProfile, ...]:
    return _PROFILES


def identifiers() -> tuple[str, ...]:
    return tuple(profile.identifier for profile in _PROFILES)
