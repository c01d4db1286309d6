"""Which and managers command handlers for uni CLI."""

import argparse
import os
import shutil

from rich.table import Table

from uni.branding import console, uni_header, uni_print
from uni.config import UniConfig
from uni.resolver import resolve_manager
from uni.registry import all_profiles


class InfoHandler:
    """Handler for commands that report on managers without running them."""

    def __init__(self, verbose: bool = False, dry_run: bool = False, config: UniConfig | None = None):
        self.verbose = verbose
        self.config = config or UniConfig()

    def which(self, args: argparse.Namespace) -> int:
        """Show which manager would be used here and why."""
        resolution = resolve_manager(
            os.getcwd(),
            override=getattr(args, "pkg", None),
            fallback_manager=self.config.fallback_manager,
        )
        profile = resolution.profile
        console.print(f"[bold]{profile.name}[/bold] ({profile.identifier})")
        uni_print(resolution.message, "info")
        if not shutil.which(profile.executable):
            uni_print(f"{profile.executable} is not on your PATH. Hint: {profile.installation_hint}", "warning")
        return 0

    def managers(self, args: argparse.Namespace) -> int:
        """List supported package managers."""
        uni_header("Supported Package Managers")
        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("ID")
        table.add_column("Name")
        table.add_column("Lock files", style="dim")
        table.add_column("Search")
        table.add_column("Status")

        for profile in all_profiles():
            table.add_row(
                profile.identifier,
                profile.name,
                ", ".join(profile.signature_files) or "-",
                "API" if profile.search_api_support else "CLI",
                "[green]Available[/green]" if shutil.which(profile.executable) else "[dim]Not Found[/dim]",
            )

        console.print(table)
        return 0
