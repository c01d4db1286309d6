"""uni CLI - Main entry point.

This is the main entry point for the uni CLI. It uses the UniCLI facade
from uni.cli which delegates to modular handlers.
"""

import logging
import sys

from uni.branding import console, uni_print
from uni.config import load_config
from uni.exceptions import ConfigError

# Suppress noisy log messages
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)


def show_rich_help():
    """Show rich help when no command is provided."""
    from rich.markdown import Markdown
    from rich.panel import Panel

    help_text = """
# uni

**The Universal Package Manager Wrapper**

## Usage
```bash
uni <command> [args...]
uni init <manager>
uni --pkg=<manager> <command> [args...]
```

## Commands
- `install`, `add`, `i`    - Install packages
- `uninstall`, `rm`, `un`  - Remove packages
- `search`, `s`            - Search for packages using official APIs or local commands
- `x`, `exec`              - Run a package binary without installing it
- `init`                   - Initialize a new project with a specific manager
- `which`                  - Show which manager would be used here
- `managers`               - List supported managers
- `run`, ...               - Any other command is passed through (e.g., `uni run dev`)

## Examples
```bash
uni install fastify      # Automatically uses npm/pnpm/yarn/bun
uni search react         # Search for 'react' using the detected manager's API
uni --pkg=brew s git     # Search for 'git' using Homebrew's local command
```
"""
    console.print(Panel(Markdown(help_text), title="uni", border_style="cyan"))


def main(argv: list[str] | None = None) -> int:
    """Main entry point for uni CLI."""
    from uni.cli import UniCLI

    args = UniCLI.parse_args(sys.argv[1:] if argv is None else argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        show_rich_help()
        return 0

    try:
        config = load_config()
    except ConfigError as e:
        uni_print(f"Error: {e}", "error")
        return 1

    cli = UniCLI(verbose=args.verbose, dry_run=args.dry_run, config=config)
    try:
        return cli.dispatch(args)
    except KeyboardInterrupt:
        console.print("\nInterrupted")
        return 130


if __name__ == "__main__":
    sys.exit(main() or 0)
