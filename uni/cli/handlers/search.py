"""Search command handler for uni CLI."""

import argparse

from uni.cli.utils import resolve_profile, usage_error
from uni.config import UniConfig
from uni.dispatcher import Dispatcher
from uni.search import Searcher


class SearchHandler:
    """Handler for search command."""

    def __init__(self, verbose: bool = False, dry_run: bool = False, config: UniConfig | None = None):
        self.verbose = verbose
        self.config = config or UniConfig()
        self.searcher = Searcher(
            dispatcher=Dispatcher(dry_run=dry_run),
            timeout=self.config.http_timeout,
            limit=self.config.search_limit,
        )

    def search(self, args: argparse.Namespace) -> int:
        """Search packages with the manager's API, or its own search command."""
        if not args.args:
            return usage_error("uni search <query>")
        profile = resolve_profile(args, self.config)
        return self.searcher.search(profile, " ".join(args.args))
