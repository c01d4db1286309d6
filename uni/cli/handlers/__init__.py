"""uni CLI Handlers.

Modular command handlers for uni CLI.
"""

from uni.cli.handlers.exec import ExecHandler
from uni.cli.handlers.info import InfoHandler
from uni.cli.handlers.init import InitHandler
from uni.cli.handlers.package import PackageHandler
from uni.cli.handlers.search import SearchHandler

__all__ = [
    "ExecHandler",
    "InfoHandler",
    "InitHandler",
    "PackageHandler",
    "SearchHandler",
]
