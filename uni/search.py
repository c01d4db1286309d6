"""
Package search.

Managers with a search backend are queried for structured results (the npm
registry and CocoaPods search APIs over HTTP, Homebrew through its local
JSON output). Managers without one fall back to their own ``search``
sub-command.
"""

import json
import logging
import shutil
import subprocess
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import httpx
from rich.markup import escape

from uni.branding import VERSION, console, uni_print
from uni.dispatcher import Dispatcher
from uni.exceptions import ExecutableNotFound, NetworkFailed, ParseFailed, SearchError
from uni.registry import ManagerProfile, lookup

logger = logging.getLogger(__name__)

NPM_SEARCH_URL = "https://registry.npmjs.org/-/v1/search"
COCOAPODS_SEARCH_URL = "https://search.cocoapods.org/api/v1/pods.flat.hash.json"
DEFAULT_TIMEOUT = 10.0
DEFAULT_LIMIT = 10


class SearchState(Enum):
    NOT_STARTED = "not started"
    QUERY_ISSUED = "query issued"
    RESULTS_PARSED = "results parsed"
    PARSE_FAILED = "parse failed"
    NETWORK_FAILED = "network failed"
    RENDERED = "rendered"


@dataclass
class SearchResult:
    """One package returned by a search backend. Empty fields are omitted."""

    name: str = ""
    description: str = ""
    version: str = ""
    kind: str = ""
    license: str = ""
    homepage: str = ""
    source: str = ""
    author: str = ""

    LABELS = (
        ("name", "Name"),
        ("description", "Description"),
        ("version", "Version"),
        ("kind", "Type"),
        ("license", "License"),
        ("homepage", "Homepage"),
        ("source", "Source"),
        ("author", "Author"),
    )

    def rows(self) -> list[tuple[str, str]]:
        return [(label, getattr(self, attr)) for attr, label in self.LABELS if getattr(self, attr)]


@dataclass
class SearchOutcome:
    state: SearchState = SearchState.NOT_STARTED
    results: list[SearchResult] = field(default_factory=list)
    error: str = ""


def _text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


class Searcher:
    """
    Runs searches for a resolved package manager.

    Args:
        dispatcher: Used for the native ``search`` fallback.
        client: Optional httpx client; one is created per request otherwise.
        timeout: HTTP timeout in seconds.
        limit: Maximum number of results requested.
    """

    NO_RESULTS = {
        "npm": "No packages found.",
        "cocoapods": "No pods found.",
        "brew": "No formulae or casks found.",
    }

    def __init__(
        self,
        dispatcher: Dispatcher | None = None,
        client: httpx.Client | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        limit: int = DEFAULT_LIMIT,
    ):
        self.dispatcher = dispatcher or Dispatcher()
        self.client = client
        self.timeout = timeout
        self.limit = limit
        self.backends: dict[str, Callable[[str], list[SearchResult]]] = {
            "npm": self.search_npm,
            "cocoapods": self.search_cocoapods,
            "brew": self.search_homebrew,
        }

    def search(self, profile: ManagerProfile, query: str) -> int:
        """Search and render results. Returns the process exit code."""
        if profile.search_backend not in self.backends:
            uni_print(
                f"{profile.name} does not support API search. Falling back to CLI.", "warning"
            )
            return self.dispatcher.run(profile, ["search", query])

        uni_print(f"Searching for '{query}' using {profile.name}...", "info")
        outcome = self.query(profile, query)
        if outcome.state in (SearchState.NETWORK_FAILED, SearchState.PARSE_FAILED):
            uni_print(f"Search failed: {outcome.error}", "warning")
            return 0

        self.render(outcome, self.NO_RESULTS.get(profile.search_backend, "No results found."))
        return 0

    def query(self, profile: ManagerProfile, query: str) -> SearchOutcome:
        """
        Run the profile's search backend and record how far it got.

        Raises:
            ExecutableNotFound: If a local backend's executable is missing.
        """
        outcome = SearchOutcome()
        backend = self.backends[profile.search_backend]
        outcome.state = SearchState.QUERY_ISSUED
        logger.debug("Querying %s backend for %r", profile.search_backend, query)
        try:
            outcome.results = backend(query)
        except NetworkFailed as e:
            outcome.state = SearchState.NETWORK_FAILED
            outcome.error = str(e)
        except ParseFailed as e:
            outcome.state = SearchState.PARSE_FAILED
            outcome.error = str(e)
        else:
            outcome.state = SearchState.RESULTS_PARSED
        return outcome

    def render(self, outcome: SearchOutcome, no_results: str = "No results found.") -> None:
        if not outcome.results:
            uni_print(no_results, "warning")
        for result in outcome.results:
            console.print("---", style="yellow")
            for label, value in result.rows():
                console.print(f"[green]{escape(label + ':'):<14}[/green]{escape(value)}")
        outcome.state = SearchState.RENDERED

    # Backends

    def _get_json(self, url: str, params: dict[str, Any]) -> Any:
        client = self.client or httpx.Client(
            timeout=self.timeout,
            follow_redirects=True,
            headers={"User-Agent": f"uni/{VERSION}"},
        )
        try:
            response = client.get(url, params=params)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise NetworkFailed(f"{url}: {e}") from e
        finally:
            if self.client is None:
                client.close()

        try:
            return response.json()
        except ValueError as e:
            raise ParseFailed(f"could not decode response from {url}: {e}") from e

    def search_npm(self, query: str) -> list[SearchResult]:
        data = self._get_json(NPM_SEARCH_URL, {"text": query, "size": self.limit})
        try:
            objects = data.get("objects") or []
            results = []
            for item in objects:
                package = item.get("package") or {}
                links = package.get("links") or {}
                author = package.get("author") or {}
                results.append(
                    SearchResult(
                        name=_text(package.get("name")),
                        description=_text(package.get("description")),
                        version=_text(package.get("version")),
                        homepage=_text(links.get("homepage")),
                        author=_text(author.get("name")) if isinstance(author, dict) else "",
                    )
                )
        except (AttributeError, TypeError) as e:
            raise ParseFailed(f"could not parse NPM response: {e}") from e
        return results

    def search_cocoapods(self, query: str) -> list[SearchResult]:
        data = self._get_json(COCOAPODS_SEARCH_URL, {"query": query, "amount": self.limit})
        try:
            if not data.get("total"):
                return []
            results = []
            for item in data.get("results") or []:
                source = item.get("source") or {}
                results.append(
                    SearchResult(
                        name=_text(item.get("id")),
                        description=_text(item.get("summary")),
                        version=_text(item.get("version")),
                        source=_text(source.get("git")) if isinstance(source, dict) else "",
                    )
                )
        except (AttributeError, TypeError) as e:
            raise ParseFailed(f"could not parse CocoaPods response: {e}") from e
        return results

    def search_homebrew(self, query: str) -> list[SearchResult]:
        brew = lookup("brew")
        if not shutil.which(brew.executable):
            raise ExecutableNotFound(brew.executable, brew.name, brew.installation_hint)

        listing = subprocess.run(
            [brew.executable, "search", query],
            capture_output=True,
            text=True,
            errors="replace",
        )
        if listing.returncode != 0:
            logger.debug("brew search exited with %d", listing.returncode)
            return []

        names = []
        for line in listing.stdout.splitlines():
            # brew search prints "==> Formulae" style headers
            if not line.strip() or line.startswith("==>"):
                continue
            names.append(line.split()[0])

        results = []
        for name in names[: self.limit]:
            try:
                results.extend(self._homebrew_info(brew.executable, name))
            except SearchError as e:
                logger.debug("Skipping %s: %s", name, e)
        return results

    def _homebrew_info(self, executable: str, name: str) -> list[SearchResult]:
        info = subprocess.run(
            [executable, "info", "--json=v2", name],
            capture_output=True,
            text=True,
            errors="replace",
        )
        if info.returncode != 0:
            logger.debug("brew info %s exited with %d", name, info.returncode)
            return []
        try:
            data = json.loads(info.stdout)
            results = [
                SearchResult(
                    name=_text(item.get("name")),
                    description=_text(item.get("desc")),
                    license=_text(item.get("license")),
                    kind="Formula",
                    homepage=_text(item.get("homepage")),
                )
                for item in data.get("formulae") or []
            ]
            results.extend(
                SearchResult(
                    name=_text(item.get("token")),
                    description=_text(item.get("desc")),
                    kind="Cask",
                    homepage=_text(item.get("homepage")),
                )
                for item in data.get("casks") or []
            )
        except (ValueError, AttributeError, TypeError) as e:
            raise ParseFailed(f"could not parse brew info for {name}: {e}") from e
        return results
