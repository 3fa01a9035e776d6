"""ConfigMap-based bookmarks"""

import logging
from typing import Dict, List, Mapping, Optional

from kubernetes.client.rest import ApiException
from urllib3.exceptions import HTTPError

from gohome.core.exceptions import (
    ClusterUnavailableError,
    ConfigMapError,
    ConfigMapNotFoundError,
)
from gohome.models.homepage import (
    Bookmark,
    HomepageConfig,
    DEFAULT_CATEGORY,
    DEFAULT_TITLE,
)
from gohome.services.cluster import ClusterConnection

logger = logging.getLogger(__name__)

BOOKMARK_PREFIX = "bookmark-"
TITLE_KEY = "title"

# Characters in a bookmark key that separate words in the display name
NAME_SEPARATORS = ("-", "_")


class BookmarkManager:
    """Load bookmarks and the page title from a ConfigMap"""

    def __init__(
        self,
        connection: ClusterConnection,
        namespace: str,
        config_map_name: str,
        request_timeout: Optional[float] = None,
    ):
        self.connection = connection
        self.namespace = namespace
        self.config_map_name = config_map_name
        self.request_timeout = request_timeout

    def load_bookmarks(self) -> List[Bookmark]:
        """Return the configured bookmarks, or the defaults if unavailable"""
        return self.get_config().bookmarks

    def get_config(self) -> HomepageConfig:
        """Load title and bookmarks with a single ConfigMap read.

        Falls back to the default bookmarks and title when there is no cluster
        or the ConfigMap cannot be read; never raises for those cases.
        """
        try:
            data = self._read_config_map()
        except ClusterUnavailableError:
            logger.info("Kubernetes client not available, using default bookmarks")
            return HomepageConfig(title=DEFAULT_TITLE, bookmarks=default_bookmarks())
        except ConfigMapError as e:
            logger.warning(f"Could not load bookmarks ConfigMap: {e}")
            return HomepageConfig(title=DEFAULT_TITLE, bookmarks=default_bookmarks())

        return HomepageConfig(title=parse_title(data), bookmarks=parse_bookmarks(data))

    def _read_config_map(self) -> Dict[str, str]:
        if not self.connection.available:
            raise ClusterUnavailableError("Kubernetes client not available")

        try:
            config_map = self.connection.core_v1.read_namespaced_config_map(
                self.config_map_name,
                self.namespace,
                _request_timeout=self.request_timeout,
            )
        except ApiException as e:
            if e.status == 404:
                raise ConfigMapNotFoundError(self.namespace, self.config_map_name) from e
            raise ConfigMapError(
                f"failed to read ConfigMap {self.namespace}/{self.config_map_name}: {e.reason}"
            ) from e
        except HTTPError as e:
            raise ConfigMapError(
                f"failed to read ConfigMap {self.namespace}/{self.config_map_name}: {e}"
            ) from e

        return config_map.data or {}


def parse_bookmarks(data: Mapping[str, str]) -> List[Bookmark]:
    """Parse every ``bookmark-*`` entry, sorted by category then name"""
    bookmarks = []
    for key, value in data.items():
        if not key.startswith(BOOKMARK_PREFIX):
            continue
        bookmark = parse_bookmark_entry(key, value)
        if bookmark.url:
            bookmarks.append(bookmark)

    bookmarks.sort(key=lambda b: (b.category, b.name))
    return bookmarks


def parse_bookmark_entry(key: str, value: str) -> Bookmark:
    """Parse one entry.

    The name comes from the key: ``bookmark-hacker-news`` becomes
    ``Hacker News``. The value is ``url`` or ``url|category``; only the first
    ``|`` splits.
    """
    url, _, category = (value or "").partition("|")
    return Bookmark(
        name=bookmark_name(key),
        url=url.strip(),
        category=category.strip() or DEFAULT_CATEGORY,
    )


def bookmark_name(key: str) -> str:
    name = key[len(BOOKMARK_PREFIX):] if key.startswith(BOOKMARK_PREFIX) else key
    for sep in NAME_SEPARATORS:
        name = name.replace(sep, " ")
    # Capitalize each word without lower-casing the rest ("my-NAS" -> "My NAS")
    return " ".join(word[:1].upper() + word[1:] for word in name.split(" "))


def parse_title(data: Mapping[str, str]) -> str:
    title = data.get(TITLE_KEY)
    if title:
        return title
    return DEFAULT_TITLE


def default_bookmarks() -> List[Bookmark]:
    """Example bookmarks used when the ConfigMap is not available"""
    return [
        Bookmark(
            name="Bracket City",
            url="https://www.theatlantic.com/games/bracket-city/",
            category="Games",
        ),
        Bookmark(
            name="Hacker News",
            url="https://news.ycombinator.com",
            category="News",
        ),
    ]
