"""Compose the homepage from bookmarks and ingresses"""

import asyncio
import logging
from typing import Callable, Optional, TypeVar

from gohome.core.config import Settings
from gohome.core.exceptions import GoHomeError
from gohome.models.homepage import HomepageConfig, PageData, DEFAULT_TITLE
from gohome.services.bookmarks import BookmarkManager
from gohome.services.cluster import ClusterConnection
from gohome.services.ingresses import IngressLister

logger = logging.getLogger(__name__)

T = TypeVar("T")


class HomepageComposer:
    """Build the PageData for a single request.

    Bookmarks and ingresses are loaded concurrently. A failure or timeout in
    either one is logged and replaced by an empty result so the page always
    renders.
    """

    def __init__(
        self,
        connection: ClusterConnection,
        bookmark_manager: BookmarkManager,
        ingress_lister: IngressLister,
        request_timeout: float = 30.0,
    ):
        self.connection = connection
        self.bookmark_manager = bookmark_manager
        self.ingress_lister = ingress_lister
        self.request_timeout = request_timeout

    @classmethod
    def from_settings(
        cls, connection: ClusterConnection, settings: Settings
    ) -> "HomepageComposer":
        return cls(
            connection=connection,
            bookmark_manager=BookmarkManager(
                connection,
                namespace=settings.NAMESPACE,
                config_map_name=settings.CONFIG_MAP_NAME,
                request_timeout=settings.REQUEST_TIMEOUT,
            ),
            ingress_lister=IngressLister(
                connection, request_timeout=settings.REQUEST_TIMEOUT
            ),
            request_timeout=settings.REQUEST_TIMEOUT,
        )

    async def compose(self) -> PageData:
        config, ingresses = await asyncio.gather(
            self._load(self.bookmark_manager.get_config, "config"),
            self._load(self.ingress_lister.get_visible_ingresses, "ingresses"),
        )

        if config is None:
            config = HomepageConfig(title=DEFAULT_TITLE, bookmarks=[])
        if ingresses is None:
            ingresses = []

        return PageData(
            config=config,
            ingresses=ingresses,
            demo_mode=not self.connection.available,
        )

    async def _load(self, loader: Callable[[], T], what: str) -> Optional[T]:
        """Run a blocking loader in a worker thread; None on failure"""
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(loader), timeout=self.request_timeout
            )
        except asyncio.TimeoutError:
            logger.warning(
                f"Timed out loading {what} after {self.request_timeout}s, using defaults"
            )
        except GoHomeError as e:
            logger.warning(f"Error loading {what}: {e}")
        except Exception as e:
            logger.exception(f"Unexpected error loading {what}: {e}")
        return None
