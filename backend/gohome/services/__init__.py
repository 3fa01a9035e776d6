"""Service layer for cluster lookups and page composition"""

from gohome.services.cluster import ClusterConnection
from gohome.services.ingresses import IngressLister
from gohome.services.bookmarks import BookmarkManager
from gohome.services.homepage import HomepageComposer

__all__ = [
    "ClusterConnection",
    "IngressLister",
    "BookmarkManager",
    "HomepageComposer",
]
