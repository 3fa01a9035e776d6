"""Display models for the GoHome homepage"""

from gohome.models.homepage import (
    Bookmark,
    HomepageConfig,
    IngressInfo,
    PageData,
    DEFAULT_CATEGORY,
    DEFAULT_TITLE,
)

__all__ = [
    "Bookmark",
    "HomepageConfig",
    "IngressInfo",
    "PageData",
    "DEFAULT_CATEGORY",
    "DEFAULT_TITLE",
]
