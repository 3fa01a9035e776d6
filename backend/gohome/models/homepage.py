# gohome/models/homepage.py
from typing import List, Optional
from pydantic import BaseModel, Field

DEFAULT_TITLE = "Go Home"
DEFAULT_CATEGORY = "General"


class IngressInfo(BaseModel):
    """Simplified ingress for display."""

    name: str
    namespace: str
    host: str = ""
    path: str = ""
    url: str = ""  # Empty when the ingress has no routable host


class Bookmark(BaseModel):
    """A single bookmark entry."""

    name: str
    url: str
    category: str = DEFAULT_CATEGORY


class HomepageConfig(BaseModel):
    """Title and bookmarks loaded from the ConfigMap."""

    title: str = DEFAULT_TITLE
    bookmarks: List[Bookmark] = Field(default_factory=list)


class PageData(BaseModel):
    """Everything the homepage template needs."""

    config: HomepageConfig = Field(default_factory=HomepageConfig)
    ingresses: List[IngressInfo] = Field(default_factory=list)
    demo_mode: bool = False
    error: Optional[str] = None

    @property
    def title(self) -> str:
        return self.config.title

    @property
    def bookmarks(self) -> List[Bookmark]:
        return self.config.bookmarks
