"""Errors raised while gathering homepage data"""


class GoHomeError(Exception):
    """Base class for all GoHome errors"""


class ClusterUnavailableError(GoHomeError):
    """No Kubernetes cluster could be reached; the app runs in demo mode"""


class ConfigMapError(GoHomeError):
    """The bookmarks ConfigMap could not be read"""


class ConfigMapNotFoundError(ConfigMapError):
    """The bookmarks ConfigMap does not exist"""

    def __init__(self, namespace: str, name: str):
        super().__init__(f"ConfigMap {namespace}/{name} not found")
        self.namespace = namespace
        self.name = name


class IngressListError(GoHomeError):
    """Listing ingresses from the cluster failed"""


class RenderError(GoHomeError):
    """The homepage template failed to render"""


class TemplateSetupError(GoHomeError):
    """Templates or static assets could not be loaded at startup"""
