"""Ingress discovery for the homepage"""

import logging
from typing import Any, Iterable, List, Optional

from kubernetes.client.rest import ApiException
from urllib3.exceptions import HTTPError

from gohome.core.exceptions import IngressListError
from gohome.models.homepage import IngressInfo
from gohome.services.cluster import ClusterConnection

logger = logging.getLogger(__name__)

# Annotation key that hides an ingress from the homepage
HIDE_ANNOTATION = "gohome.stringer.sh/hide"


class IngressLister:
    """List the ingresses that should be shown on the homepage"""

    def __init__(
        self, connection: ClusterConnection, request_timeout: Optional[float] = None
    ):
        self.connection = connection
        self.request_timeout = request_timeout

    def get_visible_ingresses(self) -> List[IngressInfo]:
        """Return displayable ingresses across all namespaces, sorted by name

        Raises:
            IngressListError: if the cluster API call fails
        """
        if not self.connection.available:
            logger.info("Kubernetes client not available, returning demo ingresses")
            return demo_ingresses()

        try:
            ingresses = self.connection.networking_v1.list_ingress_for_all_namespaces(
                _request_timeout=self.request_timeout
            )
        except ApiException as e:
            raise IngressListError(f"failed to list ingresses: {e.reason}") from e
        except HTTPError as e:
            raise IngressListError(f"failed to list ingresses: {e}") from e

        return visible_ingresses(ingresses.items or [])


def visible_ingresses(items: Iterable[Any]) -> List[IngressInfo]:
    """Filter hidden and unroutable ingresses and sort the rest by name"""
    visible = []
    for ingress in items:
        if is_hidden(ingress):
            logger.info(
                f"Hiding ingress {ingress.metadata.namespace}/{ingress.metadata.name} due to annotation"
            )
            continue

        info = extract_ingress_info(ingress)
        if info.url:
            visible.append(info)

    visible.sort(key=lambda info: info.name)
    return visible


def is_hidden(ingress: Any) -> bool:
    annotations = ingress.metadata.annotations or {}
    return annotations.get(HIDE_ANNOTATION) == "true"


def extract_ingress_info(ingress: Any) -> IngressInfo:
    """Convert a V1Ingress to an IngressInfo.

    Only the first rule, and the first path of that rule, are used. The URL is
    left empty when there is no rule or the rule has no host.
    """
    info = IngressInfo(
        name=ingress.metadata.name,
        namespace=ingress.metadata.namespace or "",
    )

    spec = ingress.spec
    if spec is None or not spec.rules:
        return info

    rule = spec.rules[0]
    info.host = rule.host or ""
    if rule.http is not None and rule.http.paths:
        info.path = rule.http.paths[0].path or ""

    if info.host:
        protocol = "https" if _has_tls(spec, info.host) else "http"
        info.url = f"{protocol}://{info.host}{info.path}"

    return info


def _has_tls(spec: Any, host: str) -> bool:
    for tls in spec.tls or []:
        if host in (tls.hosts or []):
            return True
    return False


def demo_ingresses() -> List[IngressInfo]:
    """Example ingresses shown when no cluster is available"""
    demo = [
        ("grafana", "monitoring", "grafana.example.com"),
        ("home-assistant", "home-automation", "hass.example.com"),
        ("jellyfin", "media", "media.example.com"),
        ("nextcloud", "productivity", "cloud.example.com"),
        ("portainer", "management", "portainer.example.com"),
    ]
    return [
        IngressInfo(
            name=name,
            namespace=namespace,
            host=host,
            path="/",
            url=f"https://{host}/",
        )
        for name, namespace, host in demo
    ]
