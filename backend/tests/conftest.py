# tests/conftest.py
"""Pytest configuration and fixtures for GoHome tests."""

from typing import Generator, List, Optional
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from kubernetes import client as k8s

from gohome import create_app
from gohome.core.config import Settings
from gohome.services.cluster import ClusterConnection


def make_ingress(
    name: str,
    namespace: str = "default",
    host: Optional[str] = "app.example.com",
    path: Optional[str] = "/",
    tls_hosts: Optional[List[str]] = None,
    annotations: Optional[dict] = None,
    extra_rules: Optional[List[k8s.V1IngressRule]] = None,
) -> k8s.V1Ingress:
    """Build a V1Ingress with a single rule (plus any extra rules)."""
    rules = []
    if host is not None:
        paths = []
        if path is not None:
            paths.append(
                k8s.V1HTTPIngressPath(
                    path=path,
                    path_type="Prefix",
                    backend=k8s.V1IngressBackend(
                        service=k8s.V1IngressServiceBackend(
                            name=name, port=k8s.V1ServiceBackendPort(number=80)
                        )
                    ),
                )
            )
        rules.append(
            k8s.V1IngressRule(
                host=host,
                http=k8s.V1HTTPIngressRuleValue(paths=paths) if paths else None,
            )
        )
    rules.extend(extra_rules or [])

    tls = [k8s.V1IngressTLS(hosts=tls_hosts)] if tls_hosts else None
    return k8s.V1Ingress(
        metadata=k8s.V1ObjectMeta(
            name=name, namespace=namespace, annotations=annotations
        ),
        spec=k8s.V1IngressSpec(rules=rules or None, tls=tls),
    )


@pytest.fixture
def ingress_factory():
    return make_ingress


@pytest.fixture
def networking_v1() -> MagicMock:
    """NetworkingV1Api double returning no ingresses by default."""
    api = MagicMock()
    api.list_ingress_for_all_namespaces.return_value = k8s.V1IngressList(items=[])
    return api


@pytest.fixture
def core_v1() -> MagicMock:
    """CoreV1Api double returning an empty ConfigMap by default."""
    api = MagicMock()
    api.read_namespaced_config_map.return_value = k8s.V1ConfigMap(data={})
    return api


@pytest.fixture
def connection(networking_v1, core_v1) -> ClusterConnection:
    """A connected cluster backed by API doubles."""
    return ClusterConnection(networking_v1=networking_v1, core_v1=core_v1)


@pytest.fixture
def demo_connection() -> ClusterConnection:
    return ClusterConnection.unavailable()


@pytest.fixture
def test_settings() -> Settings:
    return Settings(NAMESPACE="homelab", CONFIG_MAP_NAME="gohome-config", REQUEST_TIMEOUT=5)


@pytest.fixture
def app(test_settings, connection):
    """Create a fresh app bound to the API doubles for each test."""
    return create_app(settings=test_settings, connection=connection)


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def demo_client(test_settings, demo_connection) -> Generator[TestClient, None, None]:
    """Test client for an app running without a cluster."""
    with TestClient(create_app(settings=test_settings, connection=demo_connection)) as test_client:
        yield test_client
