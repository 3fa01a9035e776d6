"""Kubernetes cluster connection handle"""

import logging
from typing import Any, Optional

from kubernetes import client, config

from gohome.core.exceptions import ClusterUnavailableError

logger = logging.getLogger(__name__)


class ClusterConnection:
    """Read-only handle on the Kubernetes API.

    ``available`` is False when no cluster could be reached. Callers check it
    before touching the API clients and fall back to demo data otherwise.
    The API clients hold no per-request state and are shared between requests.
    """

    def __init__(
        self,
        networking_v1: Optional[Any] = None,
        core_v1: Optional[Any] = None,
        available: bool = True,
    ):
        self.networking_v1 = networking_v1
        self.core_v1 = core_v1
        self.available = available

    @classmethod
    def unavailable(cls) -> "ClusterConnection":
        """Handle used in demo mode"""
        return cls(available=False)

    @classmethod
    def connect(cls) -> "ClusterConnection":
        """Connect using in-cluster config, falling back to kubeconfig.

        Never raises: if neither config can be loaded the returned handle is
        unavailable and the app runs in demo mode.
        """
        try:
            _load_kubernetes_config()
        except ClusterUnavailableError as e:
            logger.warning(f"Failed to initialize Kubernetes client: {e}")
            logger.info("Running in demo mode without Kubernetes integration")
            return cls.unavailable()

        return cls(
            networking_v1=client.NetworkingV1Api(),
            core_v1=client.CoreV1Api(),
        )


def _load_kubernetes_config():
    """Load the global Kubernetes client configuration"""
    try:
        # Try in-cluster config first (when running in pod)
        config.load_incluster_config()
        logger.info("Using in-cluster config for Kubernetes client")
        return
    except config.ConfigException as e:
        logger.info(f"In-cluster config not available, trying kubeconfig: {e}")

    try:
        # Honours KUBECONFIG, else ~/.kube/config
        config.load_kube_config()
    except (config.ConfigException, OSError) as e:
        raise ClusterUnavailableError(f"failed to load kubeconfig: {e}") from e
    logger.info("Using kubeconfig for Kubernetes client")
