"""Kubernetes ConfigMap backend for the beverage collection."""
from __future__ import annotations

import logging
import threading
from typing import Sequence

from kubernetes import client, config
from kubernetes.client.rest import ApiException
from kubernetes.config.config_exception import ConfigException
from urllib3.exceptions import HTTPError

from ..schemas import Bottle, Crate
from .base import (
    Collection,
    CorruptCollectionError,
    PersistenceError,
    StorageUnavailableError,
    deserialize_collection,
    serialize_collection,
)

logger = logging.getLogger(__name__)


def create_core_api() -> client.CoreV1Api:
    """Build a CoreV1Api client, preferring in-cluster credentials."""

    try:
        config.load_incluster_config()
        logger.info("Loaded in-cluster Kubernetes configuration")
    except ConfigException:
        config.load_kube_config()
        logger.info("Loaded Kubernetes configuration from kubeconfig")
    return client.CoreV1Api()


class ConfigMapCatalogStore:
    """Store keeping the collection under one key of a namespaced ConfigMap.

    The ConfigMap itself is provisioned outside this service. A missing
    object or key reads as an empty collection; writes require the object
    to exist and replace it as a whole.
    """

    name = "configmap"

    def __init__(
        self,
        *,
        name: str,
        namespace: str,
        key: str = "beverages.json",
        api: client.CoreV1Api | None = None,
    ) -> None:
        self.configmap_name = name
        self.namespace = namespace
        self.key = key
        self._api = api or create_core_api()
        self.lock = threading.RLock()

    def load(self) -> Collection:
        """Fetch the ConfigMap and parse the collection stored under ``key``."""

        with self.lock:
            try:
                configmap = self._api.read_namespaced_config_map(
                    self.configmap_name, self.namespace
                )
            except ApiException as exc:
                if exc.status == 404:
                    logger.info(
                        "ConfigMap %s/%s not found, treating as empty",
                        self.namespace,
                        self.configmap_name,
                    )
                    return []
                raise StorageUnavailableError(
                    f"Failed to read ConfigMap {self.namespace}/{self.configmap_name}: {exc.reason}"
                ) from exc
            except HTTPError as exc:
                raise StorageUnavailableError(
                    f"Kubernetes API unreachable reading ConfigMap {self.namespace}/{self.configmap_name}: {exc}"
                ) from exc

            data = configmap.data or {}
            text = data.get(self.key)
            if text is None:
                return []
            try:
                return deserialize_collection(text)
            except CorruptCollectionError as exc:
                logger.error(
                    "ConfigMap %s/%s key %s is corrupt, treating as empty: %s",
                    self.namespace,
                    self.configmap_name,
                    self.key,
                    exc,
                )
                return []

    def save(self, beverages: Sequence[Bottle | Crate]) -> None:
        """Write the collection into the ConfigMap via a full replace."""

        payload = serialize_collection(beverages)
        with self.lock:
            try:
                configmap = self._api.read_namespaced_config_map(
                    self.configmap_name, self.namespace
                )
                if configmap.data is None:
                    configmap.data = {}
                configmap.data[self.key] = payload
                self._api.replace_namespaced_config_map(
                    self.configmap_name, self.namespace, configmap
                )
            except ApiException as exc:
                raise PersistenceError(
                    f"Failed to update ConfigMap {self.namespace}/{self.configmap_name}: {exc.reason}"
                ) from exc
            except HTTPError as exc:
                raise PersistenceError(
                    f"Kubernetes API unreachable updating ConfigMap {self.namespace}/{self.configmap_name}: {exc}"
                ) from exc
