import logging
from functools import lru_cache

from kubernetes import client, config
from kubernetes.config.config_exception import ConfigException

logger = logging.getLogger(__name__)


@lru_cache()
def load_kubernetes_config() -> None:
    """in-cluster 설정을 우선 시도하고, 실패하면 로컬 kubeconfig 사용 (최초 1회)"""
    try:
        config.load_incluster_config()
        logger.info("✅ In-cluster config loaded.")
    except ConfigException:
        config.load_kube_config()
        logger.info("✅ Local config loaded.")


@lru_cache()
def get_core_v1_api() -> client.CoreV1Api:
    load_kubernetes_config()
    return client.CoreV1Api()


@lru_cache()
def get_custom_objects_api() -> client.CustomObjectsApi:
    load_kubernetes_config()
    return client.CustomObjectsApi()
