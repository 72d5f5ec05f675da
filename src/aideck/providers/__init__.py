from aideck.providers.base import ProviderAdapter, UpstreamRequest
from aideck.providers.registry import build_adapters, ADAPTER_CLASSES

__all__ = ["ProviderAdapter", "UpstreamRequest", "build_adapters", "ADAPTER_CLASSES"]
