from ecomap.stores.base import EcosystemStore
from ecomap.stores.local import LocalEcosystemStore

__all__ = ["EcosystemStore", "LocalEcosystemStore"]
