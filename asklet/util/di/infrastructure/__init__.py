"""Infrastructure providers: persistence and live delivery."""

# Production implementation must be imported for PersistenceProvider.__subclasses__()
from .persistence import PersistenceProvider, ProdPersistenceProvider
from .realtime import RealtimeProvider

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
    "RealtimeProvider",
]
