"""Per-service endpoint definitions.

Each service package exposes ``REGISTRY`` mapping endpoint ids to a
RestEndpointSpec and the ResponseAdapter that decodes its response.
"""

from .common import Registry
from .messaging.endpoints import REGISTRY as MESSAGING_REGISTRY
from .ordered.endpoints import REGISTRY as ORDERED_REGISTRY
from .places.endpoints import REGISTRY as PLACES_REGISTRY
from .standard.endpoints import REGISTRY as STANDARD_REGISTRY

__all__ = [
    "Registry",
    "MESSAGING_REGISTRY",
    "ORDERED_REGISTRY",
    "PLACES_REGISTRY",
    "STANDARD_REGISTRY",
]
