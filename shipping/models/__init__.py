from .shipping_policy import ShippingPolicy, ShippingZone
from .store import Store

__all__ = [
    "Store",
    "ShippingPolicy",
    "ShippingZone",
]
