"""Pack allocator: choose whole packs to ship for an order"""

from .allocation import ShipmentEngine, compute_shipment

__all__ = ['ShipmentEngine', 'compute_shipment']
