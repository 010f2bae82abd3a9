"""Allocation logic"""

from .allocator import ShipmentEngine, compute_shipment
from .validator import ShipmentValidator

__all__ = ['ShipmentEngine', 'ShipmentValidator', 'compute_shipment']
