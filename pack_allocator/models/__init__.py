"""Data models for orders and shipment plans"""

from .order import Order
from .shipment import ShipmentPlan

__all__ = ['Order', 'ShipmentPlan']
