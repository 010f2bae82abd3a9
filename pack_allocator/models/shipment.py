"""Shipment plan model"""
from typing import Dict, List, Tuple, Any, Mapping


class ShipmentPlan:
    """Represents the packs chosen to fulfil one order"""

    def __init__(self, order_qty: int, packs: Mapping[int, int]):
        self.order_qty: int = order_qty
        self.packs: Dict[int, int] = dict(packs)

    @property
    def total_quantity(self) -> int:
        """Number of items shipped"""
        return sum(size * count for size, count in self.packs.items())

    @property
    def total_packs(self) -> int:
        return sum(self.packs.values())

    @property
    def surplus(self) -> int:
        """Items shipped beyond the ordered quantity"""
        return self.total_quantity - self.order_qty

    @property
    def pack_sizes_used(self) -> List[int]:
        return sorted(self.packs)

    @property
    def is_empty(self) -> bool:
        return not self.packs

    def items(self) -> List[Tuple[int, int]]:
        """(pack size, count) pairs, smallest pack first"""
        return sorted(self.packs.items())

    def to_dict(self) -> Dict[int, int]:
        """Convert to dictionary"""
        return dict(self.items())

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, ShipmentPlan):
            return self.packs == other.packs
        if isinstance(other, Mapping):
            return self.packs == dict(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"ShipmentPlan({self.order_qty}, {self.to_dict()})"
