"""Order model"""
from typing import Iterable, Tuple, Dict, Any


class Order:
    """Represents a validated order: a quantity and the pack sizes it may ship in"""

    def __init__(self, order_qty: int, pack_sizes: Iterable[int]):
        self.order_qty: int = order_qty
        self.pack_sizes: Tuple[int, ...] = tuple(pack_sizes)

    @property
    def distinct_pack_sizes(self) -> Tuple[int, ...]:
        """Pack sizes without duplicates, smallest first"""
        return tuple(sorted(set(self.pack_sizes)))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'order_qty': self.order_qty,
            'pack_sizes': list(self.pack_sizes)
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Order):
            return NotImplemented
        return (self.order_qty == other.order_qty
                and self.pack_sizes == other.pack_sizes)

    def __repr__(self) -> str:
        return f"Order({self.order_qty}, {list(self.pack_sizes)})"
