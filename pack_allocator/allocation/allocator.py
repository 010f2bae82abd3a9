"""Pack allocation engine

Rules, in priority order:

1. Only whole packs can be sent. Packs cannot be broken open.
2. Within rule 1, send out no more items than necessary to fulfil the order.
3. Within rules 1 and 2, send out as few packs as possible.

The allocation is a greedy largest-first fill followed by a single
consolidation sweep. It is a bounded heuristic, not an exhaustive search.
"""
from typing import Dict, Any, Iterable, Tuple
from pack_allocator.models import Order, ShipmentPlan
from pack_allocator.allocation.validator import ShipmentValidator
from pack_allocator.analysis import MetricsCalculator
from pack_allocator.utils import categorize_validation_issues


def compute_shipment(order_qty: int, pack_sizes: Iterable[int]) -> Dict[int, int]:
    """
    Calculate how many packs of each size to ship for an order.

    Assumes order_qty > 0 and a non-empty collection of positive pack sizes;
    rejecting anything else is the caller's job. The collection passed in is
    never modified.
    """
    sizes = sorted(set(pack_sizes))
    packs = _greedy_fill(order_qty, sizes)
    return _consolidate(packs, sizes)


def _greedy_fill(order_qty: int, ascending_sizes: Iterable[int]) -> Dict[int, int]:
    """Fill the order from the largest pack down, topping up with one smallest pack"""
    ascending_sizes = list(ascending_sizes)
    packs: Dict[int, int] = {}
    remaining = order_qty

    for size in reversed(ascending_sizes):
        if remaining <= 0:
            break

        count = remaining // size
        if count > 0:
            packs[size] = count
            remaining -= count * size

    if remaining > 0:
        smallest = ascending_sizes[0]
        packs[smallest] = packs.get(smallest, 0) + 1

    return packs


def _consolidate(packs: Dict[int, int], ascending_sizes: Iterable[int]) -> Dict[int, int]:
    """
    Replace a run of equal packs with one larger pack holding the same quantity.

    One sweep, smallest size first. Each step sees merges made earlier in the
    sweep, so two packs of 250 becoming a 500 can go on to join another 500.
    """
    packs = dict(packs)
    available = set(ascending_sizes)

    for size in sorted(available):
        count = packs.get(size, 0)
        quantity = count * size
        if count <= 1 or quantity not in available:
            continue

        del packs[size]
        packs[quantity] = packs.get(quantity, 0) + 1

    return packs


class ShipmentEngine:
    """Allocates orders against a fixed set of pack sizes"""

    def __init__(self, pack_sizes: Iterable[int]):
        self.pack_sizes: Tuple[int, ...] = tuple(sorted(set(pack_sizes)))
        if not self.pack_sizes:
            raise ValueError("at least one pack size is required")

    @classmethod
    def for_order(cls, order: Order) -> 'ShipmentEngine':
        return cls(order.distinct_pack_sizes)

    def allocate(self, order_qty: int) -> ShipmentPlan:
        """Build the shipment plan for an order quantity"""
        return ShipmentPlan(order_qty, compute_shipment(order_qty, self.pack_sizes))

    def build_complete_output(self, plan: ShipmentPlan) -> Dict[str, Any]:
        """Build complete output with all metadata"""
        validator = ShipmentValidator(Order(plan.order_qty, self.pack_sizes))
        validation_issues = validator.validate(plan)

        return {
            "order": {
                "order_qty": plan.order_qty,
                "pack_sizes": list(self.pack_sizes)
            },
            "packs": {str(size): count for size, count in plan.items()},
            "metrics": MetricsCalculator.calculate(plan),
            "validation_issues": validation_issues,
            "issue_breakdown": categorize_validation_issues(validation_issues)
        }

    def __repr__(self) -> str:
        return f"ShipmentEngine({list(self.pack_sizes)})"
