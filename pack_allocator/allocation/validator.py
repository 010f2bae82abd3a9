"""Shipment plan validation"""
from typing import List
from pack_allocator.models import Order, ShipmentPlan


class ShipmentValidator:
    """Validates shipment plans against the order they were built for"""

    def __init__(self, order: Order):
        self.order = order
        self.available_sizes = set(order.pack_sizes)

    def validate(self, plan: ShipmentPlan) -> List[str]:
        """Validate a plan against hard constraints"""
        issues = []

        for size, count in plan.items():
            if size not in self.available_sizes:
                issues.append(
                    f"❌ UNKNOWN PACK: size {size} is not one of "
                    f"{sorted(self.available_sizes)}"
                )

            if count < 1:
                issues.append(f"❌ COUNT: size {size} has {count} packs, expected at least 1")

        # Check coverage
        shipped = plan.total_quantity
        if shipped < self.order.order_qty:
            issues.append(
                f"❌ COVERAGE: shipping {shipped} items, "
                f"{self.order.order_qty - shipped} short of the {self.order.order_qty} ordered"
            )

        return issues
