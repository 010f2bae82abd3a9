"""Shipment analysis functionality"""
from typing import Dict, Any
from pack_allocator.models import ShipmentPlan


class MetricsCalculator:
    """Calculates metrics from shipment plans"""

    @staticmethod
    def calculate(plan: ShipmentPlan) -> Dict[str, Any]:
        """Calculate actual metrics from the plan"""
        total_shipped = plan.total_quantity

        return {
            'order_qty': plan.order_qty,
            'total_shipped': total_shipped,
            'surplus': total_shipped - plan.order_qty,
            'total_packs': plan.total_packs,
            'pack_sizes_used': len(plan.packs),
            'fill_rate': plan.order_qty / total_shipped if total_shipped > 0 else 0
        }
