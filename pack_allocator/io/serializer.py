"""Response serialization"""
from typing import Dict, Any, Optional
from pack_allocator.models import ShipmentPlan


class ResponseSerializer:
    """Renders shipment plans and errors into response bodies"""

    @staticmethod
    def success(plan: Optional[ShipmentPlan]) -> Dict[str, Any]:
        """Body for a computed plan, pack sizes ascending"""
        if plan is None or plan.is_empty:
            return {}
        return {'data': {str(size): count for size, count in plan.items()}}

    @staticmethod
    def error(message: str) -> Dict[str, Any]:
        return {'error': message}
