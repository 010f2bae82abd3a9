from pack_allocator.allocation import ShipmentEngine, ShipmentValidator
from pack_allocator.models import Order, ShipmentPlan
from pack_allocator.utils import categorize_validation_issues


def test_valid_plan_has_no_issues():
    order = Order(12001, [250, 500, 1000, 2000, 5000])
    plan = ShipmentEngine.for_order(order).allocate(order.order_qty)

    assert ShipmentValidator(order).validate(plan) == []


def test_reports_each_problem():
    order = Order(1000, [250, 500])
    plan = ShipmentPlan(1000, {250: 0, 300: 1})

    issues = ShipmentValidator(order).validate(plan)
    breakdown = categorize_validation_issues(issues)

    assert breakdown == {
        "coverage_shortfalls": 1,
        "unknown_pack_sizes": 1,
        "invalid_counts": 1,
        "other": 0,
    }
    assert any("700 short" in issue for issue in issues)
