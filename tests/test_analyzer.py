import pytest

from pack_allocator.analysis import MetricsCalculator
from pack_allocator.models import ShipmentPlan


def test_calculate_metrics():
    metrics = MetricsCalculator.calculate(ShipmentPlan(501, {250: 1, 500: 1}))

    assert metrics["order_qty"] == 501
    assert metrics["total_shipped"] == 750
    assert metrics["surplus"] == 249
    assert metrics["total_packs"] == 2
    assert metrics["pack_sizes_used"] == 2
    assert metrics["fill_rate"] == pytest.approx(501 / 750)


def test_calculate_metrics_empty_plan():
    metrics = MetricsCalculator.calculate(ShipmentPlan(10, {}))

    assert metrics["total_shipped"] == 0
    assert metrics["fill_rate"] == 0
