import json

from pack_allocator.io import ResponseSerializer, ResultSaver
from pack_allocator.main import main
from pack_allocator.models import ShipmentPlan
from pack_allocator.utils import format_packs


def test_calculate_prints_plan(capsys):
    exit_code = main(["calculate", "--order-qty", "12001", "--pack-sizes", "250,500,1000,2000,5000"])
    out = capsys.readouterr().out

    assert exit_code == 0
    assert "2 x 5000, 1 x 2000, 1 x 250" in out
    assert "Total Shipped: 12250" in out
    assert "No validation issues found" in out


def test_calculate_rejects_bad_input(capsys):
    exit_code = main(["calculate", "--order-qty=-3", "--pack-sizes", "250"])
    err = capsys.readouterr().err

    assert exit_code == 2
    assert "strictly positive integer" in err


def test_calculate_saves_output(tmp_path):
    output_file = tmp_path / "results" / "plan.json"
    exit_code = main([
        "calculate", "--order-qty", "600", "--pack-sizes", "250", "--output", str(output_file)
    ])

    assert exit_code == 0
    document = json.loads(output_file.read_text())
    assert document["packs"] == {"250": 3}
    assert document["metrics"]["total_packs"] == 3
    assert "timestamp" in document


def test_saver_returns_path(tmp_path):
    path = ResultSaver().save_final_results({"packs": {}}, str(tmp_path / "out.json"))
    assert json.loads((tmp_path / "out.json").read_text())["packs"] == {}
    assert path.endswith("out.json")


def test_serializer():
    assert ResponseSerializer.success(ShipmentPlan(251, {500: 1})) == {"data": {"500": 1}}
    assert ResponseSerializer.success(ShipmentPlan(1, {})) == {}
    assert ResponseSerializer.error("nope") == {"error": "nope"}


def test_format_packs():
    assert format_packs({250: 1, 5000: 2}) == "2 x 5000, 1 x 250"
    assert format_packs({}) == "nothing"


def test_calculate_rejects_oversized_order_qty(capsys):
    exit_code = main(["calculate", "--order-qty", "9" * 5000, "--pack-sizes", "250"])

    assert exit_code == 2
    assert "should be an integer value" in capsys.readouterr().err


def test_calculate_output_flag_uses_configured_file(tmp_path, monkeypatch):
    output_file = tmp_path / "shipment_results.json"
    monkeypatch.setattr("pack_allocator.main.OUTPUT_FILE", str(output_file))

    exit_code = main(["calculate", "--order-qty", "251", "--pack-sizes", "250,500", "--output"])

    assert exit_code == 0
    assert json.loads(output_file.read_text())["packs"] == {"500": 1}
