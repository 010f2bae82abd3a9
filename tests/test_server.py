import logging
import os
import signal
import threading

import pytest

from pack_allocator.config import Settings
from pack_allocator.server import create_app, serve


@pytest.fixture
def client():
    app = create_app(Settings(default_pack_sizes="250,500,1000,2000,5000"))
    app.testing = True
    return app.test_client()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.get_json() == {"status": "ok"}


def test_ship_returns_plan(client):
    response = client.get("/ship?order_qty=12001&pack_sizes=250,500,1000,2000,5000")

    assert response.status_code == 200
    assert response.get_json() == {"data": {"250": 1, "2000": 1, "5000": 2}}


def test_ship_keeps_pack_sizes_in_numeric_order(client):
    response = client.get("/ship?order_qty=12001&pack_sizes=5000,250,2000")
    assert list(response.get_json()["data"]) == ["250", "2000", "5000"]


def test_ship_uses_default_pack_sizes(client):
    response = client.get("/ship?order_qty=251")

    assert response.status_code == 200
    assert response.get_json() == {"data": {"500": 1}}


@pytest.mark.parametrize(
    "query, message",
    [
        ("order_qty=XXX&pack_sizes=250",
         "invalid format for ordered items input (should be an integer value)"),
        ("order_qty=-5&pack_sizes=250",
         "invalid value for ordered items input (should be a strictly positive integer)"),
        ("order_qty=5&pack_sizes=a,b",
         "invalid format for pack sizes input (should be a list of integer values)"),
        ("order_qty=5&pack_sizes=250,-1",
         "invalid value for pack size (every value should be strictly positive)"),
        ("pack_sizes=250",
         "invalid format for ordered items input (should be an integer value)"),
    ],
)
def test_ship_rejects_bad_input(client, query, message):
    response = client.get(f"/ship?{query}")

    assert response.status_code == 400
    assert response.get_json() == {"error": message}


def test_ship_reports_internal_errors(client, monkeypatch):
    def explode(self, order_qty):
        raise RuntimeError("boom")

    monkeypatch.setattr("pack_allocator.allocation.ShipmentEngine.allocate", explode)
    response = client.get("/ship?order_qty=10&pack_sizes=5")

    assert response.status_code == 500
    assert response.get_json() == {"error": "internal server error"}


def test_ship_rejects_post(client):
    assert client.post("/ship?order_qty=10&pack_sizes=5").status_code == 405


def test_ship_rejects_oversized_order_qty_as_json(client):
    response = client.get("/ship?order_qty=" + "9" * 5000 + "&pack_sizes=250")

    assert response.status_code == 400
    assert response.get_json() == {
        "error": "invalid format for ordered items input (should be an integer value)"
    }


def test_ship_reports_parse_failures_as_json(client, monkeypatch):
    def explode(self, args):
        raise KeyError("boom")

    monkeypatch.setattr("pack_allocator.io.RequestParser.parse", explode)
    response = client.get("/ship?order_qty=10&pack_sizes=5")

    assert response.status_code == 500
    assert response.get_json() == {"error": "internal server error"}


def test_serve_shuts_down_on_sigint(caplog):
    caplog.set_level(logging.INFO, logger="pack_allocator.server")
    previous = signal.getsignal(signal.SIGINT)
    timer = threading.Timer(0.3, os.kill, args=(os.getpid(), signal.SIGINT))
    timer.start()
    try:
        serve(Settings(host="127.0.0.1", port=0, shutdown_timeout=5.0))
    finally:
        timer.cancel()

    messages = [record.getMessage() for record in caplog.records]
    assert any(m.startswith("Server Started") for m in messages)
    assert "Server Stopped" in messages
    assert "Server Shutdown Successfully" in messages
    assert signal.getsignal(signal.SIGINT) is previous
