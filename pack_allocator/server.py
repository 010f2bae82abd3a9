"""HTTP facade for the pack allocator.

Keeps the transport thin: parse the query, allocate, serialize.
"""
import logging
import signal
import threading
from typing import Any, Optional

from flask import Flask, jsonify, request
from werkzeug.serving import make_server

from pack_allocator.allocation import ShipmentEngine
from pack_allocator.config import Settings
from pack_allocator.io import InputError, RequestParser, ResponseSerializer

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


def configure_logging(level: str = 'INFO') -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask application"""
    settings = settings or Settings()
    parser = RequestParser(settings.default_pack_sizes)

    app = Flask(__name__)
    # Pack sizes are string keys; keep them in numeric order
    app.json.sort_keys = False
    app.config['SETTINGS'] = settings

    @app.get('/health')
    def health() -> Any:
        """Lightweight liveness probe"""
        return jsonify({'status': 'ok'})

    @app.get('/ship')
    def ship_packs() -> Any:
        try:
            order = parser.parse(request.args)
            plan = ShipmentEngine.for_order(order).allocate(order.order_qty)
        except InputError as exc:
            logger.info("Rejected request: %s", exc)
            return jsonify(ResponseSerializer.error(exc.message)), 400
        except Exception:
            logger.exception("Failed to compute shipment for %s", request.args.to_dict())
            return jsonify(ResponseSerializer.error('internal server error')), 500

        return jsonify(ResponseSerializer.success(plan)), 200

    return app


def serve(settings: Optional[Settings] = None) -> None:
    """Run the HTTP server until SIGINT/SIGTERM, then shut down gracefully"""
    settings = settings or Settings()
    app = create_app(settings)
    server = make_server(settings.host, settings.port, app, threaded=True)

    done = threading.Event()

    def _on_signal(signum, frame):
        done.set()

    previous_handlers = {
        signum: signal.signal(signum, _on_signal) for signum in (signal.SIGINT, signal.SIGTERM)
    }
    try:
        _run_until_signalled(server, done, settings)
    finally:
        for signum, handler in previous_handlers.items():
            signal.signal(signum, handler)


def _run_until_signalled(server, done: threading.Event, settings: Settings) -> None:
    worker = threading.Thread(target=server.serve_forever, name='pack-allocator-http', daemon=True)
    worker.start()
    logger.info("Server Started on %s:%s", settings.host, server.server_port)

    while not done.wait(0.5):
        pass
    logger.info("Server Stopped")

    shutdown = threading.Thread(target=server.shutdown, name='pack-allocator-shutdown', daemon=True)
    shutdown.start()
    shutdown.join(settings.shutdown_timeout)
    if shutdown.is_alive():
        logger.error("failed to shutdown the http server within %.1fs", settings.shutdown_timeout)
        return

    server.server_close()
    logger.info("Server Shutdown Successfully")
