# keepapi/common/logging.py
import logging, sys, time, uuid
from pythonjsonlogger.json import JsonFormatter
from flask import g, has_app_context, request


def setup_json_logging(app):
    level = logging.DEBUG if app.debug else logging.INFO
    root = logging.getLogger()
    root.handlers = []
    root.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    fmt = JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s "
        "%(request_id)s %(method)s %(path)s %(status)s %(latency_ms)s"
    )
    handler.setFormatter(fmt)
    root.addHandler(handler)


def current_request_id() -> str:
    if not has_app_context():
        return "-"
    return getattr(g, "request_id", "-")


def register_request_logging(app):
    @app.before_request
    def _assign_request_id_and_start_timer():
        # X-Request-Id entrant, sinon généré
        g.request_id = request.headers.get("X-Request-Id") or str(uuid.uuid4())
        g._start_time = time.perf_counter()

    @app.after_request
    def _log_request(resp):
        started = getattr(g, "_start_time", None)
        latency = int((time.perf_counter() - started) * 1000) if started is not None else -1

        resp.headers.setdefault("X-Request-Id", current_request_id())

        logging.getLogger("app.request").info(
            "http_request",
            extra={
                "request_id": current_request_id(),
                "method": request.method,
                "path": request.path,
                "status": resp.status_code,
                "latency_ms": latency,
            },
        )
        return resp

    @app.teardown_request
    def _teardown(exc):
        if exc:
            logging.getLogger("app.error").error(
                "request_aborted",
                exc_info=exc,
                extra={"request_id": current_request_id()},
            )
