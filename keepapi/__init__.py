import os
from flask import Flask, jsonify, request
from flask_limiter import RateLimitExceeded
from dotenv import load_dotenv
from sqlalchemy import text

from .config import DevConfig, ProdConfig, TestConfig
from .extensions import db, migrate, jwt, cors, limiter
from .common.errors import register_error_handlers
from .common.logging import setup_json_logging, register_request_logging

RESOURCE_PREFIXES = {
    "notes": "/api/v1/notes",
    "links": "/api/v1/links",
    "images": "/api/v1/images",
    "files": "/api/v1/files",
}


def _csv(value, default_if_empty):
    """Chaîne CSV -> liste ; sinon la valeur telle quelle ou un défaut."""
    if value is None:
        return default_if_empty
    if isinstance(value, str) and "," in value:
        items = [x.strip() for x in value.split(",") if x.strip()]
        return items if items else default_if_empty
    return value


def _db_up() -> bool:
    try:
        with db.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except Exception:
        return False


def create_app():
    load_dotenv()

    app = Flask(__name__)

    env = os.getenv("APP_ENV") or os.getenv("FLASK_ENV", "development")
    if env in ("test", "testing"):
        app.config.from_object(TestConfig)
    elif env == "production":
        app.config.from_object(ProdConfig)
    else:
        app.config.from_object(DevConfig)

    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)

    setup_json_logging(app)
    register_request_logging(app)

    cors.init_app(app, resources={
        r"/api/*": {
            "origins": _csv(app.config.get("CORS_ORIGINS", "*"), "*"),
            "allow_headers": _csv(app.config.get("CORS_ALLOW_HEADERS"), ["Authorization", "Content-Type"]),
            "expose_headers": _csv(app.config.get("CORS_EXPOSE_HEADERS"), ["Content-Type"]),
            "supports_credentials": False,
        }
    })

    # Limiter lit RATELIMIT_* depuis app.config
    limiter.init_app(app)

    # Modèles importés pour que Flask-Migrate/Alembic voie les tables
    from .users import models as users_models  # noqa: F401
    from .auth import models as auth_models  # noqa: F401
    from .labels import models as labels_models  # noqa: F401
    from .resources import registry  # noqa: F401

    register_error_handlers(app)

    # --- Callbacks JWT (révocation & erreurs au format commun) ---
    from .auth.models import TokenBlocklist

    def _jwt_error(code, message, status):
        return jsonify({"error": {"code": code, "message": message, "details": {}}}), status

    @jwt.token_in_blocklist_loader
    def is_token_revoked(jwt_header, jwt_payload: dict) -> bool:
        return TokenBlocklist.is_revoked(jwt_payload["jti"])

    @jwt.revoked_token_loader
    def revoked_token_callback(jwt_header, jwt_payload):
        return _jwt_error("token_revoked", "Token has been revoked", 401)

    @jwt.expired_token_loader
    def expired_token_callback(jwt_header, jwt_payload):
        return _jwt_error("token_expired", "Token has expired", 401)

    @jwt.invalid_token_loader
    def invalid_token_callback(err_msg):
        return _jwt_error("token_invalid", err_msg, 422)

    @jwt.unauthorized_loader
    def unauthorized_callback(err_msg):
        return _jwt_error("authorization_required", err_msg, 401)

    @app.errorhandler(RateLimitExceeded)
    def handle_rate_limit(e):
        return jsonify({"error": {"code": "rate_limited", "message": "Rate limit exceeded.", "details": {}}}), 429

    @app.after_request
    def set_security_headers(resp):
        # API JSON uniquement: CSP très restrictive
        resp.headers["Content-Security-Policy"] = "default-src 'none'; frame-ancestors 'none'; base-uri 'none'"
        resp.headers["X-Frame-Options"] = "DENY"
        resp.headers["X-Content-Type-Options"] = "nosniff"
        resp.headers["Referrer-Policy"] = "no-referrer"
        if (env == "production" or app.config.get("ENFORCE_HTTPS")) and (
            request.is_secure or request.headers.get("X-Forwarded-Proto", "") == "https"
        ):
            resp.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains; preload"
        return resp

    # --- Blueprints ---
    from .auth.routes import bp as auth_bp
    app.register_blueprint(auth_bp, url_prefix="/api/v1/auth")

    from .users.routes import bp as users_bp
    app.register_blueprint(users_bp, url_prefix="/api/v1/users")

    from .labels.routes import bp as labels_bp
    app.register_blueprint(labels_bp, url_prefix="/api/v1/labels")

    from .notes.routes import bp as notes_bp
    from .links.routes import bp as links_bp
    from .images.routes import bp as images_bp
    from .files.routes import bp as files_bp
    for bp in (notes_bp, links_bp, images_bp, files_bp):
        app.register_blueprint(bp, url_prefix=RESOURCE_PREFIXES[bp.name])

    from .search.routes import bp as search_bp
    app.register_blueprint(search_bp, url_prefix="/api/v1/search")

    @app.get("/healthz")
    def healthz():
        return jsonify({"status": "ok", "env": env, "db": "up" if _db_up() else "down"})

    @app.get("/readyz")
    def readyz():
        status = {"db": "up" if _db_up() else "down", "redis": "n/a"}
        ok = status["db"] == "up"

        uri = app.config.get("RATELIMIT_STORAGE_URI", "memory://")
        if uri.startswith(("redis://", "rediss://")):
            try:
                import redis  # import tardif
                redis.from_url(uri).ping()
                status["redis"] = "up"
            except Exception:
                ok = False
                status["redis"] = "down"

        status["status"] = "ok" if ok else "error"
        return jsonify(status), (200 if ok else 503)

    return app
