# tests/conftest.py
import os, sys
import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("JWT_ACCESS_MINUTES", "15")
os.environ.setdefault("JWT_REFRESH_DAYS", "7")

from keepapi import create_app
from keepapi.extensions import db

PASSWORD = "SuperSecret123"


@pytest.fixture()
def app():
    # une app (et donc une base SQLite en mémoire) par test
    app = create_app()
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def app_ctx(app):
    """Contexte applicatif pour appeler les services sans passer par HTTP."""
    with app.app_context():
        yield app


@pytest.fixture()
def make_user(app_ctx):
    from keepapi.auth.service import create_user

    def _make(email="alice@example.com"):
        return create_user(email, PASSWORD).id
    return _make


@pytest.fixture()
def auth_headers(client):
    """Inscrit un utilisateur via l'API et renvoie ses en-têtes Authorization."""
    def _headers(email="alice@example.com"):
        r = client.post("/api/v1/auth/register", json={"email": email, "password": PASSWORD})
        assert r.status_code == 201
        return {"Authorization": f"Bearer {r.get_json()['access_token']}"}
    return _headers


def _fields(kind, title, **extra):
    slug = title.lower().replace(" ", "-") or "untitled"
    base = {
        "note": {"body": f"Body of {title}"},
        "link": {"url": f"https://example.com/{slug}", "description": ""},
        "image": {
            "storage_key": f"uploads/u1/{slug}.png",
            "url": f"https://cdn.example.com/uploads/u1/{slug}.png",
            "mime_type": "image/png",
            "size_bytes": 2048,
            "width": 640,
            "height": 480,
        },
        "file": {
            "original_name": f"{slug}.pdf",
            "storage_key": f"uploads/u1/{slug}.pdf",
            "url": f"https://cdn.example.com/uploads/u1/{slug}.pdf",
            "mime_type": "application/pdf",
            "size_bytes": 4096,
            "extension": "pdf",
        },
    }[kind]
    return {"title": title, **base, **extra}


@pytest.fixture()
def sample_fields():
    """Champs minimaux valides pour chaque type de ressource."""
    return _fields
