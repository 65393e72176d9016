# tests/test_thumbnails.py
import uuid

import pytest

from keepapi.resources.registry import store_for
from keepapi.thumbnails import record_thumbnail, thumbnail_key_for


def test_thumbnail_key_for():
    assert thumbnail_key_for("uploads/u1/cat.png") == "thumbnails/u1/cat.png"
    assert thumbnail_key_for("uploads/u1/uploads/x.png") == "thumbnails/u1/uploads/x.png"
    # première occurrence, même hors préfixe
    assert thumbnail_key_for("tenant/uploads/a.png") == "tenant/thumbnails/a.png"
    assert thumbnail_key_for("misc/a.png") == "misc/a.png"


@pytest.mark.parametrize("kind", ["image", "file"])
def test_record_thumbnail_is_repeatable(make_user, sample_fields, kind):
    owner = make_user()
    store = store_for(kind)
    rec = store.create(owner, sample_fields(kind, "Scan"))
    url = "https://cdn.example.com/thumbnails/u1/scan.png"

    assert record_thumbnail(kind, rec.id, url) is True
    assert record_thumbnail(kind, rec.id, url) is True
    got = store.get(rec.id, owner)
    assert got.thumbnail_url == url
    assert got.title == "Scan"


def test_record_thumbnail_after_permanent_delete(make_user, sample_fields):
    owner = make_user()
    images = store_for("image")
    rec = images.create(owner, sample_fields("image", "Gone"))
    images.permanent_delete(rec.id, owner)

    assert record_thumbnail("image", rec.id, "https://cdn.example.com/t.png") is False
    assert record_thumbnail("image", uuid.uuid4(), "https://cdn.example.com/t.png") is False


def test_record_thumbnail_rejects_other_kinds():
    with pytest.raises(ValueError):
        record_thumbnail("note", uuid.uuid4(), "https://cdn.example.com/t.png")
