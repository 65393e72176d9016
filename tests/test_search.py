# tests/test_search.py
import pytest

from keepapi.common.errors import InvalidRequestError
from keepapi.resources.registry import store_for
from keepapi.search.service import CrossResourceSearch, PER_TYPE_LIMIT, SNIPPET_LENGTH


def test_search_matches_single_note(client, auth_headers):
    h = auth_headers()
    client.post("/api/v1/notes/", headers=h, json={"title": "Project Plan", "body": "Q3 goals"})
    client.post("/api/v1/links/", headers=h, json={"title": "Unrelated", "url": "https://example.com/"})

    r = client.get("/api/v1/search?q=proj", headers=h)
    assert r.status_code == 200
    body = r.get_json()
    assert body["meta"] == {"query": "proj", "total": 1}
    [hit] = body["data"]
    assert hit["type"] == "note"
    assert hit["title"] == "Project Plan"
    assert hit["content"] == "Q3 goals"
    assert "url" not in hit


@pytest.mark.parametrize("q", ["", "   "])
def test_empty_query_is_rejected(client, auth_headers, q):
    h = auth_headers()
    r = client.get("/api/v1/search", query_string={"q": q}, headers=h)
    assert r.status_code == 400
    assert r.get_json()["error"]["code"] == "validation_error"


def test_search_requires_auth(client):
    assert client.get("/api/v1/search?q=x").status_code == 401


def test_search_skips_trash_but_keeps_archived(make_user, sample_fields):
    owner = make_user()
    notes = store_for("note")
    archived = notes.create(owner, sample_fields("note", "alpha archived"))
    trashed = notes.create(owner, sample_fields("note", "alpha trashed"))
    notes.update(archived.id, owner, {"is_archived": True})
    notes.delete(trashed.id, owner)

    hits = CrossResourceSearch().search(owner, "alpha")
    assert [h["id"] for h in hits] == [archived.id]


def test_results_grouped_by_type_in_fixed_order(make_user, sample_fields):
    owner = make_user()
    for kind in ("file", "image", "link", "note"):
        store_for(kind).create(owner, sample_fields(kind, f"Shared {kind}"))

    hits = CrossResourceSearch().search(owner, "shared")
    assert [h["type"] for h in hits] == ["note", "link", "image", "file"]
    by_type = {h["type"]: h for h in hits}
    assert by_type["link"]["url"] == "https://example.com/shared-link"
    assert by_type["note"]["url"] is None
    assert by_type["file"]["content"] == "shared-file.pdf"
    assert by_type["image"]["content"] == ""


def test_search_is_owner_scoped(make_user, sample_fields):
    alice, bob = make_user("alice@example.com"), make_user("bob@example.com")
    store_for("note").create(bob, sample_fields("note", "secret plan"))
    assert CrossResourceSearch().search(alice, "plan") == []


def test_per_type_cap_and_snippet(make_user, sample_fields):
    owner = make_user()
    notes = store_for("note")
    for i in range(PER_TYPE_LIMIT + 3):
        notes.create(owner, sample_fields("note", f"bulk {i}", body="x" * (SNIPPET_LENGTH + 50)))

    hits = CrossResourceSearch(kinds=["note"]).search(owner, "bulk")
    assert len(hits) == PER_TYPE_LIMIT
    assert all(len(h["content"]) == SNIPPET_LENGTH for h in hits)
    # plus récents d'abord
    assert hits[0]["title"] == f"bulk {PER_TYPE_LIMIT + 2}"


def test_search_service_rejects_blank_query(make_user):
    with pytest.raises(InvalidRequestError):
        CrossResourceSearch().search(make_user(), " \t")
