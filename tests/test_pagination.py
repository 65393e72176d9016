# tests/test_pagination.py
import pytest
from werkzeug.datastructures import MultiDict

from keepapi.common.errors import InvalidRequestError
from keepapi.common.pagination import (
    MAX_PAGE, ListParams, clamp_page_size, normalize_sort, page_count, parse_flag,
)

ALLOWED = ("id", "title", "created_at")


@pytest.mark.parametrize("value, expected", [
    (None, 20), (0, 1), (-5, 1), (1, 1), (50, 50), (100, 100), (101, 100),
])
def test_clamp_page_size(value, expected):
    assert clamp_page_size(value) == expected


@pytest.mark.parametrize("key, direction, expected", [
    ("title", "asc", ("title", "asc")),
    ("title", "ASC", ("title", "desc")),
    ("title", "", ("title", "desc")),
    ("password_hash", "asc", ("created_at", "asc")),
    (None, None, ("created_at", "desc")),
])
def test_normalize_sort(key, direction, expected):
    assert normalize_sort(key, direction, ALLOWED) == expected


@pytest.mark.parametrize("raw, expected", [
    (None, None), ("", None), ("true", True), ("1", True), ("YES", True),
    ("false", False), ("0", False), ("nope", False),
])
def test_parse_flag(raw, expected):
    assert parse_flag(raw) is expected


def test_page_count():
    assert page_count(0, 20) == 0
    assert page_count(25, 10) == 3
    assert page_count(20, 10) == 2


def test_from_args():
    params = ListParams.from_args(MultiDict({
        "page": "2", "page_size": "500", "search": "  plan ",
        "sort_by": "title", "sort_order": "asc", "trashed": "true",
    }))
    assert params.page == 2
    assert params.page_size == 100
    assert params.search == "plan"
    assert (params.sort_key, params.sort_dir) == ("title", "asc")
    assert params.archived is None and params.trashed is True
    assert params.offset == 100


def test_from_args_rejects_non_integer_page():
    with pytest.raises(InvalidRequestError):
        ListParams.from_args(MultiDict({"page": "two"}))


def test_from_args_rejects_out_of_range_page():
    with pytest.raises(InvalidRequestError):
        ListParams.from_args(MultiDict({"page": "100000000000000000000"}))
    assert ListParams.from_args(MultiDict({"page": str(MAX_PAGE)})).page == MAX_PAGE


def test_huge_page_is_a_400(client, auth_headers):
    h = auth_headers()
    r = client.get("/api/v1/notes/?page=100000000000000000000", headers=h)
    assert r.status_code == 400
    assert r.get_json()["error"]["code"] == "validation_error"

    r = client.get(f"/api/v1/notes/?page={MAX_PAGE}", headers=h)
    assert r.status_code == 200
    assert r.get_json()["data"] == []
