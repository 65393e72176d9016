from datetime import datetime, timezone

from flask import jsonify


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def success(data=None, message="ok", status=200):
    return jsonify({"status": "success", "message": message, "data": data}), status


def paginated(data, page: int, page_size: int, total: int, pages: int):
    return jsonify({
        "status": "success",
        "data": data,
        "meta": {"page": page, "page_size": page_size, "total": total, "pages": pages},
    }), 200
