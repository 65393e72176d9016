from flask import Blueprint, current_app, request, jsonify
from marshmallow import Schema, fields, post_dump

from flask_jwt_extended import jwt_required
from keepapi.common.authz import current_user_id
from keepapi.extensions import limiter
from keepapi.search.service import CrossResourceSearch

bp = Blueprint("search", __name__)
limiter.limit(lambda: current_app.config.get("RATELIMIT_RESOURCES", "120/minute"))(bp)


class SearchHitOut(Schema):
    id = fields.UUID(required=True)
    type = fields.String(required=True)
    title = fields.String()
    content = fields.String()
    url = fields.String()
    created_at = fields.DateTime()

    @post_dump
    def _drop_empty_url(self, data, **kwargs):
        if data.get("url") is None:
            data.pop("url", None)
        return data


hits_out = SearchHitOut(many=True)


@bp.get("")
@jwt_required()
def search():
    query = request.args.get("q", "")
    hits = CrossResourceSearch().search(current_user_id(), query)
    return jsonify({
        "status": "success",
        "data": hits_out.dump(hits),
        "meta": {"query": query, "total": len(hits)},
    }), 200
