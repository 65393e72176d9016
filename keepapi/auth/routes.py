from flask import Blueprint, request, jsonify, current_app

from keepapi.extensions import limiter
from keepapi.auth import service
from keepapi.auth.models import TokenBlocklist
from keepapi.auth.schemas import RegisterSchema, LoginSchema, TokensOut
from flask_jwt_extended import jwt_required, get_jwt, get_jwt_identity
from keepapi.users.schemas import UserOut

bp = Blueprint("auth", __name__)

register_schema = RegisterSchema()
login_schema = LoginSchema()
tokens_out = TokensOut()
user_out = UserOut()


@bp.post("/register")
@limiter.limit(lambda: current_app.config.get("RATELIMIT_AUTH_REGISTER", "10/hour"))
def register():
    data = register_schema.load(request.get_json(silent=True) or {})
    user = service.create_user(data["email"], data["password"])
    return jsonify(tokens_out.dump(service.issue_tokens(user, fresh=True))), 201


@bp.post("/login")
@limiter.limit(lambda: current_app.config.get("RATELIMIT_AUTH_LOGIN", "5/minute"))
def login():
    data = login_schema.load(request.get_json(silent=True) or {})
    user = service.authenticate_user(data["email"], data["password"])
    return jsonify(tokens_out.dump(service.issue_tokens(user, fresh=True))), 200


@bp.post("/refresh")
@jwt_required(refresh=True)
@limiter.limit(lambda: current_app.config.get("RATELIMIT_AUTH_REFRESH", "30/minute"))
def refresh():
    """Rotation stricte: le refresh présenté est révoqué, un nouveau couple est émis."""
    claims = get_jwt()
    user = service.user_from_identity(claims["sub"])
    TokenBlocklist.revoke(claims)
    return jsonify(tokens_out.dump(service.issue_tokens(user, fresh=False))), 200


@bp.get("/me")
@jwt_required()
def me():
    user = service.user_from_identity(get_jwt_identity())
    return jsonify(user_out.dump(user)), 200


@bp.post("/logout")
@jwt_required(verify_type=False)  # access ou refresh
def logout():
    claims = get_jwt()
    TokenBlocklist.revoke(claims)
    return jsonify({"status": "success", "message": f"{claims.get('type')} token revoked"}), 200
