from flask import Blueprint, jsonify
from keepapi.users.models import User
from keepapi.users.schemas import UserOut
from keepapi.common.authz import roles_required

bp = Blueprint("users", __name__)
users_out = UserOut(many=True)

@bp.get("/")
@roles_required("admin")
def list_users():
    users = User.query.order_by(User.created_at.desc()).all()
    return jsonify({"status": "success", "data": users_out.dump(users)}), 200
