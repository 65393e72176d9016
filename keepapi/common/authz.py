import uuid
from functools import wraps
from flask_jwt_extended import verify_jwt_in_request, get_jwt, get_jwt_identity
from keepapi.common.errors import ApiError


def current_user_id() -> uuid.UUID:
    """owner_id de l'appelant, issu du `sub` du JWT déjà vérifié."""
    try:
        return uuid.UUID(get_jwt_identity())
    except (TypeError, ValueError):
        raise ApiError("Invalid token subject.", 422, "token_invalid_sub")


def roles_required(*allowed_roles: str):
    """
    Ex: @roles_required("admin")
    """
    def wrapper(fn):
        @wraps(fn)
        def inner(*args, **kwargs):
            verify_jwt_in_request()  # lève si non authentifié / token invalide
            role = (get_jwt() or {}).get("role")
            if role not in allowed_roles:
                raise ApiError(
                    "Forbidden: insufficient role.",
                    status_code=403,
                    code="forbidden",
                    details={"required_roles": list(allowed_roles), "current_role": role}
                )
            return fn(*args, **kwargs)
        return inner
    return wrapper
