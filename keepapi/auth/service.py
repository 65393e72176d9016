import uuid

from sqlalchemy.exc import IntegrityError
from keepapi.extensions import db
from keepapi.users.models import User
from keepapi.common.errors import ApiError, ConflictError, InvalidRequestError, NotFoundError
from flask_jwt_extended import create_access_token, create_refresh_token


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def create_user(email: str, password: str, role: str = "user") -> User:
    email_n = normalize_email(email)
    if not email_n or not password:
        raise InvalidRequestError("Email & password required.")

    user = User(email=email_n, role=role)
    user.set_password(password)
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise ConflictError("Email already registered.", details={"email": email_n})
    return user


def authenticate_user(email: str, password: str) -> User:
    user = User.query.filter_by(email=normalize_email(email)).first()
    if not user or not user.check_password(password):
        raise ApiError("Invalid credentials.", 401, "invalid_credentials")
    if not user.is_active:
        raise ApiError("User is deactivated.", 403, "user_inactive")
    return user


def user_from_identity(identity: str) -> User:
    """sub du token -> User actif, sinon ApiError."""
    try:
        uid = uuid.UUID(identity)
    except (TypeError, ValueError):
        raise ApiError("Invalid token subject.", 422, "token_invalid_sub")

    user = db.session.get(User, uid)
    if not user:
        raise NotFoundError("User not found.")
    if not user.is_active:
        raise ApiError("User not found or inactive.", 403, "user_inactive")
    return user


def issue_tokens(user: User, fresh: bool = True) -> dict:
    identity = str(user.id)
    claims = {"role": user.role}
    return {
        "access_token": create_access_token(identity, additional_claims=claims, fresh=fresh),
        "refresh_token": create_refresh_token(identity, additional_claims=claims),
    }
