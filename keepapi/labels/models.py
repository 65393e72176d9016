import re
import uuid
from sqlalchemy import Uuid, ForeignKey, UniqueConstraint
from sqlalchemy.orm import validates
from keepapi.extensions import db
from keepapi.common.utils import utcnow

DEFAULT_LABEL_COLOR = "#6c5ce7"

_NON_SLUG = re.compile(r"[^a-z0-9]+")


def slugify(name: str) -> str:
    return _NON_SLUG.sub("-", (name or "").lower()).strip("-")


class Label(db.Model):
    __tablename__ = "labels"
    __table_args__ = (UniqueConstraint("owner_id", "slug", name="uq_labels_owner_slug"),)

    id = db.Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = db.Column(db.String(255), nullable=False)
    slug = db.Column(db.String(255), nullable=False)
    color = db.Column(db.String(7), nullable=False, default=DEFAULT_LABEL_COLOR)

    owner_id = db.Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    created_at = db.Column(db.DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    @validates("name")
    def _sync_slug(self, key, name):
        # le slug suit toujours le nom
        self.slug = slugify(name)
        return name
