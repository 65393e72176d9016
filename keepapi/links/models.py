from keepapi.extensions import db
from keepapi.resources.base import ResourceMixin, COMMON_SORT_KEYS, FLAG_FIELDS, label_table

link_labels = label_table("link", "links")


class Link(ResourceMixin, db.Model):
    """Signet sauvegardé."""
    __tablename__ = "links"
    __resource_type__ = "link"
    __searchable__ = ("title", "url", "description")
    __sortable__ = COMMON_SORT_KEYS + ("url",)
    __patchable__ = ("url", "title", "description", "thumbnail_url", "favicon_url") + FLAG_FIELDS
    __search_content__ = "description"
    __search_url__ = "url"

    url = db.Column(db.String(2048), nullable=False)
    description = db.Column(db.Text, nullable=False, default="")
    thumbnail_url = db.Column(db.String(2048), nullable=True)
    favicon_url = db.Column(db.String(2048), nullable=True)

    labels = db.relationship("Label", secondary=link_labels, lazy="selectin", order_by="Label.name")
