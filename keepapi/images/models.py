from keepapi.extensions import db
from keepapi.resources.base import ResourceMixin, COMMON_SORT_KEYS, label_table

image_labels = label_table("image", "images")


class Image(ResourceMixin, db.Model):
    __tablename__ = "images"
    __resource_type__ = "image"
    __sortable__ = COMMON_SORT_KEYS + ("mime_type", "size_bytes", "width", "height", "folder")
    __search_url__ = "url"

    storage_key = db.Column(db.String(500), nullable=False)
    url = db.Column(db.String(2048), nullable=False)
    mime_type = db.Column(db.String(100), nullable=True)
    size_bytes = db.Column(db.BigInteger, nullable=False, default=0)
    width = db.Column(db.Integer, nullable=True)
    height = db.Column(db.Integer, nullable=True)
    folder = db.Column(db.String(255), nullable=True)
    # renseignée par le worker de vignettes
    thumbnail_url = db.Column(db.String(2048), nullable=True)

    labels = db.relationship("Label", secondary=image_labels, lazy="selectin", order_by="Label.name")
