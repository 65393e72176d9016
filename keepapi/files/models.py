from keepapi.extensions import db
from keepapi.resources.base import ResourceMixin, COMMON_SORT_KEYS, label_table

file_labels = label_table("file", "files")


class File(ResourceMixin, db.Model):
    """Fichier téléversé (hors images)."""
    __tablename__ = "files"
    __resource_type__ = "file"
    __searchable__ = ("title", "original_name")
    __sortable__ = COMMON_SORT_KEYS + (
        "original_name", "mime_type", "size_bytes", "extension", "folder",
    )
    __search_content__ = "original_name"
    __search_url__ = "url"

    original_name = db.Column(db.String(500), nullable=False)
    storage_key = db.Column(db.String(500), nullable=False)
    url = db.Column(db.String(2048), nullable=False)
    mime_type = db.Column(db.String(100), nullable=True)
    size_bytes = db.Column(db.BigInteger, nullable=False, default=0)
    extension = db.Column(db.String(20), nullable=True)
    folder = db.Column(db.String(255), nullable=True)
    thumbnail_url = db.Column(db.String(2048), nullable=True)

    labels = db.relationship("Label", secondary=file_labels, lazy="selectin", order_by="Label.name")
