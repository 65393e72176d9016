from keepapi.extensions import db
from keepapi.resources.base import ResourceMixin, COMMON_SORT_KEYS, FLAG_FIELDS, label_table

DEFAULT_NOTE_COLOR = "#ffffff"

note_labels = label_table("note", "notes")


class Note(ResourceMixin, db.Model):
    __tablename__ = "notes"
    __resource_type__ = "note"
    __searchable__ = ("title", "body")
    __sortable__ = COMMON_SORT_KEYS + ("color",)
    __patchable__ = ("title", "body", "color") + FLAG_FIELDS
    __search_content__ = "body"

    body = db.Column(db.Text, nullable=False, default="")
    color = db.Column(db.String(7), nullable=False, default=DEFAULT_NOTE_COLOR)

    labels = db.relationship("Label", secondary=note_labels, lazy="selectin", order_by="Label.name")
