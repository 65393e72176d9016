"""Colonnes et métadonnées partagées par Note, Link, Image et File.

Chaque modèle concret déclare, en plus de ses colonnes propres :

* ``__resource_type__`` : nom court ("note", "link", ...) ;
* ``__searchable__`` : colonnes texte pour la recherche ``ILIKE`` ;
* ``__sortable__`` : allow-list des colonnes de tri ;
* ``__patchable__`` : champs modifiables par une mise à jour partielle ;
* ``__search_content__`` / ``__search_url__`` : colonnes exposées par la
  recherche transverse (``None`` si le type n'en a pas).

Le moteur générique (``ResourceStore``) ne lit que ces métadonnées.
"""
import uuid
from sqlalchemy import Uuid, ForeignKey
from sqlalchemy.orm import declared_attr
from keepapi.extensions import db
from keepapi.common.utils import utcnow

COMMON_SORT_KEYS = ("id", "title", "is_pinned", "is_archived", "created_at", "updated_at")
FLAG_FIELDS = ("is_pinned", "is_archived")


def label_table(resource_type: str, resource_table: str) -> db.Table:
    """Table de jointure (resource_id, label_id), unique sur la paire."""
    return db.Table(
        f"{resource_type}_labels",
        db.Column(
            "resource_id", Uuid,
            ForeignKey(f"{resource_table}.id", ondelete="CASCADE"), primary_key=True,
        ),
        db.Column(
            "label_id", Uuid,
            ForeignKey("labels.id", ondelete="CASCADE"), primary_key=True, index=True,
        ),
    )


class ResourceMixin:
    __resource_type__ = None
    __searchable__ = ("title",)
    __sortable__ = COMMON_SORT_KEYS
    __patchable__ = ("title",) + FLAG_FIELDS
    __search_content__ = None
    __search_url__ = None

    id = db.Column(Uuid, primary_key=True, default=uuid.uuid4)
    title = db.Column(db.String(500), nullable=False, default="")

    is_pinned = db.Column(db.Boolean, nullable=False, default=False)
    is_archived = db.Column(db.Boolean, nullable=False, default=False)
    is_trashed = db.Column(db.Boolean, nullable=False, default=False)

    created_at = db.Column(db.DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
    # tombstone: suppression définitive, invisible pour toutes les requêtes
    deleted_at = db.Column(db.DateTime(timezone=True), nullable=True, index=True)

    @declared_attr
    def owner_id(cls):
        return db.Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    @classmethod
    def label_links(cls) -> db.Table:
        return cls.labels.property.secondary

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id} owner_id={self.owner_id}>"
