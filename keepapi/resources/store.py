"""Moteur CRUD + requêtes commun aux notes, liens, images et fichiers.

Toutes les opérations sont bornées par ``owner_id`` ; un enregistrement d'un
autre propriétaire est indiscernable d'un enregistrement inexistant. Les
lignes supprimées définitivement (``deleted_at``) ne sont jamais visibles.

Pas de contrôle de concurrence optimiste : deux ``update`` simultanés sur la
même ligne se résolvent en "dernier écrit gagne" au niveau de la base.
"""
import logging

from sqlalchemy import or_
from keepapi.extensions import db
from keepapi.common.errors import NotFoundError
from keepapi.common.logging import current_request_id
from keepapi.common.pagination import ListParams, Page, paginate_query
from keepapi.common.utils import utcnow
from keepapi.labels.service import replace_labels

logger = logging.getLogger("keepapi.resources")


class ResourceStore:
    def __init__(self, model):
        self.model = model
        self.kind = model.__resource_type__

    # --- Requêtes -------------------------------------------------------

    def owned(self, owner_id):
        """Requête de base: lignes du propriétaire, hors tombstones."""
        m = self.model
        return db.session.query(m).filter(m.owner_id == owner_id, m.deleted_at.is_(None))

    def _get_owned(self, record_id, owner_id):
        record = self.owned(owner_id).filter(self.model.id == record_id).first()
        if record is None:
            raise NotFoundError(f"{self.kind.capitalize()} not found.")
        return record

    def text_filter(self, term: str):
        """OR des colonnes `__searchable__`, sous-chaîne insensible à la casse."""
        return or_(*(
            getattr(self.model, name).icontains(term, autoescape=True)
            for name in self.model.__searchable__
        ))

    def list(self, owner_id, params: ListParams = None) -> Page:
        m = self.model
        params = (params or ListParams()).normalized(m.__sortable__)
        query = self.owned(owner_id)

        # Sans filtre explicite: vue "active" (ni archivé ni corbeille).
        # Dès qu'un filtre est fourni, seul ce filtre s'applique.
        if params.archived is None and params.trashed is None:
            query = query.filter(m.is_archived.is_(False), m.is_trashed.is_(False))
        else:
            if params.archived is not None:
                query = query.filter(m.is_archived == params.archived)
            if params.trashed is not None:
                query = query.filter(m.is_trashed == params.trashed)

        if params.search:
            query = query.filter(self.text_filter(params.search))

        return paginate_query(query, m, params)

    def get(self, record_id, owner_id):
        return self._get_owned(record_id, owner_id)

    # --- Écritures ------------------------------------------------------

    def create(self, owner_id, fields: dict, label_ids=None):
        """Crée l'enregistrement ; `label_ids` (si fourni) dans la même transaction."""
        record = self.model(owner_id=owner_id, **fields)
        db.session.add(record)
        try:
            db.session.flush()
            if label_ids is not None:
                replace_labels(record, label_ids, owner_id)
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
        self._log("resource_created", record.id, owner_id)
        return self.get(record.id, owner_id)

    def update(self, record_id, owner_id, changes: dict, label_ids=None):
        """PATCH: seules les clés présentes dans `changes` sont appliquées.

        `label_ids=None` laisse les labels intacts ; `[]` les retire tous.
        """
        record = self._get_owned(record_id, owner_id)
        applied = [name for name in changes if name in self.model.__patchable__]
        for name in applied:
            setattr(record, name, changes[name])
        record.updated_at = utcnow()
        try:
            if label_ids is not None:
                replace_labels(record, label_ids, owner_id)
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
        self._log("resource_updated", record_id, owner_id, fields=applied)
        # relecture depuis la base (valeurs dérivées côté serveur)
        return self.get(record_id, owner_id)

    def _set_trashed(self, record_id, owner_id, trashed: bool):
        record = self._get_owned(record_id, owner_id)
        record.is_trashed = trashed
        record.updated_at = utcnow()
        self._commit()
        return record

    def delete(self, record_id, owner_id) -> None:
        """Mise à la corbeille (idempotent)."""
        self._set_trashed(record_id, owner_id, True)
        self._log("resource_trashed", record_id, owner_id)

    def restore(self, record_id, owner_id) -> None:
        """Sortie de corbeille (idempotent)."""
        self._set_trashed(record_id, owner_id, False)
        self._log("resource_restored", record_id, owner_id)

    def permanent_delete(self, record_id, owner_id) -> None:
        """Tombstone irréversible, sans passage obligatoire par la corbeille."""
        record = self._get_owned(record_id, owner_id)
        now = utcnow()
        record.deleted_at = now
        record.updated_at = now
        record.labels = []
        self._commit()
        self._log("resource_deleted_permanently", record_id, owner_id)

    def set_thumbnail_url(self, record_id, thumbnail_url: str) -> bool:
        """Écriture mono-champ pour le worker de vignettes (rejouable sans effet).

        Non bornée par propriétaire : le worker ne connaît que l'id d'origine.
        """
        m = self.model
        updated = (
            db.session.query(m)
            .filter(m.id == record_id, m.deleted_at.is_(None))
            .update({m.thumbnail_url: thumbnail_url}, synchronize_session=False)
        )
        self._commit()
        if updated:
            self._log("thumbnail_attached", record_id, None)
        return bool(updated)

    @staticmethod
    def _commit():
        # session propre pour la suite de la requête si le commit échoue
        try:
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

    def _log(self, event, record_id, owner_id, **extra):
        logger.info(event, extra={
            "request_id": current_request_id(),
            "resource_type": self.kind,
            "record_id": str(record_id),
            "owner_id": str(owner_id) if owner_id is not None else None,
            **extra,
        })
