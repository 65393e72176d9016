"""Labels : CRUD propriétaire + remplacement des associations ressource <-> label."""
import logging

from sqlalchemy.exc import IntegrityError
from keepapi.extensions import db
from keepapi.labels.models import Label
from keepapi.common.errors import ConflictError, NotFoundError
from keepapi.common.pagination import ListParams, Page, paginate_query

logger = logging.getLogger("keepapi.labels")

SORTABLE = ("id", "name", "slug", "color", "created_at", "updated_at")


def resolve_labels(owner_id, label_ids) -> list:
    """Labels du propriétaire parmi `label_ids` ; les autres ids sont ignorés."""
    ids = set(label_ids or ())
    if not ids:
        return []
    return (
        Label.query
        .filter(Label.id.in_(list(ids)), Label.owner_id == owner_id)
        .order_by(Label.name)
        .all()
    )


def replace_labels(record, label_ids, owner_id) -> list:
    """Remplace (sans fusion) les labels de `record`. Pas de commit ici.

    Un id inconnu ou appartenant à un autre utilisateur est silencieusement
    écarté ; une liste vide retire tous les labels.
    """
    labels = resolve_labels(owner_id, label_ids)
    dropped = len(set(label_ids or ())) - len(labels)
    if dropped:
        logger.debug(
            "labels_dropped",
            extra={"record_id": str(record.id), "owner_id": str(owner_id), "dropped": dropped},
        )
    record.labels = labels
    return labels


def list_labels(owner_id, params: ListParams = None) -> Page:
    params = (params or ListParams()).normalized(SORTABLE)
    query = Label.query.filter(Label.owner_id == owner_id)
    if params.search:
        query = query.filter(Label.name.icontains(params.search, autoescape=True))
    return paginate_query(query, Label, params)


def get_label(label_id, owner_id) -> Label:
    label = Label.query.filter_by(id=label_id, owner_id=owner_id).first()
    if label is None:
        raise NotFoundError("Label not found.")
    return label


def _commit_unique(label: Label):
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise ConflictError("A label with this name already exists.", details={"slug": label.slug})


def create_label(owner_id, name: str, color: str = None) -> Label:
    label = Label(owner_id=owner_id, name=name)
    if color:
        label.color = color
    db.session.add(label)
    _commit_unique(label)
    logger.info("label_created", extra={"label_id": str(label.id), "owner_id": str(owner_id)})
    return label


def update_label(label_id, owner_id, changes: dict) -> Label:
    label = get_label(label_id, owner_id)
    if "name" in changes:
        label.name = changes["name"]
    if "color" in changes:
        label.color = changes["color"]
    _commit_unique(label)
    return get_label(label_id, owner_id)


def delete_label(label_id, owner_id) -> None:
    """Supprime le label et le détache de toutes les ressources."""
    from keepapi.resources.registry import RESOURCE_MODELS

    label = get_label(label_id, owner_id)
    for model in RESOURCE_MODELS.values():
        links = model.label_links()
        db.session.execute(links.delete().where(links.c.label_id == label.id))
    db.session.delete(label)
    db.session.commit()
    logger.info("label_deleted", extra={"label_id": str(label_id), "owner_id": str(owner_id)})
