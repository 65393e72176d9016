"""Recherche transverse (lecture seule) sur les quatre types de ressources."""
from keepapi.common.errors import InvalidRequestError
from keepapi.resources.registry import RESOURCE_MODELS, store_for

PER_TYPE_LIMIT = 20
SNIPPET_LENGTH = 200


def _snippet(text) -> str:
    return (text or "")[:SNIPPET_LENGTH]


class CrossResourceSearch:
    """Une requête bornée par type, résultats concaténés dans l'ordre
    notes, liens, images, fichiers (pas de classement global).

    Contrairement à ResourceStore.list, les éléments archivés sont inclus ;
    seuls ceux en corbeille sont exclus.
    """

    def __init__(self, kinds=None):
        self.stores = [store_for(kind) for kind in (kinds or RESOURCE_MODELS)]

    def search(self, owner_id, query: str) -> list:
        term = (query or "").strip()
        if not term:
            raise InvalidRequestError("Search query is required.", details={"q": query})

        results = []
        for store in self.stores:
            m = store.model
            rows = (
                store.owned(owner_id)
                .filter(m.is_trashed.is_(False), store.text_filter(term))
                .order_by(m.created_at.desc(), m.id.desc())
                .limit(PER_TYPE_LIMIT)
                .all()
            )
            results.extend(self._hit(store.kind, row) for row in rows)
        return results

    @staticmethod
    def _hit(kind: str, row) -> dict:
        content_attr = row.__search_content__
        url_attr = row.__search_url__
        return {
            "id": row.id,
            "type": kind,
            "title": row.title,
            "content": _snippet(getattr(row, content_attr)) if content_attr else "",
            "url": getattr(row, url_attr) if url_attr else None,
            "created_at": row.created_at,
        }
