"""Point d'entrée du worker de vignettes (exécuté hors requête, au moins une fois).

Le worker télécharge l'original, génère la vignette et la stocke sous la clé
`thumbnail_key_for(storage_key)`, puis appelle `record_thumbnail` ; ce
dernier appel peut être rejoué sans effet de bord.
"""
import logging

from keepapi.resources.registry import store_for

logger = logging.getLogger("keepapi.thumbnails")

THUMBNAIL_KINDS = ("image", "file")


def thumbnail_key_for(storage_key: str) -> str:
    """Première occurrence de `uploads/` -> `thumbnails/` (même hors préfixe)."""
    return storage_key.replace("uploads/", "thumbnails/", 1)


def record_thumbnail(kind: str, record_id, thumbnail_url: str) -> bool:
    """Renseigne `thumbnail_url` sur l'image / le fichier d'origine.

    Retourne False si l'enregistrement n'existe plus (tombstone) : la tâche
    est alors terminée, il n'y a rien à réessayer.
    """
    if kind not in THUMBNAIL_KINDS:
        raise ValueError(f"thumbnails are not supported for {kind!r}")
    updated = store_for(kind).set_thumbnail_url(record_id, thumbnail_url)
    if not updated:
        logger.warning("thumbnail_target_missing", extra={"resource_type": kind, "record_id": str(record_id)})
    return updated
