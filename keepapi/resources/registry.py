from keepapi.notes.models import Note
from keepapi.links.models import Link
from keepapi.images.models import Image
from keepapi.files.models import File
from keepapi.resources.store import ResourceStore

# ordre fixe : notes, liens, images, fichiers (utilisé par la recherche transverse)
RESOURCE_MODELS = {
    "note": Note,
    "link": Link,
    "image": Image,
    "file": File,
}

_stores = {}


def store_for(kind: str) -> ResourceStore:
    if kind not in RESOURCE_MODELS:
        raise KeyError(f"unknown resource type: {kind}")
    if kind not in _stores:
        _stores[kind] = ResourceStore(RESOURCE_MODELS[kind])
    return _stores[kind]
