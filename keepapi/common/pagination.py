"""Contrat commun de pagination / tri / filtres pour les listes."""
import math
from dataclasses import dataclass, replace
from typing import Iterable, Optional

from keepapi.common.errors import InvalidRequestError

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100
# offset = (page - 1) * page_size doit tenir dans un BIGINT
MAX_PAGE = 2**31 - 1
DEFAULT_SORT_KEY = "created_at"
DEFAULT_SORT_DIR = "desc"

_TRUTHY = ("true", "1", "yes")


def clamp_page(page: Optional[int]) -> int:
    if page is None:
        return 1
    if page > MAX_PAGE:
        raise InvalidRequestError("Invalid pagination params.", details={"page": page})
    return max(page, 1)


def clamp_page_size(page_size: Optional[int]) -> int:
    if page_size is None:
        return DEFAULT_PAGE_SIZE
    return 1 if page_size < 1 else MAX_PAGE_SIZE if page_size > MAX_PAGE_SIZE else page_size


def normalize_sort(sort_key: Optional[str], sort_dir: Optional[str], allowed: Iterable[str]):
    """Colonne hors allow-list -> created_at ; direction inconnue -> desc.

    Le nom de colonne ne sort jamais de l'allow-list (pas d'injection via le tri).
    """
    key = sort_key if sort_key in set(allowed) else DEFAULT_SORT_KEY
    direction = sort_dir if sort_dir in ("asc", "desc") else DEFAULT_SORT_DIR
    return key, direction


def page_count(total: int, page_size: int) -> int:
    return math.ceil(total / page_size)


def parse_flag(value: Optional[str]) -> Optional[bool]:
    # absent ou vide = filtre non fourni
    if value is None or value == "":
        return None
    return value.strip().lower() in _TRUTHY


def _parse_int(args, name):
    raw = args.get(name)
    if raw is None or raw == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise InvalidRequestError("Invalid pagination params.", details={name: raw})


@dataclass(frozen=True)
class ListParams:
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    search: str = ""
    sort_key: str = DEFAULT_SORT_KEY
    sort_dir: str = DEFAULT_SORT_DIR
    archived: Optional[bool] = None
    trashed: Optional[bool] = None

    @classmethod
    def from_args(cls, args) -> "ListParams":
        """Construit les paramètres depuis request.args (sans normaliser le tri)."""
        return cls(
            page=clamp_page(_parse_int(args, "page")),
            page_size=clamp_page_size(_parse_int(args, "page_size")),
            search=(args.get("search") or "").strip(),
            sort_key=args.get("sort_by") or DEFAULT_SORT_KEY,
            sort_dir=args.get("sort_order") or DEFAULT_SORT_DIR,
            archived=parse_flag(args.get("archived")),
            trashed=parse_flag(args.get("trashed")),
        )

    def normalized(self, sortable: Iterable[str]) -> "ListParams":
        key, direction = normalize_sort(self.sort_key, self.sort_dir, sortable)
        return replace(
            self,
            page=clamp_page(self.page),
            page_size=clamp_page_size(self.page_size),
            search=(self.search or "").strip(),
            sort_key=key,
            sort_dir=direction,
        )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


@dataclass
class Page:
    items: list
    total: int
    pages: int
    params: ListParams


def paginate_query(query, model, params: ListParams) -> Page:
    """Compte, trie (id en départage) puis découpe une requête ORM déjà filtrée."""
    total = query.order_by(None).count()
    column, tie = getattr(model, params.sort_key), model.id
    if params.sort_dir == "asc":
        ordering = (column.asc(), tie.asc())
    else:
        ordering = (column.desc(), tie.desc())
    items = query.order_by(*ordering).offset(params.offset).limit(params.page_size).all()
    return Page(items=items, total=total, pages=page_count(total, params.page_size), params=params)
