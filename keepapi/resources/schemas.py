"""Champs communs des schémas In / Patch / Out de chaque type de ressource.

Les schémas *Patch* n'ont aucun champ requis ni valeur par défaut : une clé
absente du corps est absente du dict chargé, une clé présente (y compris
`false` ou `[]`) est appliquée ; `labels: null` équivaut à `labels` absent.
"""
from marshmallow import Schema, fields, validate
from keepapi.labels.schemas import LabelOut

TITLE = validate.Length(max=500)


class ResourceIn(Schema):
    title = fields.String(validate=TITLE)
    labels = fields.List(fields.UUID(), allow_none=True)


class ResourcePatch(Schema):
    title = fields.String(validate=TITLE)
    is_pinned = fields.Boolean()
    is_archived = fields.Boolean()
    labels = fields.List(fields.UUID(), allow_none=True)


class ResourceOut(Schema):
    id = fields.UUID(required=True)
    owner_id = fields.UUID(required=True)
    title = fields.String()
    is_pinned = fields.Boolean()
    is_archived = fields.Boolean()
    is_trashed = fields.Boolean()
    labels = fields.List(fields.Nested(LabelOut(only=("id", "name", "slug", "color"))))
    created_at = fields.DateTime()
    updated_at = fields.DateTime()
