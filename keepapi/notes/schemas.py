from marshmallow import fields
from keepapi.labels.schemas import HEX_COLOR
from keepapi.resources.schemas import ResourceIn, ResourcePatch, ResourceOut

class NoteIn(ResourceIn):
    body = fields.String()
    color = fields.String(validate=HEX_COLOR)

class NotePatch(ResourcePatch):
    body = fields.String()
    color = fields.String(validate=HEX_COLOR)

class NoteOut(ResourceOut):
    body = fields.String()
    color = fields.String()
