from marshmallow import fields
from keepapi.resources.schemas import ResourceIn, ResourcePatch, ResourceOut

class LinkIn(ResourceIn):
    url = fields.Url(required=True)
    description = fields.String()
    thumbnail_url = fields.Url()
    favicon_url = fields.Url()

class LinkPatch(ResourcePatch):
    url = fields.Url()
    description = fields.String()
    thumbnail_url = fields.Url()
    favicon_url = fields.Url()

class LinkOut(ResourceOut):
    url = fields.String()
    description = fields.String()
    thumbnail_url = fields.String(allow_none=True)
    favicon_url = fields.String(allow_none=True)
