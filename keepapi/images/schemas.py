from marshmallow import fields, validate
from keepapi.resources.schemas import ResourceIn, ResourcePatch, ResourceOut

class ImageIn(ResourceIn):
    storage_key = fields.String(required=True, validate=validate.Length(min=1, max=500))
    url = fields.Url(required=True)
    mime_type = fields.String(validate=validate.Length(max=100))
    size_bytes = fields.Integer(validate=validate.Range(min=0))
    width = fields.Integer(validate=validate.Range(min=0))
    height = fields.Integer(validate=validate.Range(min=0))
    folder = fields.String(validate=validate.Length(max=255))

class ImagePatch(ResourcePatch):
    pass

class ImageOut(ResourceOut):
    storage_key = fields.String()
    url = fields.String()
    mime_type = fields.String(allow_none=True)
    size_bytes = fields.Integer()
    width = fields.Integer(allow_none=True)
    height = fields.Integer(allow_none=True)
    folder = fields.String(allow_none=True)
    thumbnail_url = fields.String(allow_none=True)
