from marshmallow import Schema, fields, validate

HEX_COLOR = validate.Regexp(r"^#[0-9A-Fa-f]{6}$", error="Invalid color format")


class LabelIn(Schema):
    name = fields.String(required=True, validate=validate.Length(min=1, max=255))
    color = fields.String(validate=HEX_COLOR)


class LabelPatch(Schema):
    name = fields.String(validate=validate.Length(min=1, max=255))
    color = fields.String(validate=HEX_COLOR)


class LabelOut(Schema):
    id = fields.UUID(required=True)
    name = fields.String(required=True)
    slug = fields.String(required=True)
    color = fields.String(required=True)
    created_at = fields.DateTime()
    updated_at = fields.DateTime()
