from flask import Blueprint, request

from flask_jwt_extended import jwt_required
from keepapi.common.authz import current_user_id
from keepapi.common.pagination import ListParams
from keepapi.common.utils import success, paginated
from keepapi.labels import service
from keepapi.labels.schemas import LabelIn, LabelPatch, LabelOut

bp = Blueprint("labels", __name__)

label_in = LabelIn()
label_patch = LabelPatch()
label_out = LabelOut()
label_out_many = LabelOut(many=True)


@bp.get("/")
@jwt_required()
def list_labels():
    page = service.list_labels(current_user_id(), ListParams.from_args(request.args))
    return paginated(
        label_out_many.dump(page.items),
        page=page.params.page,
        page_size=page.params.page_size,
        total=page.total,
        pages=page.pages,
    )


@bp.post("/")
@jwt_required()
def create_label():
    data = label_in.load(request.get_json(silent=True) or {})
    label = service.create_label(current_user_id(), data["name"], data.get("color"))
    return success(label_out.dump(label), "Label created successfully", 201)


@bp.get("/<uuid:label_id>")
@jwt_required()
def get_label(label_id):
    return success(label_out.dump(service.get_label(label_id, current_user_id())))


@bp.patch("/<uuid:label_id>")
@jwt_required()
def update_label(label_id):
    changes = label_patch.load(request.get_json(silent=True) or {})
    label = service.update_label(label_id, current_user_id(), changes)
    return success(label_out.dump(label), "Label updated successfully")


@bp.delete("/<uuid:label_id>")
@jwt_required()
def delete_label(label_id):
    service.delete_label(label_id, current_user_id())
    return success(message="Label deleted successfully")
