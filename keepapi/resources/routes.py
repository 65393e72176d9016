from flask import Blueprint, current_app, request

from flask_jwt_extended import jwt_required
from keepapi.common.authz import current_user_id
from keepapi.common.pagination import ListParams
from keepapi.common.utils import success, paginated
from keepapi.extensions import limiter
from keepapi.resources.registry import store_for


def make_resource_blueprint(kind: str, import_name: str, schema_in, schema_patch, schema_out) -> Blueprint:
    """Blueprint CRUD + corbeille pour un type de ressource.

    Le handler ne fait que parser/valider puis appeler le ResourceStore ;
    l'owner_id provient toujours du JWT vérifié.
    """
    bp = Blueprint(f"{kind}s", import_name)
    label = kind.capitalize()
    out_many = schema_out.__class__(many=True)
    limiter.limit(lambda: current_app.config.get("RATELIMIT_RESOURCES", "120/minute"))(bp)

    def _load(schema):
        data = schema.load(request.get_json(silent=True) or {})
        # None = labels non fournis (on ne touche pas aux associations)
        return data, data.pop("labels", None)

    @bp.get("/")
    @jwt_required()
    def list_records():
        params = ListParams.from_args(request.args)
        page = store_for(kind).list(current_user_id(), params)
        return paginated(
            out_many.dump(page.items),
            page=page.params.page,
            page_size=page.params.page_size,
            total=page.total,
            pages=page.pages,
        )

    @bp.post("/")
    @jwt_required()
    def create_record():
        fields, label_ids = _load(schema_in)
        record = store_for(kind).create(current_user_id(), fields, label_ids=label_ids)
        return success(schema_out.dump(record), f"{label} created successfully", 201)

    @bp.get("/<uuid:record_id>")
    @jwt_required()
    def get_record(record_id):
        record = store_for(kind).get(record_id, current_user_id())
        return success(schema_out.dump(record))

    @bp.patch("/<uuid:record_id>")
    @jwt_required()
    def update_record(record_id):
        changes, label_ids = _load(schema_patch)
        record = store_for(kind).update(record_id, current_user_id(), changes, label_ids=label_ids)
        return success(schema_out.dump(record), f"{label} updated successfully")

    @bp.delete("/<uuid:record_id>")
    @jwt_required()
    def trash_record(record_id):
        store_for(kind).delete(record_id, current_user_id())
        return success(message=f"{label} moved to trash")

    @bp.put("/<uuid:record_id>/restore")
    @jwt_required()
    def restore_record(record_id):
        store_for(kind).restore(record_id, current_user_id())
        return success(message=f"{label} restored successfully")

    @bp.delete("/<uuid:record_id>/permanent")
    @jwt_required()
    def purge_record(record_id):
        store_for(kind).permanent_delete(record_id, current_user_id())
        return success(message=f"{label} permanently deleted")

    return bp
