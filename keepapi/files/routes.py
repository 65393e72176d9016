from keepapi.files.schemas import FileIn, FilePatch, FileOut
from keepapi.resources.routes import make_resource_blueprint

bp = make_resource_blueprint("file", __name__, FileIn(), FilePatch(), FileOut())
