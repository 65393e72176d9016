from keepapi.images.schemas import ImageIn, ImagePatch, ImageOut
from keepapi.resources.routes import make_resource_blueprint

bp = make_resource_blueprint("image", __name__, ImageIn(), ImagePatch(), ImageOut())
