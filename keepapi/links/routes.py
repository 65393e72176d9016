from keepapi.links.schemas import LinkIn, LinkPatch, LinkOut
from keepapi.resources.routes import make_resource_blueprint

bp = make_resource_blueprint("link", __name__, LinkIn(), LinkPatch(), LinkOut())
