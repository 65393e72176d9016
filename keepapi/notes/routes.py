from keepapi.notes.schemas import NoteIn, NotePatch, NoteOut
from keepapi.resources.routes import make_resource_blueprint

bp = make_resource_blueprint("note", __name__, NoteIn(), NotePatch(), NoteOut())
