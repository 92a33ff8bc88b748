from flask import Blueprint

editor_bp = Blueprint("editor", __name__)

from variant_builder.blueprints.editor import views  # noqa: F401, E402
