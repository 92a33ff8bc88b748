"""JSON endpoints the option editor and variant table talk to."""
import logging
from flask import current_app, jsonify, request, session
from variant_builder import extensions
from variant_builder.blueprints.editor import editor_bp
from variant_builder.errors import ValidationError
from variant_builder.services.grouping import NO_GROUPING
from variant_builder.services.variant_editor import VariantEditor

logger = logging.getLogger(__name__)


def _load_editor():
    """Load the persisted editor state with this client's grouping choice."""
    config = current_app.config
    return VariantEditor.load(
        extensions.record_store,
        group_by=session.get("group_by", NO_GROUPING),
        max_options=config["MAX_OPTIONS"],
        separator=config["VARIANT_TITLE_SEPARATOR"],
        keys=(
            config["OPTIONS_RECORD_KEY"],
            config["PRICES_RECORD_KEY"],
            config["AVAILABILITY_RECORD_KEY"],
        ),
    )


def _snapshot(editor, status=200, **extra):
    session["group_by"] = editor.group_by
    body = editor.snapshot(request.args.get("q", ""))
    body.update(extra)
    return jsonify(body), status


def _payload():
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError({"body": "Expected a JSON object"})
    return data


def _string_list(raw):
    if not isinstance(raw, list):
        return []
    return ["" if v is None else str(v) for v in raw]


@editor_bp.errorhandler(ValidationError)
def validation_failed(error):
    logger.info("Rejected edit: %s", error.errors)
    return jsonify({"errors": error.errors}), 400


@editor_bp.route("/variants", methods=["GET"])
def variants():
    """Options, derived variants with their state, and the grouped view."""
    return _snapshot(_load_editor())


@editor_bp.route("/options", methods=["POST"])
def create_option():
    """Add a blank option slot, or save a new option when name/values given."""
    editor = _load_editor()
    data = _payload()

    if "name" in data or "values" in data:
        option = editor.save_option(
            None, str(data.get("name") or ""), _string_list(data.get("values"))
        )
        if option is None:
            return jsonify({"error": "Option limit reached"}), 409
        return _snapshot(editor, 201, option=option.to_dict())

    option_id = editor.add_option()
    if option_id is None:
        return jsonify({"error": "Option limit reached"}), 409
    return _snapshot(editor, 201, option=editor.option_store.get(option_id).to_dict())


@editor_bp.route("/options/order", methods=["PUT"])
def reorder_options():
    editor = _load_editor()
    editor.reorder_options(_string_list(_payload().get("ids")))
    return _snapshot(editor)


@editor_bp.route("/options/<option_id>", methods=["PUT"])
def update_option(option_id):
    editor = _load_editor()
    if editor.option_store.get(option_id) is None:
        return jsonify({"error": "Option not found"}), 404

    data = _payload()
    option = editor.save_option(
        option_id, str(data.get("name") or ""), _string_list(data.get("values"))
    )
    return _snapshot(editor, option=option.to_dict())


@editor_bp.route("/options/<option_id>", methods=["DELETE"])
def delete_option(option_id):
    editor = _load_editor()
    if editor.delete_option(option_id) is None:
        return jsonify({"error": "Option not found"}), 404
    return _snapshot(editor)


@editor_bp.route("/options/<option_id>/values/order", methods=["PUT"])
def reorder_option_values(option_id):
    editor = _load_editor()
    option = editor.reorder_option_values(
        option_id, _string_list(_payload().get("values"))
    )
    if option is None:
        return jsonify({"error": "Option not found"}), 404
    return _snapshot(editor)


@editor_bp.route("/group-by", methods=["PUT"])
def set_group_by():
    editor = _load_editor()
    if editor.set_group_by(_payload().get("group_by", NO_GROUPING)) is None:
        return jsonify({"errors": {"group_by": "Unknown option"}}), 400
    return _snapshot(editor)


@editor_bp.route("/variants/<variant_id>/price", methods=["PUT"])
def set_variant_price(variant_id):
    editor = _load_editor()
    if editor.set_price(variant_id, _payload().get("price", "")) is None:
        return jsonify({"error": "Variant not found"}), 404
    return _snapshot(editor)


@editor_bp.route("/variants/<variant_id>/availability", methods=["PUT"])
def set_variant_availability(variant_id):
    editor = _load_editor()
    if editor.set_availability(variant_id, _payload().get("availability")) is None:
        return jsonify({"error": "Variant not found"}), 404
    return _snapshot(editor)


@editor_bp.route("/groups/<path:key>/price", methods=["PUT"])
def set_group_price(key):
    """Set the representative's price and copy it to the whole group."""
    editor = _load_editor()
    if editor.set_group_price(key, _payload().get("price", "")) is None:
        return jsonify({"error": "Group not found"}), 404
    return _snapshot(editor)


@editor_bp.route("/groups/<path:key>/reseed", methods=["POST"])
def reseed_group(key):
    editor = _load_editor()
    if editor.reseed_group(key) is None:
        return jsonify({"error": "Group not found"}), 404
    return _snapshot(editor)
