"""
Tag Routes - Endpoints for tags and the tag hierarchy
"""

from flask import Blueprint

from api_responses import success_response, handle_api_errors
from db import db
from repositories.store import SQLAlchemyStore
from routes.request_parsing import id_list, json_body, json_object, optional_string, required_string
from services.tag_service import TagService

tags_bp = Blueprint("tags", __name__, url_prefix="/api")


def _service():
    return TagService(SQLAlchemyStore(db.session))


@tags_bp.route("/tags")
@handle_api_errors
def list_tags():
    """Get all tags in display order"""
    return success_response(data=[t.to_dict() for t in _service().list_tags()])


@tags_bp.route("/tags", methods=["POST"])
@handle_api_errors
def create_tag():
    """Create a tag"""
    data = json_object()
    parent_ids = data.get("parentIds")
    tag = _service().add_tag(
        required_string(data, "name"),
        required_string(data, "color"),
        id_list(parent_ids, "parentIds") if parent_ids is not None else None,
    )
    return success_response(data=tag.to_dict(), status_code=201)


@tags_bp.route("/tags/order", methods=["PUT"])
@handle_api_errors
def reorder_tags():
    """Set display order from a list of tag ids"""
    ordered_ids = id_list(json_body(), "order")
    _service().reorder(ordered_ids)
    return success_response(message="Tags reordered")


@tags_bp.route("/tags/<int:tag_id>")
@handle_api_errors
def get_tag(tag_id):
    return success_response(data=_service().get_tag(tag_id).to_dict())


@tags_bp.route("/tags/<int:tag_id>", methods=["PUT"])
@handle_api_errors
def update_tag(tag_id):
    """Edit name, color and/or parent set of a tag"""
    data = json_object()
    parent_ids = data.get("parentIds")
    tag = _service().edit_tag(
        tag_id,
        name=optional_string(data, "name"),
        color=optional_string(data, "color"),
        parent_ids=id_list(parent_ids, "parentIds") if parent_ids is not None else None,
    )
    return success_response(data=tag.to_dict())


@tags_bp.route("/tags/<int:tag_id>", methods=["DELETE"])
@handle_api_errors
def delete_tag(tag_id):
    _service().delete_tag(tag_id)
    return success_response(message="Tag removed successfully")


@tags_bp.route("/tags/<int:tag_id>/ancestors")
@handle_api_errors
def tag_ancestors(tag_id):
    """Ids of the tag and everything above it"""
    return success_response(data=sorted(_service().ancestors(tag_id)))


@tags_bp.route("/tags/<int:tag_id>/descendants")
@handle_api_errors
def tag_descendants(tag_id):
    """Ids of the tag and everything below it"""
    return success_response(data=sorted(_service().descendants(tag_id)))
