"""
File Routes - Endpoints for files, their tags and search
"""

import os

from flask import Blueprint, send_file

from api_responses import success_response, handle_api_errors
from db import db
from exceptions import NotFoundException
from repositories.store import SQLAlchemyStore
from routes.request_parsing import id_list, json_object, optional_string, required_string
from services.file_search import FileSearchEngine
from services.file_service import FileService
from services.file_tag_service import FileTagService

files_bp = Blueprint("files", __name__, url_prefix="/api")


def _store():
    return SQLAlchemyStore(db.session)


@files_bp.route("/files")
@handle_api_errors
def list_files():
    """Get every file with its tags"""
    files = FileSearchEngine(_store()).search()
    return success_response(data=[f.to_dict() for f in files])


@files_bp.route("/files/search", methods=["POST"])
@handle_api_errors
def search_files():
    """Search by name substring and/or tags (descendant tags match too)"""
    data = json_object(required=False)
    tags = data.get("tags")
    files = FileSearchEngine(_store()).search(
        name=optional_string(data, "name"),
        tag_ids=id_list(tags, "tags") if tags is not None else None,
    )
    return success_response(data=[f.to_dict() for f in files])


@files_bp.route("/files", methods=["POST"])
@handle_api_errors
def add_file():
    data = json_object()
    tags = data.get("tags")
    item = FileService(_store()).add_file(
        required_string(data, "path"),
        id_list(tags, "tags") if tags is not None else [],
    )
    return success_response(data=item.to_dict(), status_code=201)


@files_bp.route("/files/<int:file_id>")
@handle_api_errors
def get_file(file_id):
    return success_response(data=FileService(_store()).get_file(file_id).to_dict())


@files_bp.route("/files/<int:file_id>", methods=["PUT"])
@handle_api_errors
def update_file_tags(file_id):
    """Replace the tag set of a file"""
    data = json_object()
    if "tags" not in data:
        raise KeyError("tags")
    diff = FileTagService(_store()).update_file_tags(file_id, id_list(data["tags"], "tags"))
    return success_response(data=diff.to_dict())


@files_bp.route("/files/<int:file_id>", methods=["DELETE"])
@handle_api_errors
def delete_file(file_id):
    FileService(_store()).delete_file(file_id)
    return success_response(message="File removed successfully")


@files_bp.route("/files/<int:file_id>/file")
@handle_api_errors
def download_file(file_id):
    """Serve the file's content from disk"""
    path = FileService(_store()).file_path_of(file_id)
    if not os.path.isfile(path):
        raise NotFoundException(f"File '{path}' is missing on disk")
    return send_file(path)
