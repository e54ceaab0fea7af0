"""
File lifecycle: register a path with its tags, remove it, look it up.
"""

import os

import structlog

from exceptions import ConflictException, NotFoundException
from services.tag_service import ensure_tags_exist
from utils import file_name_from_path, unique_ids

logger = structlog.get_logger("files")


class FileService:
    def __init__(self, store):
        self.store = store

    def add_file(self, path, tag_ids=None):
        """Register an absolute path; its name is the base name without extension"""
        path = os.path.abspath(path)
        tag_ids = unique_ids(tag_ids)

        with self.store.atomic() as store:
            if store.file_exists_by_path(path):
                raise ConflictException(f"File '{path}' already exists")
            ensure_tags_exist(store, tag_ids)

            file_id = store.insert_file(path, file_name_from_path(path))
            for tag_id in tag_ids:
                store.insert_file_tag(file_id, tag_id)

        logger.info("File added", file_id=file_id, path=path)
        return self.store.get_file(file_id)

    def delete_file(self, file_id):
        with self.store.atomic() as store:
            if not store.file_exists(file_id):
                raise NotFoundException(f"File '{file_id}' does not exist")
            store.delete_file(file_id)

        logger.info("File deleted", file_id=file_id)

    def get_file(self, file_id):
        item = self.store.get_file(file_id)
        if item is None:
            raise NotFoundException(f"File '{file_id}' does not exist")
        return item

    def file_id_of(self, path):
        path = os.path.abspath(path)
        file_id = self.store.file_id_of(path)
        if file_id is None:
            raise NotFoundException(f"File '{path}' does not exist")
        return file_id

    def file_path_of(self, file_id):
        path = self.store.file_path_of(file_id)
        if path is None:
            raise NotFoundException(f"File '{file_id}' does not exist")
        return path
