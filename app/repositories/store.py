"""
SQL-backed store handed to the services.

Composes the repositories over one SQLAlchemy session and exposes the store
contract the services are written against. Each service operation runs its
validation reads and all of its writes inside a single `atomic()` block, so a
batch either commits as a whole or leaves the database untouched.
"""

from contextlib import contextmanager

import structlog

from repositories.tag_repository import TagRepository
from repositories.files_repository import FilesRepository
from repositories.filetag_repository import FileTagRepository

logger = structlog.get_logger("store")


class SQLAlchemyStore:
    """Store contract implemented on top of a SQLAlchemy session"""

    def __init__(self, session=None):
        if session is None:
            from db import db

            session = db.session
        self.session = session
        self.tags = TagRepository(session)
        self.files = FilesRepository(session)
        self.file_tags = FileTagRepository(session)

    @contextmanager
    def atomic(self):
        """Commit everything done inside the block, or roll all of it back"""
        try:
            yield self
            self.session.commit()
        except Exception:
            self.session.rollback()
            logger.debug("Store batch rolled back")
            raise

    # Tags

    def tag_exists(self, tag_id):
        return self.tags.exists(tag_id)

    def list_tags(self):
        return self.tags.get_all()

    def get_tag(self, tag_id):
        return self.tags.get_by_id(tag_id)

    def next_tag_order(self):
        return self.tags.get_next_order()

    def insert_tag(self, name, color, order):
        return self.tags.create(name, color, order)

    def insert_parent_edges(self, tag_id, parent_ids):
        self.tags.add_parents(tag_id, parent_ids)

    def update_tag_fields(self, tag_id, name=None, color=None):
        self.tags.update(tag_id, name=name, color=color)

    def replace_parent_edges(self, tag_id, parent_ids):
        self.tags.replace_parents(tag_id, parent_ids)

    def delete_tag(self, tag_id):
        self.tags.delete(tag_id)

    def reorder_tags(self, ordered_ids):
        self.tags.reorder(ordered_ids)

    def children_of(self, tag_id):
        return self.tags.get_child_ids(tag_id)

    def parents_of(self, tag_id):
        return self.tags.get_parent_ids(tag_id)

    # Files

    def file_exists(self, file_id):
        return self.files.exists(file_id)

    def file_exists_by_path(self, path):
        return self.files.exists_by_path(path)

    def get_file(self, file_id):
        return self.files.get_by_id(file_id)

    def insert_file(self, path, name):
        return self.files.create(path, name)

    def delete_file(self, file_id):
        self.files.delete(file_id)

    def file_path_of(self, file_id):
        return self.files.get_path_by_id(file_id)

    def file_id_of(self, path):
        return self.files.get_id_by_path(path)

    def search_files(self, name=None, tag_closures=None):
        return self.files.search(name=name, tag_closures=tag_closures)

    # File tags

    def file_tags_of(self, file_id):
        return self.file_tags.get_tag_ids_by_file_id(file_id)

    def insert_file_tag(self, file_id, tag_id):
        self.file_tags.create(file_id, tag_id)

    def delete_file_tag(self, file_id, tag_id):
        self.file_tags.delete_by_file_and_tag(file_id, tag_id)
