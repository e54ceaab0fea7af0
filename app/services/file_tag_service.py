"""
File tag association manager.

Moves a file's tag set to a desired set by writing only the difference.
"""

import structlog

from exceptions import NotFoundException
from models.records import TagDiff
from services.tag_service import ensure_tags_exist
from utils import unique_ids

logger = structlog.get_logger("file_tags")


def diff_tag_ids(existing, desired):
    """Tag ids to add and remove to turn `existing` into `desired`"""
    existing = set(existing)
    desired_ids = unique_ids(desired)
    return TagDiff(
        to_add=[t for t in desired_ids if t not in existing],
        to_remove=sorted(existing - set(desired_ids)),
    )


class FileTagService:
    def __init__(self, store):
        self.store = store

    def update_file_tags(self, file_id, desired_tag_ids):
        """Make the file's direct tags exactly `desired_tag_ids`; returns the applied diff"""
        with self.store.atomic() as store:
            if not store.file_exists(file_id):
                raise NotFoundException(f"File '{file_id}' does not exist")
            ensure_tags_exist(store, desired_tag_ids)

            diff = diff_tag_ids(store.file_tags_of(file_id), desired_tag_ids)
            for tag_id in diff.to_remove:
                store.delete_file_tag(file_id, tag_id)
            for tag_id in diff.to_add:
                store.insert_file_tag(file_id, tag_id)

        if not diff.is_empty:
            logger.info("File tags updated", file_id=file_id, added=diff.to_add, removed=diff.to_remove)
        return diff
