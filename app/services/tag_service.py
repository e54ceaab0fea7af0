"""
Tag hierarchy service: create, edit, delete and reorder tags.

Every operation validates against the store's current state and then writes
inside the same store batch.
"""

import structlog

from exceptions import CycleException, NotFoundException, ValidationException
from services.hierarchy import HierarchyGraph
from utils import is_hex_color, unique_ids

logger = structlog.get_logger("tags")


def normalize_color(color):
    """Validate a #RRGGBB color and return it uppercased"""
    if not is_hex_color(color):
        raise ValidationException(f"Invalid hex color: '{color}'")
    return color.upper()


def ensure_tags_exist(store, tag_ids):
    for tag_id in tag_ids:
        if not store.tag_exists(tag_id):
            raise NotFoundException(f"Tag id '{tag_id}' does not exist")


class TagService:
    """
    Service for managing tags and their parent edges.

    Usage:
        service = TagService(store)
        parent = service.add_tag("Work", "#ff0000")
        service.add_tag("Invoices", "#00ff00", parent_ids=[parent.id])
    """

    def __init__(self, store):
        self.store = store

    def list_tags(self):
        """All tags in display order"""
        return self.store.list_tags()

    def get_tag(self, tag_id):
        tag = self.store.get_tag(tag_id)
        if tag is None:
            raise NotFoundException(f"Tag id '{tag_id}' does not exist")
        return tag

    def add_tag(self, name, color, parent_ids=None):
        """Create a tag under the given parents; a new tag cannot close a cycle"""
        color = normalize_color(color)
        parent_ids = unique_ids(parent_ids)

        with self.store.atomic() as store:
            ensure_tags_exist(store, parent_ids)
            tag_id = store.insert_tag(name, color, store.next_tag_order())
            if parent_ids:
                store.insert_parent_edges(tag_id, parent_ids)

        logger.info("Tag created", tag_id=tag_id, parent_ids=parent_ids)
        return self.store.get_tag(tag_id)

    def edit_tag(self, tag_id, name=None, color=None, parent_ids=None):
        """
        Update any of name, color and parent set.

        `parent_ids=None` leaves the edges alone; an empty list detaches the
        tag from all parents. A new parent set replaces the old one wholesale.
        """
        if name is None and color is None and parent_ids is None:
            raise ValidationException("No change specified")

        if color is not None:
            color = normalize_color(color)

        with self.store.atomic() as store:
            if not store.tag_exists(tag_id):
                raise NotFoundException(f"Tag id '{tag_id}' does not exist")

            if parent_ids is not None:
                parent_ids = unique_ids(parent_ids)
                ensure_tags_exist(store, parent_ids)
                error = HierarchyGraph.from_store(store).cycle_error(tag_id, parent_ids)
                if error:
                    raise CycleException(error)

            if name is not None or color is not None:
                store.update_tag_fields(tag_id, name=name, color=color)
            if parent_ids is not None:
                store.replace_parent_edges(tag_id, parent_ids)

        logger.info("Tag updated", tag_id=tag_id, parent_ids=parent_ids)
        return self.store.get_tag(tag_id)

    def delete_tag(self, tag_id):
        """Remove a tag; children lose it as a parent and files lose it as a tag"""
        with self.store.atomic() as store:
            if not store.tag_exists(tag_id):
                raise NotFoundException(f"Tag id '{tag_id}' does not exist")
            store.delete_tag(tag_id)

        logger.info("Tag deleted", tag_id=tag_id)

    def reorder(self, ordered_ids):
        """Give the i-th tag display order i"""
        with self.store.atomic() as store:
            ensure_tags_exist(store, ordered_ids)
            store.reorder_tags(list(ordered_ids))

        logger.info("Tags reordered", count=len(ordered_ids))

    def ancestors(self, tag_id):
        self.get_tag(tag_id)
        return HierarchyGraph.from_store(self.store).ancestors(tag_id)

    def descendants(self, tag_id):
        self.get_tag(tag_id)
        return HierarchyGraph.from_store(self.store).descendants(tag_id)
