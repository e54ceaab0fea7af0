"""
Repository for Tag database operations

Covers tag rows and the tag -> parent edges of the hierarchy. Writes are not
committed here; the owning store commits or rolls back the whole batch.
"""

from sqlalchemy import func, or_
from models.tag import Tag
from models.tagparent import TagParentTag
from models.filetag import FileTag
from models.records import TagRecord


class TagRepository:
    """Repository for Tag database operations"""

    def __init__(self, session):
        self.session = session

    def exists(self, id):
        """Check whether a Tag with this ID exists"""
        return self.session.get(Tag, id) is not None

    def get_all(self):
        """Get all tags ordered by display order, each with its parent ids"""
        tags = self.session.query(Tag).order_by(Tag.order, Tag.id).all()

        parents_by_tag = {}
        edges = self.session.query(TagParentTag.tag_id, TagParentTag.parent_tag_id).order_by(
            TagParentTag.tag_id, TagParentTag.parent_tag_id
        )
        for tag_id, parent_id in edges:
            parents_by_tag.setdefault(tag_id, []).append(parent_id)

        return [
            TagRecord(id=t.id, name=t.name, color=t.color, order=t.order, parent_ids=parents_by_tag.get(t.id, []))
            for t in tags
        ]

    def get_by_id(self, id):
        """Get Tag by ID"""
        tag = self.session.get(Tag, id)
        if not tag:
            return None
        return TagRecord(
            id=tag.id, name=tag.name, color=tag.color, order=tag.order, parent_ids=sorted(self.get_parent_ids(id))
        )

    def get_next_order(self):
        """Order value for a new tag: one past the current maximum"""
        max_order = self.session.query(func.max(Tag.order)).scalar()
        return (max_order or 0) + 1

    def create(self, name, color, order):
        """Create new Tag record and return its ID"""
        item = Tag(name=name, color=color, order=order)
        self.session.add(item)
        self.session.flush()
        return item.id

    def update(self, id, name=None, color=None):
        """Update name and/or color of a Tag"""
        item = self.session.get(Tag, id)
        if not item:
            return False

        if name is not None:
            item.name = name
        if color is not None:
            item.color = color

        self.session.flush()
        return True

    def delete(self, id):
        """Delete Tag record along with every edge and file association naming it"""
        item = self.session.get(Tag, id)
        if not item:
            return False

        self.session.query(TagParentTag).filter(
            or_(TagParentTag.tag_id == id, TagParentTag.parent_tag_id == id)
        ).delete()
        self.session.query(FileTag).filter(FileTag.tag_id == id).delete()
        self.session.delete(item)
        self.session.flush()
        return True

    def reorder(self, ids):
        """Assign order i to the i-th tag ID"""
        for position, tag_id in enumerate(ids):
            item = self.session.get(Tag, tag_id)
            if item:
                item.order = position
        self.session.flush()

    def get_parent_ids(self, tag_id):
        """Direct parents of a tag"""
        rows = self.session.query(TagParentTag.parent_tag_id).filter(TagParentTag.tag_id == tag_id).all()
        return {r[0] for r in rows}

    def get_child_ids(self, tag_id):
        """Tags that list this tag as a direct parent"""
        rows = self.session.query(TagParentTag.tag_id).filter(TagParentTag.parent_tag_id == tag_id).all()
        return {r[0] for r in rows}

    def add_parents(self, tag_id, parent_ids):
        """Insert one edge per parent ID"""
        for parent_id in parent_ids:
            self.session.add(TagParentTag(tag_id=tag_id, parent_tag_id=parent_id))
        self.session.flush()

    def replace_parents(self, tag_id, parent_ids):
        """Drop every parent edge of a tag, then insert the given ones"""
        self.session.query(TagParentTag).filter(TagParentTag.tag_id == tag_id).delete()
        self.add_parents(tag_id, parent_ids)
