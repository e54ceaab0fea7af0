"""
Model: TagParentTag
Directed edge tag -> parent of the tag hierarchy
"""

from db import db


class TagParentTag(db.Model):
    tag_id = db.Column(db.Integer, db.ForeignKey("tag.id", ondelete="CASCADE"), primary_key=True)
    parent_tag_id = db.Column(db.Integer, db.ForeignKey("tag.id", ondelete="CASCADE"), primary_key=True)

    __table_args__ = (
        # Child lookups walk edges backwards
        db.Index("ix_tag_parent_tag_parent", "parent_tag_id"),
    )
