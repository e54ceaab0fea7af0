"""
Model: FileTag
"""

from db import db


class FileTag(db.Model):
    file_id = db.Column(db.Integer, db.ForeignKey("file.id", ondelete="CASCADE"), primary_key=True)
    tag_id = db.Column(db.Integer, db.ForeignKey("tag.id", ondelete="CASCADE"), primary_key=True)

    __table_args__ = (db.Index("ix_file_tag_tag", "tag_id"),)
