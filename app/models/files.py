"""
Model: Files
"""

from db import db


class Files(db.Model):
    __tablename__ = "file"

    id = db.Column(db.Integer, primary_key=True)
    path = db.Column(db.String, unique=True, nullable=False)  # Absolute path
    name = db.Column(db.String, nullable=False)  # Base name without extension, fixed at creation

    tags = db.relationship("Tag", secondary="file_tag", viewonly=True, order_by="Tag.order")

    __table_args__ = (db.Index("ix_file_name", "name"),)
