"""
Model: Tag
"""

from db import db


class Tag(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String, nullable=False)
    color = db.Column(db.String(7), nullable=False)  # Hex color, #RRGGBB uppercase
    order = db.Column(db.Integer, nullable=False, default=0)  # Display order among siblings

    __table_args__ = (db.Index("ix_tag_order", "order"),)
