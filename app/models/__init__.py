"""
Models package

SQLAlchemy models, one per file:
- tag.py / tagparent.py: tags and the tag -> parent edges of the hierarchy
- files.py / filetag.py: files and their direct tag associations

records.py holds the plain dataclasses stores return to services.
"""

from .tag import Tag
from .tagparent import TagParentTag
from .files import Files
from .filetag import FileTag
from .records import TagRecord, TagRef, FileRecord, TagDiff

__all__ = [
    "Tag",
    "TagParentTag",
    "Files",
    "FileTag",
    "TagRecord",
    "TagRef",
    "FileRecord",
    "TagDiff",
]
