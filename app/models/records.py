"""
Plain records handed out by stores.

Services and routes work with these instead of ORM rows so that any store
honouring the same contract (SQL or in-memory) can back them.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass
class TagRecord:
    id: int
    name: str
    color: str
    order: int = 0
    parent_ids: List[int] = field(default_factory=list)

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "color": self.color,
            "order": self.order,
            "parentIds": list(self.parent_ids),
        }


@dataclass
class TagRef:
    """Tag as shown next to a file"""
    id: int
    name: str
    color: str

    def to_dict(self):
        return {"id": self.id, "name": self.name, "color": self.color}


@dataclass
class FileRecord:
    id: int
    path: str
    name: str
    tags: List[TagRef] = field(default_factory=list)

    def to_dict(self):
        return {
            "id": self.id,
            "path": self.path,
            "name": self.name,
            "tags": [t.to_dict() for t in self.tags],
        }


@dataclass
class TagDiff:
    """Association rows a file tag update adds and removes"""
    to_add: List[int] = field(default_factory=list)
    to_remove: List[int] = field(default_factory=list)

    @property
    def is_empty(self):
        return not self.to_add and not self.to_remove

    def to_dict(self):
        return {"added": list(self.to_add), "removed": list(self.to_remove)}
