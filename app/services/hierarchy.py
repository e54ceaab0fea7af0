"""
Tag hierarchy as a directed acyclic graph.

Edges point from a tag to each of its parents; a tag may have several parents.
The graph is rebuilt from the store for every operation that needs it and
nothing is cached between calls, so closures always reflect the data the
caller's transaction sees.
"""

from collections import deque
from typing import Dict, Iterable, Optional, Set


class HierarchyGraph:
    """Id-indexed node table with parent and child adjacency sets"""

    def __init__(self, edges: Iterable = (), tag_ids: Iterable[int] = ()):
        self.parents: Dict[int, Set[int]] = {}
        self.children: Dict[int, Set[int]] = {}
        for tag_id in tag_ids:
            self.add_node(tag_id)
        for tag_id, parent_id in edges:
            self.add_edge(tag_id, parent_id)

    @classmethod
    def from_tags(cls, tags):
        """Build from TagRecord-like objects carrying `id` and `parent_ids`"""
        tags = list(tags)
        edges = [(t.id, p) for t in tags for p in t.parent_ids]
        return cls(edges=edges, tag_ids=[t.id for t in tags])

    @classmethod
    def from_store(cls, store):
        return cls.from_tags(store.list_tags())

    def add_node(self, tag_id):
        self.parents.setdefault(tag_id, set())
        self.children.setdefault(tag_id, set())

    def add_edge(self, tag_id, parent_id):
        self.add_node(tag_id)
        self.add_node(parent_id)
        self.parents[tag_id].add(parent_id)
        self.children[parent_id].add(tag_id)

    def __contains__(self, tag_id):
        return tag_id in self.parents

    def __len__(self):
        return len(self.parents)

    def _closure(self, start, adjacency):
        # BFS with a visited set: terminates even if stored edges form a loop
        seen = {start}
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for nxt in adjacency.get(node, ()):
                if nxt not in seen:
                    seen.add(nxt)
                    queue.append(nxt)
        return seen

    def ancestors(self, tag_id) -> Set[int]:
        """The tag itself plus every tag reachable through parent edges"""
        return self._closure(tag_id, self.parents)

    def descendants(self, tag_id) -> Set[int]:
        """The tag itself plus every tag reachable through child edges"""
        return self._closure(tag_id, self.children)

    def cycle_error(self, tag_id, parent_ids) -> Optional[str]:
        """
        Message explaining why `parent_ids` cannot become the parents of
        `tag_id`, or None when the new edge set keeps the graph acyclic.

        Making `tag_id` a child of `p` closes a loop exactly when `tag_id` is
        already among the ancestors of `p` (which includes `p` itself).
        """
        for parent_id in parent_ids:
            if parent_id == tag_id:
                return f"Circular reference: tag '{tag_id}' cannot have itself as parent"
            if tag_id in self.ancestors(parent_id):
                return (
                    f"Circular reference: tag '{parent_id}' is a descendant of tag '{tag_id}' "
                    f"and cannot become its parent"
                )
        return None

    def has_cycle(self) -> bool:
        """Whole-graph check (Kahn's algorithm)"""
        pending = {node: len(parents) for node, parents in self.parents.items()}
        queue = deque(node for node, count in pending.items() if count == 0)
        removed = 0
        while queue:
            node = queue.popleft()
            removed += 1
            for child in self.children.get(node, ()):
                pending[child] -= 1
                if pending[child] == 0:
                    queue.append(child)
        return removed != len(pending)
