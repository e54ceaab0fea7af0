"""
Hierarchy-aware file search.

Requesting a tag matches files tagged with it or with any of its descendants.
Several requested tags are ANDed over the file's whole tag set.
"""

import structlog

from services.hierarchy import HierarchyGraph
from services.tag_service import ensure_tags_exist
from utils import unique_ids

logger = structlog.get_logger("search")


class FileSearchEngine:
    def __init__(self, store):
        self.store = store

    def search(self, name=None, tag_ids=None):
        """Files matching the name substring and every requested tag, ordered by name"""
        tag_ids = unique_ids(tag_ids)
        ensure_tags_exist(self.store, tag_ids)

        closures = []
        if tag_ids:
            graph = HierarchyGraph.from_store(self.store)
            closures = [graph.descendants(tag_id) for tag_id in tag_ids]

        files = self.store.search_files(name=name, tag_closures=closures)
        logger.debug("File search", name=name, tag_ids=tag_ids, results=len(files))
        return files
