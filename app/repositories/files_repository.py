"""
Repository for Files database operations
"""

from sqlalchemy import select
from sqlalchemy.orm import selectinload
from models.files import Files
from models.filetag import FileTag
from models.records import FileRecord, TagRef


def _to_record(item):
    return FileRecord(
        id=item.id,
        path=item.path,
        name=item.name,
        tags=[TagRef(id=t.id, name=t.name, color=t.color) for t in item.tags],
    )


class FilesRepository:
    """Repository for Files database operations"""

    def __init__(self, session):
        self.session = session

    def exists(self, id):
        """Check whether a File with this ID exists"""
        return self.session.get(Files, id) is not None

    def exists_by_path(self, path):
        """Check whether a File with this path exists"""
        return self.session.query(Files.id).filter(Files.path == path).first() is not None

    def get_by_id(self, id):
        """Get Files by ID, with its tags"""
        item = self.session.query(Files).options(selectinload(Files.tags)).filter(Files.id == id).first()
        return _to_record(item) if item else None

    def get_id_by_path(self, path):
        """Get the ID of the file stored under a path"""
        row = self.session.query(Files.id).filter(Files.path == path).first()
        return row[0] if row else None

    def get_path_by_id(self, id):
        """Get the path of a file"""
        row = self.session.query(Files.path).filter(Files.id == id).first()
        return row[0] if row else None

    def create(self, path, name):
        """Create new Files record and return its ID"""
        item = Files(path=path, name=name)
        self.session.add(item)
        self.session.flush()
        return item.id

    def delete(self, id):
        """Delete Files record and its tag associations"""
        item = self.session.get(Files, id)
        if not item:
            return False

        self.session.query(FileTag).filter(FileTag.file_id == id).delete()
        self.session.delete(item)
        self.session.flush()
        return True

    def search(self, name=None, tag_closures=None):
        """
        Files whose name contains `name` and whose tag set meets every closure.

        Each entry of `tag_closures` is a set of tag ids; a file qualifies for
        it when at least one of its own tags is in the set. Conditions are
        applied per file, so different tags of the same file may satisfy
        different closures.
        """
        query = self.session.query(Files).options(selectinload(Files.tags))

        if name is not None:
            query = query.filter(Files.name.contains(name, autoescape=True))

        for closure in tag_closures or []:
            tagged = select(FileTag.file_id).where(FileTag.tag_id.in_(sorted(closure)))
            query = query.filter(Files.id.in_(tagged))

        return [_to_record(item) for item in query.order_by(Files.name, Files.id).all()]
