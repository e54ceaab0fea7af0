"""
Repository for FileTag database operations
"""

from models.filetag import FileTag


class FileTagRepository:
    """Repository for FileTag database operations"""

    def __init__(self, session):
        self.session = session

    def get_tag_ids_by_file_id(self, file_id):
        """Get the IDs of all tags directly attached to a file"""
        rows = self.session.query(FileTag.tag_id).filter(FileTag.file_id == file_id).all()
        return {r[0] for r in rows}

    def create(self, file_id, tag_id):
        """Create new FileTag record"""
        self.session.add(FileTag(file_id=file_id, tag_id=tag_id))
        self.session.flush()

    def delete_by_file_and_tag(self, file_id, tag_id):
        """Delete a specific file-tag association"""
        deleted = self.session.query(FileTag).filter_by(file_id=file_id, tag_id=tag_id).delete()
        return deleted > 0
