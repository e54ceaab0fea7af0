"""
Repositories package

Each repository encapsulates database operations for a model:
- tag_repository.py: tags and parent edges
- files_repository.py: files and file search
- filetag_repository.py: file -> tag associations

store.py composes them into the store services are given.

Usage:
    from repositories.store import SQLAlchemyStore
    store = SQLAlchemyStore(db.session)
    tags = store.list_tags()
"""
