"""
Pytest fixtures and configuration for TaggedFS tests
"""
import os
import sys
import tempfile
import pytest
from unittest.mock import MagicMock

# Settings must never touch the real config directory
os.environ.setdefault('TAGGEDFS_CONFIG_DIR', tempfile.mkdtemp(prefix='taggedfs-test-config-'))

# Add app directory to path
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'app'))
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))


@pytest.fixture
def app(tmp_path):
    """Flask app backed by a throwaway SQLite database"""
    from app import create_app
    return create_app({
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': 'sqlite:///' + str(tmp_path / 'test.sqlite3'),
    })


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture(params=['memory', 'sqlalchemy'])
def store(request):
    """Every service test runs against the in-memory store and the SQL store"""
    if request.param == 'memory':
        from fakes import MemoryStore
        yield MemoryStore()
        return

    from db import db
    from repositories.store import SQLAlchemyStore
    flask_app = request.getfixturevalue('app')
    with flask_app.app_context():
        yield SQLAlchemyStore(db.session)


@pytest.fixture
def tag_tree(store):
    """
    Small hierarchy used across tests:

        media
        ├── music
        │   └── jazz
        └── video
        work
    """
    from services.tag_service import TagService
    service = TagService(store)
    media = service.add_tag('media', '#112233')
    music = service.add_tag('music', '#445566', [media.id])
    jazz = service.add_tag('jazz', '#778899', [music.id])
    video = service.add_tag('video', '#AABBCC', [media.id])
    work = service.add_tag('work', '#DDEEFF')
    return {t.name: t.id for t in (media, music, jazz, video, work)}


@pytest.fixture
def mock_logger():
    """Create a mock logger for testing"""
    logger = MagicMock()
    logger.info = MagicMock()
    logger.error = MagicMock()
    logger.warning = MagicMock()
    logger.debug = MagicMock()
    return logger
