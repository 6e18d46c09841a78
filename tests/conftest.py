"""Configuration for pytest."""
import sys
import os

# Add the project root to Python path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

# Common test fixtures can be defined here
import pytest
from unittest.mock import MagicMock, Mock


@pytest.fixture
def mock_settings():
    """Mock application settings for testing."""
    settings = Mock()
    settings.app_name = "Test API Biblia"
    settings.debug = True
    settings.db_name = "test_db"
    settings.db_user = "test_user"
    settings.db_password = "test_password"
    settings.db_host = "localhost"
    settings.db_port = 5432
    settings.db_pool_min = 1
    settings.db_pool_max = 5
    settings.db_pool_timeout = 30.0
    settings.db_config = {
        "dbname": "test_db",
        "user": "test_user",
        "password": "test_password",
        "host": "localhost",
        "port": 5432,
    }
    settings.search_default_limit = 20
    settings.search_max_limit = 200
    settings.allowed_origins = ["*"]
    return settings


@pytest.fixture
def mock_db():
    """Mock Database handle whose connection() yields a connection with a cursor.

    Usage in tests:
        def test_something(self, mock_db):
            db, conn, cur = mock_db
            cur.fetchone.return_value = {"id": 1}
            # ... call repository method ...
            cur.execute.assert_called_once()
    """
    mock_cursor = MagicMock()
    mock_conn = MagicMock()
    mock_conn.cursor.return_value.__enter__ = MagicMock(return_value=mock_cursor)
    mock_conn.cursor.return_value.__exit__ = MagicMock(return_value=False)

    db = MagicMock()
    db.connection.return_value.__enter__ = MagicMock(return_value=mock_conn)
    db.connection.return_value.__exit__ = MagicMock(return_value=False)
    return db, mock_conn, mock_cursor
