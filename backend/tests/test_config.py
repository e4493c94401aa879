from __future__ import annotations

import os
import unittest
from unittest.mock import patch

from tests._bootstrap import bootstrap_backend_imports, reset_caches


bootstrap_backend_imports()

from hueprint.config import Settings  # noqa: E402


class SettingsTests(unittest.TestCase):
    def setUp(self) -> None:
        reset_caches()

    def test_env_aliases(self) -> None:
        env = {"AVATAR_DEFAULT_SIZE": "64", "LOG_LEVEL": "debug", "CORS_ORIGINS": "http://a, ,http://b"}
        with patch.dict(os.environ, env):
            s = Settings(_env_file=None)
        self.assertEqual(s.avatar_default_size, 64)
        self.assertEqual(s.log_level, "DEBUG")
        self.assertEqual(s.cors_origins_list(), ["http://a", "http://b"])

    def test_postgres_driver_is_pinned(self) -> None:
        with patch.dict(os.environ, {"DATABASE_URL": "postgresql://u:p@h/db"}):
            s = Settings(_env_file=None)
        self.assertEqual(s.sqlalchemy_database_uri(), "postgresql+psycopg2://u:p@h/db")

    def test_sqlite_url_untouched(self) -> None:
        with patch.dict(os.environ, {"DATABASE_URL": "sqlite+pysqlite:///:memory:"}):
            s = Settings(_env_file=None)
        self.assertEqual(s.sqlalchemy_database_uri(), "sqlite+pysqlite:///:memory:")
