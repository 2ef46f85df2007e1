#!/usr/bin/env python3
"""
Test engine and session factory binding.
"""
import unittest
from unittest.mock import MagicMock, patch

import database.database as database_module
from core.config_loader import AppConfig, DatabaseConfig


class TestDatabaseBinding(unittest.TestCase):

    def setUp(self):
        saved = (database_module.engine, database_module.SessionLocal)
        database_module.engine = None
        database_module.SessionLocal = None

        def restore():
            database_module.engine, database_module.SessionLocal = saved
        self.addCleanup(restore)

    @patch('database.database.create_engine')
    @patch('database.database.load_config')
    def test_unconfigured_engine_falls_back_to_default_config(self, mock_load_config, mock_create_engine):
        mock_load_config.return_value = AppConfig(
            database=DatabaseConfig(url="postgresql://u:p@default-host:5432/talentmatch")
        )

        first = database_module.get_engine()
        second = database_module.get_engine()

        self.assertIs(first, second)
        mock_load_config.assert_called_once_with()
        mock_create_engine.assert_called_once_with(
            "postgresql://u:p@default-host:5432/talentmatch", pool_pre_ping=True
        )

    @patch('database.database.create_engine')
    @patch('database.database.load_config')
    def test_configure_replaces_earlier_binding(self, mock_load_config, mock_create_engine):
        old_engine, new_engine = MagicMock(), MagicMock()
        mock_create_engine.side_effect = [old_engine, new_engine]

        database_module.configure("postgresql://u:p@old-host:5432/a")
        database_module.configure("postgresql://u:p@new-host:5432/b")

        old_engine.dispose.assert_called_once()
        self.assertIs(database_module.get_engine(), new_engine)
        self.assertIs(database_module.get_session_factory().kw['bind'], new_engine)
        mock_load_config.assert_not_called()


if __name__ == '__main__':
    unittest.main()
