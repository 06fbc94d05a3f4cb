"""Tests for the explicit schema sync step and logging setup."""

import logging

from sqlalchemy import inspect

from usergroups.core.database import create_tables, drop_tables
from usergroups.core.logging import configure_logging


def test_create_tables_is_idempotent(engine):
    create_tables(engine)

    assert set(inspect(engine).get_table_names()) == {"users", "groups", "user_group_relations"}


def test_drop_tables(engine):
    drop_tables(engine)

    assert inspect(engine).get_table_names() == []


def test_configure_logging_sets_level():
    root = logging.getLogger()
    previous_level, previous_handlers = root.level, list(root.handlers)
    try:
        configure_logging("debug")
        assert root.level == logging.DEBUG
    finally:
        root.handlers = previous_handlers
        root.setLevel(previous_level)
