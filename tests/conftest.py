"""
Pytest configuration and shared fixtures.
"""

import pytest
from datetime import datetime
from pathlib import Path
from typing import Any, Dict

from contributors.database import Contributor, init_database, get_session
from contributors.logger import get_logger, reset_logger
from contributors.registry import AliasRegistry, reload_registry


@pytest.fixture(autouse=True)
def quiet_logger():
    """Fresh console-less logger for every test."""
    reset_logger()
    get_logger(enable_console=False)
    yield
    reset_logger()


@pytest.fixture
def restore_registry():
    """Put the shared registry back after tests that swap it."""
    yield
    reload_registry()


@pytest.fixture
def alias_table() -> Dict[str, Any]:
    """Small alias table with list and bare-string entries."""
    return {
        "Tom Robinson": ["Thomas Robinson", "tlrobinson"],
        "Jeremy Kemper": ["bitsweat", "jeremy@bitsweat.net"],
        "Nicholas Small": "nciagra",
    }


@pytest.fixture
def registry(alias_table) -> AliasRegistry:
    return AliasRegistry.build(alias_table)


@pytest.fixture
def populated_db(tmp_path) -> Path:
    """Create a contributor database with a few names."""
    db_path = tmp_path / "contributors.db"
    init_database(db_path)
    session = get_session(db_path)
    now = datetime.now()
    for name in ["Tom Robinson", "Tim Pope", "Jim Remsik"]:
        session.add(Contributor(name=name, created_at=now, updated_at=now))
    session.commit()
    session.close()
    return db_path
