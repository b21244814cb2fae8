from __future__ import annotations

from pathlib import Path
import sys

import pytest

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from code_server import CodeStore, ServerSettings, create_app


@pytest.fixture
def settings() -> ServerSettings:
    return ServerSettings(cors_origins=["http://localhost:3000"], log_level="DEBUG")


@pytest.fixture
def store() -> CodeStore:
    return CodeStore()


@pytest.fixture
def app(settings, store):
    app = create_app(settings, store=store)
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    return app.test_client()
