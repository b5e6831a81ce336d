import pytest
from fastapi.testclient import TestClient

from costcalc.core.config import Settings
from costcalc.db.dal import Database
from costcalc.db.schema import init_db
from costcalc.main import create_app


@pytest.fixture
def settings(tmp_path):
    return Settings(data_dir=tmp_path, db_path=tmp_path / "test.db", _env_file=None)


@pytest.fixture
def db(tmp_path):
    path = tmp_path / "prefs.db"
    init_db(path)
    return Database(path)


@pytest.fixture
def client(settings):
    app = create_app(settings_override=settings)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_client(tmp_path):
    def _make(**overrides):
        s = Settings(data_dir=tmp_path, db_path=tmp_path / "test.db", _env_file=None, **overrides)
        return TestClient(create_app(settings_override=s))

    return _make
