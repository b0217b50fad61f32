from sqlalchemy import create_engine, text

from scripts.init_db import SAMPLE_CUSTOMERS, seed_only


def test_schema_only(tmp_path):
    url = f"sqlite:///{tmp_path/'init.db'}"
    assert seed_only(database_url=url) == 0
    engine = create_engine(url, future=True)
    with engine.connect() as conn:
        assert conn.execute(text("SELECT COUNT(*) FROM Customers")).scalar_one() == 0
    engine.dispose()


def test_seed_is_idempotent(tmp_path):
    url = f"sqlite:///{tmp_path/'init.db'}"
    assert seed_only(database_url=url, seed=True) == len(SAMPLE_CUSTOMERS)
    assert seed_only(database_url=url, seed=True) == 0
    engine = create_engine(url, future=True)
    with engine.connect() as conn:
        assert conn.execute(text("SELECT COUNT(*) FROM Customers")).scalar_one() == len(SAMPLE_CUSTOMERS)
    engine.dispose()
