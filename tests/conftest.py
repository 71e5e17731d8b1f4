import pytest

from inventory_app.db import create_db_engine, create_session_factory, init_db
from inventory_app.repositories.product_repo import ProductRepository


class RecordingRepository(ProductRepository):
    """ProductRepository that remembers which write operations were called."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.calls = []

    def insert(self, product):
        self.calls.append(("insert", dict(product)))
        return super().insert(product)

    def update(self, product_id, values):
        self.calls.append(("update", product_id, dict(values)))
        return super().update(product_id, values)

    def delete(self, product_id):
        self.calls.append(("delete", product_id))
        return super().delete(product_id)


@pytest.fixture
def engine(tmp_path):
    eng = create_db_engine(f"sqlite:///{tmp_path / 'inventory.db'}")
    init_db(eng, reset=True)
    yield eng
    eng.dispose()


@pytest.fixture
def repo(engine, tmp_path):
    return RecordingRepository(
        create_session_factory(engine), locks_dir=str(tmp_path / "locks")
    )


@pytest.fixture
def broken_repo(tmp_path):
    # schema never created: every statement fails inside SQLAlchemy
    eng = create_db_engine(f"sqlite:///{tmp_path / 'empty.db'}")
    yield ProductRepository(create_session_factory(eng), locks_dir=str(tmp_path / "locks"))
    eng.dispose()
