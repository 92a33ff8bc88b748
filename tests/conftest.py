import pytest
from variant_builder import create_app
from variant_builder import extensions
from variant_builder.extensions import db as _db
from variant_builder.models.option import Option


@pytest.fixture(scope="session")
def app():
    """Create application for testing."""
    app = create_app("testing")
    with app.app_context():
        _db.create_all()
        yield app
        _db.drop_all()


@pytest.fixture(autouse=True)
def fresh_records(app):
    """Each test starts with an empty in-memory record store."""
    extensions.init_record_store(app)
    yield extensions.record_store


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def db(app):
    """Per-test database session with rollback."""
    with app.app_context():
        _db.session.begin_nested()
        yield _db
        _db.session.rollback()


@pytest.fixture
def color_size():
    """Color=[Black, White] and Size=[S, M]."""
    return [
        Option(id="opt-color", name="Color", values=["Black", "White"]),
        Option(id="opt-size", name="Size", values=["S", "M"]),
    ]
