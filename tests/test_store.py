import pytest

from pomoauth.core.security import get_password_hash
from pomoauth.core.store import SQLAlchemyUserStore, StoreError
from pomoauth.models.user import User


def test_create_assigns_id_and_timestamps(db):
    store = SQLAlchemyUserStore(db)

    user = store.create(email="a@x.com", username="a", password_hash=get_password_hash("pw"))

    assert isinstance(user.id, int)
    assert user.created_at is not None
    assert db.query(User).count() == 1


def test_find_by_field(db):
    store = SQLAlchemyUserStore(db)
    created = store.create(email="a@x.com", username="a", password_hash="$2b$10$x")

    assert store.find_by_field("email", "a@x.com").id == created.id
    assert store.find_by_field("id", created.id).email == "a@x.com"
    assert store.find_by_field("username", "a").id == created.id
    assert store.find_by_field("email", "nobody@x.com") is None
    assert store.find_by_field("id", created.id + 100) is None


def test_find_by_unknown_field_raises(db):
    store = SQLAlchemyUserStore(db)

    with pytest.raises(ValueError):
        store.find_by_field("password", "anything")


def test_duplicate_email_raises_store_error_and_session_recovers(db):
    store = SQLAlchemyUserStore(db)
    store.create(email="a@x.com", username="a", password_hash="h1")

    with pytest.raises(StoreError):
        store.create(email="a@x.com", username="b", password_hash="h2")

    other = store.create(email="b@x.com", username="b", password_hash="h3")
    assert other.id is not None
    assert db.query(User).count() == 2
