import asyncio

import pytest

from app.core.exceptions import DuplicateEmailError, NotConnectedError, ResourceNotFoundError
from app.db.store import UserStore


def test_starts_disconnected_with_seed_data(store):
    assert store.is_connected is False
    assert len(store._users) == 2


async def test_connect_and_disconnect(store):
    assert await store.connect() is True
    assert store.is_connected is True

    assert await store.disconnect() is True
    assert store.is_connected is False


async def test_connect_twice_keeps_state(connected_store):
    await connected_store.connect()
    assert connected_store.is_connected is True
    assert len(await connected_store.list_all()) == 2


@pytest.mark.parametrize("operation, args", [
    ("list_all", ()),
    ("find_by_id", ("some-id",)),
    ("find_by_email", ("john@example.com",)),
    ("create", ({"name": "Test User", "email": "test@example.com", "age": 25},)),
    ("update", ("some-id", {"age": 26})),
    ("delete", ("some-id",)),
    ("clear", ()),
])
async def test_operations_require_connection(store, operation, args):
    with pytest.raises(NotConnectedError, match="Database not connected"):
        await getattr(store, operation)(*args)


async def test_list_all_returns_seed_users(connected_store):
    users = await connected_store.list_all()

    assert [u.email for u in users] == ["john@example.com", "jane@example.com"]
    assert all(u.id for u in users)


async def test_list_all_empty_after_clear(connected_store):
    assert await connected_store.clear() is True
    assert await connected_store.list_all() == []


async def test_find_by_id(connected_store):
    users = await connected_store.list_all()

    user = await connected_store.find_by_id(users[0].id)

    assert user.id == users[0].id
    assert user.name == "John Doe"
    assert await connected_store.find_by_id("non-existent-id") is None


async def test_find_by_email_is_exact(connected_store):
    user = await connected_store.find_by_email("john@example.com")

    assert user.name == "John Doe"
    assert await connected_store.find_by_email("JOHN@example.com") is None
    assert await connected_store.find_by_email("nobody@example.com") is None


async def test_create_assigns_id_and_timestamps(connected_store):
    user = await connected_store.create({"name": "Test User", "email": "test@example.com", "age": 25})

    assert user.id
    assert user.name == "Test User"
    assert user.age == 25
    assert user.created_at == user.updated_at
    assert user.created_at.tzinfo is not None

    ids = [u.id for u in await connected_store.list_all()]
    assert ids.count(user.id) == 1
    assert len(ids) == 3


async def test_create_rejects_duplicate_email(connected_store):
    with pytest.raises(DuplicateEmailError, match="User with this email already exists"):
        await connected_store.create({"name": "Other", "email": "john@example.com", "age": 40})

    john = await connected_store.find_by_email("john@example.com")
    assert john.name == "John Doe"
    assert john.age == 30


async def test_update_merges_patch(connected_store):
    original = (await connected_store.list_all())[0]

    updated = await connected_store.update(original.id, {"name": "John Updated", "age": 31})

    assert updated.id == original.id
    assert updated.name == "John Updated"
    assert updated.age == 31
    assert updated.email == original.email
    assert updated.created_at == original.created_at
    assert updated.updated_at > original.updated_at


async def test_update_ignores_store_owned_fields(connected_store):
    original = (await connected_store.list_all())[0]

    updated = await connected_store.update(original.id, {"id": "hijacked", "createdAt": "2000-01-01"})

    assert updated.id == original.id
    assert updated.created_at == original.created_at
    assert await connected_store.find_by_id("hijacked") is None


async def test_update_same_email_is_allowed(connected_store):
    john = await connected_store.find_by_email("john@example.com")

    updated = await connected_store.update(john.id, {"email": "john@example.com"})

    assert updated.email == "john@example.com"


async def test_update_rejects_duplicate_email(connected_store):
    john = await connected_store.find_by_email("john@example.com")

    with pytest.raises(DuplicateEmailError):
        await connected_store.update(john.id, {"email": "jane@example.com"})

    assert (await connected_store.find_by_id(john.id)).email == "john@example.com"


async def test_update_missing_user(connected_store):
    with pytest.raises(ResourceNotFoundError, match="User not found"):
        await connected_store.update("non-existent-id", {"age": 40})


async def test_delete(connected_store):
    john = await connected_store.find_by_email("john@example.com")

    assert await connected_store.delete(john.id) is True
    assert await connected_store.find_by_id(john.id) is None

    with pytest.raises(ResourceNotFoundError):
        await connected_store.delete(john.id)


async def test_returned_records_are_copies(connected_store):
    john = await connected_store.find_by_email("john@example.com")
    john.name = "Mutated Outside"

    assert (await connected_store.find_by_id(john.id)).name == "John Doe"


async def test_seed_data_after_clear(connected_store):
    await connected_store.clear()
    connected_store.seed_data()

    assert len(await connected_store.list_all()) == 2


async def test_unseeded_store_is_empty():
    store = UserStore(latency=0, connect_latency=0, seed=False)
    await store.connect()

    assert await store.list_all() == []


async def test_concurrent_creates_keep_emails_unique(connected_store):
    payload = {"name": "Racer", "email": "race@example.com", "age": 20}

    results = await asyncio.gather(
        connected_store.create(payload),
        connected_store.create(payload),
        return_exceptions=True,
    )

    created = [r for r in results if not isinstance(r, Exception)]
    failed = [r for r in results if isinstance(r, DuplicateEmailError)]
    assert len(created) == 1
    assert len(failed) == 1


async def test_data_consistency_across_operations(connected_store):
    user = await connected_store.create({"name": "Consistency", "email": "c@example.com", "age": 30})

    await connected_store.update(user.id, {"age": 31})
    assert (await connected_store.find_by_id(user.id)).age == 31

    await connected_store.delete(user.id)
    assert await connected_store.find_by_id(user.id) is None
