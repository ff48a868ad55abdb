import pytest
from sqlalchemy import text

from products_api.repositories.product_repo import ProductStoreError
from products_api.services.product_validator import validate_product


def _values(**fields):
    result = validate_product(fields)
    assert result.valid, result.errors
    return result.value


def test_create_then_get_round_trip(repo):
    created = repo.create(_values(name="Widget", price=9.99, category="tools", stock=5, description="blue"))
    assert isinstance(created.id, int) and created.id > 0

    fetched = repo.get(created.id)
    assert fetched is not None
    for f in ("id", "name", "price", "category", "stock", "description"):
        assert getattr(fetched, f) == getattr(created, f)
    assert fetched.price == 9.99


def test_list_returns_all_rows(repo):
    assert repo.list() == []
    repo.create(_values(name="A", price=1))
    repo.create(_values(name="B", price=2))
    assert sorted(p.name for p in repo.list()) == ["A", "B"]


def test_get_missing_returns_none(repo):
    assert repo.get(999999) is None


def test_update_replaces_every_field(repo):
    p = repo.create(_values(name="Widget", price=9.99, category="tools", stock=5, description="blue"))
    updated = repo.update(p.id, _values(name="Widget2", price=12.5))
    assert updated.id == p.id
    assert updated.name == "Widget2"
    assert updated.price == 12.5
    assert updated.category == ""
    assert updated.stock == 0
    assert updated.description == ""


def test_update_missing_returns_none(repo):
    assert repo.update(42, _values(name="Ghost", price=1)) is None
    assert repo.list() == []


def test_delete(repo):
    p = repo.create(_values(name="Gone", price=1))
    assert repo.delete(p.id) is True
    assert repo.get(p.id) is None
    assert repo.delete(p.id) is False


def test_delete_missing_on_empty_table(repo):
    assert repo.delete(999999) is False


def test_ids_not_reused_after_delete(repo):
    first = repo.create(_values(name="One", price=1))
    repo.delete(first.id)
    second = repo.create(_values(name="Two", price=1))
    assert second.id > first.id


def test_store_fault_raises_store_error(repo, database):
    with database.engine.begin() as conn:
        conn.execute(text("DROP TABLE products"))
    with pytest.raises(ProductStoreError):
        repo.list()
    with pytest.raises(ProductStoreError):
        repo.create(_values(name="A", price=1))
    with pytest.raises(ProductStoreError):
        repo.delete(1)


def test_integer_overflow_becomes_store_error(repo):
    values = _values(name="Huge", price=1)
    values.stock = 10**20
    with pytest.raises(ProductStoreError):
        repo.create(values)
    # the session was rolled back, the repository keeps working
    assert repo.list() == []
    assert repo.create(_values(name="Small", price=1)).id > 0
