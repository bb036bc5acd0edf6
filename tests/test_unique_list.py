# tests/test_unique_list.py

from dataclasses import dataclass

import pytest

from bizbook.model.uniquelist import (
    DuplicateItemError,
    ItemNotFoundError,
    UniqueList,
    UniqueListItem,
)

from conftest import make_appointment, make_client, make_expense, make_service


@dataclass(frozen=True)
class Item:
    """Identified by `key` only; `payload` is a mutable-in-spirit secondary field."""
    key: str
    payload: str = ""

    def is_same(self, other) -> bool:
        return isinstance(other, Item) and other.key == self.key


@dataclass(frozen=True)
class OneSided:
    """An item whose is_same only recognises `Item`s, never the other way round."""
    key: str

    def is_same(self, other) -> bool:
        return isinstance(other, (Item, OneSided)) and other.key == self.key


@pytest.fixture
def items() -> UniqueList:
    return UniqueList([Item("a"), Item("b"), Item("c")])


def test_item_satisfies_protocol():
    assert isinstance(Item("a"), UniqueListItem)
    assert isinstance(make_client(), UniqueListItem)


def test_add_rejects_same_identity_with_different_fields():
    """Two items with the same identifying field are duplicates even if other fields differ."""
    unique = UniqueList()
    unique.add(Item("a", "first"))

    with pytest.raises(DuplicateItemError):
        unique.add(Item("a", "second"))

    assert unique.as_list() == (Item("a", "first"),)


def test_add_clients_with_same_phone_is_duplicate():
    unique = UniqueList()
    unique.add(make_client(name="Alice Tan", phone="91234567"))

    with pytest.raises(DuplicateItemError):
        unique.add(make_client(name="Alicia Tan", phone="91234567", email="a@example.com"))
    assert len(unique) == 1


def test_add_appends_at_end(items: UniqueList):
    items.add(Item("d"))
    assert [i.key for i in items] == ["a", "b", "c", "d"]


def test_contains_uses_identity(items: UniqueList):
    assert items.contains(Item("b", "anything"))
    assert Item("b") in items
    assert not items.contains(Item("z"))
    assert "b" not in items


def test_set_item_keeps_position_and_allows_self_match(items: UniqueList):
    """Editing a non-identity field must not clash with the item itself."""
    items.set_item(Item("b"), Item("b", "edited"))

    assert items.as_list() == (Item("a"), Item("b", "edited"), Item("c"))


def test_set_item_can_change_identity(items: UniqueList):
    items.set_item(Item("b"), Item("x"))
    assert [i.key for i in items] == ["a", "x", "c"]


def test_set_item_into_other_identity_fails(items: UniqueList):
    with pytest.raises(DuplicateItemError):
        items.set_item(Item("b"), Item("c", "stolen"))

    assert items.as_list() == (Item("a"), Item("b"), Item("c"))


def test_set_item_missing_target_fails(items: UniqueList):
    with pytest.raises(ItemNotFoundError):
        items.set_item(Item("z"), Item("y"))


def test_remove_shifts_later_items(items: UniqueList):
    items.remove(Item("a", "payload is ignored"))
    assert [i.key for i in items] == ["b", "c"]


def test_remove_missing_fails_and_keeps_size(items: UniqueList):
    with pytest.raises(ItemNotFoundError):
        items.remove(Item("z"))
    assert len(items) == 3


def test_set_all_replaces_contents(items: UniqueList):
    items.set_all([Item("x"), Item("y")])
    assert [i.key for i in items] == ["x", "y"]


def test_set_all_accepts_another_unique_list(items: UniqueList):
    other = UniqueList([Item("q")])
    other.set_all(items)
    assert other == items


def test_set_all_with_internal_duplicate_leaves_list_unchanged(items: UniqueList):
    before = items.as_list()

    with pytest.raises(DuplicateItemError):
        items.set_all([Item("x"), Item("y"), Item("x", "again")])

    assert items.as_list() == before


def test_constructor_rejects_duplicates():
    with pytest.raises(DuplicateItemError):
        UniqueList([Item("a"), Item("a")])


def test_as_list_is_a_snapshot(items: UniqueList):
    snapshot = items.as_list()
    items.add(Item("d"))
    items.remove(Item("a"))

    assert [i.key for i in snapshot] == ["a", "b", "c"]


def test_mutation_during_iteration_is_safe(items: UniqueList):
    seen = []
    for item in items:
        seen.append(item.key)
        items.remove(item)

    assert seen == ["a", "b", "c"]
    assert len(items) == 0


def test_one_sided_is_same_still_counts_as_duplicate():
    """`Item.is_same` does not know OneSided, but OneSided recognises Item."""
    unique = UniqueList([Item("a")])

    with pytest.raises(DuplicateItemError):
        unique.add(OneSided("a"))
    with pytest.raises(DuplicateItemError):
        UniqueList([OneSided("k"), Item("k")])


@pytest.mark.parametrize(
    "a, b",
    [
        (make_client(), make_client(name="Renamed Person")),
        (make_service(), make_service(title="Pedicure", amount="45")),
        (make_expense(), make_expense()),
        (make_appointment(), make_appointment(service=make_service(code="SC001"))),
    ],
)
def test_domain_identity_is_reflexive_and_symmetric(a, b):
    assert a.is_same(a)
    assert b.is_same(b)
    assert a.is_same(b)
    assert b.is_same(a)


@pytest.mark.parametrize(
    "a, b",
    [
        (make_client(), make_client(phone="88887777")),
        (make_service(), make_service(code="SC001")),
        (make_expense(), make_expense(value="11")),
        (make_appointment(), make_appointment(hour=14)),
    ],
)
def test_domain_identity_distinguishes_different_entities(a, b):
    assert not a.is_same(b)
    assert not b.is_same(a)
