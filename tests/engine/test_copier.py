"""Tests for the deep copy engine."""

import array
import logging
import re
from collections import OrderedDict, UserList, defaultdict, deque
from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple

import pytest
from pydantic import BaseModel

from deepclone import (
    ConstructionError,
    CopySettings,
    DeepCopier,
    DeepCopyError,
    ReflectionAccessError,
    StrategyRegistry,
    deep_copy,
)


class Status(Enum):
    ACTIVE = "active"
    CLOSED = "closed"


class Pair(NamedTuple):
    left: list[int]
    right: list[int]


@dataclass
class Team:
    name: str
    members: list = field(default_factory=list)
    status: Status = Status.ACTIVE


@dataclass(frozen=True)
class Frozen:
    values: list[int]


@dataclass(slots=True)
class Slotted:
    values: list[int]
    label: str = "s"


class Base:
    __slots__ = ("value",)


class Shadowing(Base):
    __slots__ = ("value",)


class Clicks:
    def __init__(self):
        self.count = 0

    def on_event(self, event):
        self.count += 1


class Button:
    def __init__(self, label: str, handler):
        self.label = label
        self.handler = handler


@dataclass
class Rule:
    name: str
    pattern: re.Pattern
    hits: list = field(default_factory=list)


class Account(BaseModel):
    owner: str
    tags: list[str] = []


class Unbuildable:
    def __init__(self, name: str):
        raise RuntimeError("cannot be rebuilt")


class Node:
    def __init__(self, label: str):
        self.label = label
        self.next = None


def _cause_chain(error):
    while error is not None:
        yield error
        error = error.__cause__


# Null and immutable values


def test_copy_of_none_is_none(copier):
    assert copier.copy(None) is None
    assert deep_copy(None) is None


@pytest.mark.parametrize("value", [42, 3.14, "Hello, World!", True, b"raw", Status.ACTIVE])
def test_immutable_values_are_shared(copier, value):
    """CRITICAL: Immutable values come back as the same reference.

    Why: They can never change, so sharing is safe and duplicating is waste.
    """
    assert copier.copy(value) is value


# Arrays


def test_tuple_is_rebuilt_with_copied_elements(copier):
    inner = [1, 2]
    original = (inner, "x")

    copied = copier.copy(original)

    assert copied == original
    assert copied is not original
    assert copied[0] is not inner
    assert copied[1] is original[1]


def test_named_tuple_keeps_type(copier):
    original = Pair([1], [2])

    copied = copier.copy(original)

    assert type(copied) is Pair
    assert copied == original
    assert copied.left is not original.left


def test_typed_array_keeps_element_type(copier):
    original = array.array("i", [1, 2, 3])

    copied = copier.copy(original)

    assert copied == original
    assert copied is not original
    assert copied.typecode == "i"


def test_frozenset_is_rebuilt(copier):
    original = frozenset({1, 2, 3})
    copied = copier.copy(original)
    assert copied == original
    assert type(copied) is frozenset


# Collections


def test_list_copy_preserves_order_and_independence(copier):
    original = [3, 1, [2]]

    copied = copier.copy(original)

    assert copied == original
    assert copied is not original
    assert copied[2] is not original[2]


def test_list_with_nones_and_empty_list(copier):
    assert copier.copy([None, None]) == [None, None]
    empty = []
    copied = copier.copy(empty)
    assert copied == []
    assert copied is not empty


def test_set_copy(copier):
    original = {"a", "b", "c"}
    copied = copier.copy(original)
    assert copied == original
    assert copied is not original


def test_deque_stays_queue_like(copier):
    original = deque([[1], [2]])

    copied = copier.copy(original)

    assert isinstance(copied, deque)
    assert list(copied) == [[1], [2]]
    assert copied[0] is not original[0]


def test_list_subclass_becomes_plain_list(copier):
    """Concrete container type is not preserved, only the structural category."""
    original = UserList([1, [2]])

    copied = copier.copy(original)

    assert isinstance(copied, list)
    assert copied == [1, [2]]


# Maps


def test_dict_copy(copier):
    original = {"one": 1, "two": 2}

    copied = copier.copy(original)

    assert copied == original
    assert copied is not original
    assert list(copied) == ["one", "two"]


def test_ordered_dict_keeps_order(copier):
    original = OrderedDict([("b", [1]), ("a", [2])])

    copied = copier.copy(original)

    assert isinstance(copied, OrderedDict)
    assert list(copied.items()) == [("b", [1]), ("a", [2])]
    assert copied["b"] is not original["b"]


def test_defaultdict_keeps_factory(copier):
    original = defaultdict(list, {"a": [1]})

    copied = copier.copy(original)
    copied["new"].append(2)

    assert copied["a"] == [1]
    assert "new" not in original


def test_tuple_keys_stay_hashable(copier):
    original = {(1, 2): "pair"}
    assert copier.copy(original) == original


# Composites


def test_plain_object_copy(copier, andrey):
    """Scenario: Person with a nested list of books."""
    copied = copier.copy(andrey)

    assert copied == andrey
    assert copied is not andrey
    assert copied.books is not andrey.books
    assert copied.books == ["B1", "B2", "B3"]
    assert copied.name is andrey.name


def test_mutation_independence(copier, andrey):
    copied = copier.copy(andrey)

    copied.books.append("B4")
    andrey.age = 26

    assert andrey.books == ["B1", "B2", "B3"]
    assert copied.age == 25


def test_dataclass_copy_shares_enum(copier):
    team = Team("core", [[1], [2]], Status.CLOSED)

    copied = copier.copy(team)

    assert copied == team
    assert copied.members[0] is not team.members[0]
    assert copied.status is Status.CLOSED


def test_frozen_dataclass_copy(copier):
    original = Frozen([1, 2])

    copied = copier.copy(original)

    assert copied == original
    assert copied.values is not original.values


def test_slotted_dataclass_copy(copier):
    original = Slotted([1], "label")

    copied = copier.copy(original)

    assert copied == original
    assert copied.values is not original.values


def test_shadowed_slots_are_copied_independently(copier):
    original = Shadowing()
    Base.__dict__["value"].__set__(original, ["base"])
    original.value = ["derived"]

    copied = copier.copy(original)

    assert copied.value == ["derived"]
    assert Base.__dict__["value"].__get__(copied, Base) == ["base"]
    assert copied.value is not original.value


def test_runtime_attributes_are_copied(copier, person_cls):
    original = person_cls("Ann", 30)
    original.nickname = ["annie"]

    copied = copier.copy(original)

    assert copied.nickname == ["annie"]
    assert copied.nickname is not original.nickname


def test_pydantic_model_copy(copier):
    original = Account(owner="ann", tags=["x"])

    copied = copier.copy(original)

    assert copied == original
    assert copied is not original
    assert copied.tags is not original.tags


def test_bound_method_callback_is_shared(copier):
    """CRITICAL: A bound method is code, not data, and is shared as is.

    Why: Rebuilding a method object is impossible and would drop its receiver.
    """
    clicks = Clicks()
    original = Button("OK", clicks.on_event)

    copied = copier.copy(original)

    assert copied is not original
    assert copied.label == "OK"
    assert copied.handler is original.handler
    copied.handler(None)
    assert clicks.count == 1


def test_compiled_pattern_is_shared(copier):
    original = Rule("repeats", re.compile("a+"), [["aaa"]])

    copied = copier.copy(original)

    assert copied == original
    assert copied.pattern is original.pattern
    assert copied.hits[0] is not original.hits[0]
    assert copied.pattern.fullmatch("aaa")


# Errors


def test_construction_failure_is_wrapped(copier):
    """CRITICAL: Callers only ever see DeepCopyError, with the real cause attached.

    Why: deep_copy is all-or-nothing; one failure kind keeps handling simple.
    """
    with pytest.raises(DeepCopyError) as exc_info:
        copier.copy({"nested": [Unbuildable.__new__(Unbuildable)]})

    error = exc_info.value
    assert error.source_type is dict
    assert isinstance(error.cause, ConstructionError)
    assert error.__cause__ is error.cause
    assert error.cause.target is Unbuildable


def test_failure_is_logged_at_debug(copier, caplog):
    with caplog.at_level(logging.DEBUG, logger="deepclone.engine.copier"):
        with pytest.raises(DeepCopyError):
            copier.copy([Unbuildable.__new__(Unbuildable)])

    messages = [r.getMessage() for r in caplog.records if r.name == "deepclone.engine.copier"]
    assert any(m.startswith("Deep copy of list failed") for m in messages)


@pytest.mark.parametrize("log_probing", [True, False])
def test_probing_log_follows_settings(caplog, log_probing):
    copier = DeepCopier(
        CopySettings(log_probing=log_probing), strategies=StrategyRegistry()
    )

    with caplog.at_level(logging.DEBUG, logger="deepclone.core.reflection.builder"):
        copier.copy(Node("leaf"))

    probed = any("Probing constructor of Node" in r.getMessage() for r in caplog.records)
    assert probed is log_probing


def test_access_failure_is_wrapped(copier):
    class Locked:
        __slots__ = ("value",)

        @classmethod
        def __build_empty__(cls):
            return object()

    locked = Locked()
    locked.value = 1

    with pytest.raises(DeepCopyError) as exc_info:
        copier.copy(locked)

    assert isinstance(exc_info.value.cause, ReflectionAccessError)


def test_bare_allocation_setting_allows_unbuildable_types():
    copier = DeepCopier(CopySettings(allow_bare_allocation=True), strategies=StrategyRegistry())
    original = Unbuildable.__new__(Unbuildable)
    original.data = [1]

    with pytest.warns(RuntimeWarning):
        copied = copier.copy(original)

    assert copied.data == [1]
    assert copied.data is not original.data


# Cycles


def test_cycles_fail_without_tracking(copier):
    """Cyclic graphs are a documented limitation unless cycle tracking is enabled."""
    head = Node("head")
    head.next = head

    with pytest.raises(DeepCopyError) as exc_info:
        copier.copy(head)

    assert any(isinstance(error, RecursionError) for error in _cause_chain(exc_info.value))


def test_cycles_are_preserved_with_tracking(cycle_copier):
    head = Node("head")
    tail = Node("tail")
    head.next = tail
    tail.next = head

    copied = cycle_copier.copy(head)

    assert copied is not head
    assert copied.next is not tail
    assert copied.next.next is copied
    assert copied.next.label == "tail"


def test_self_containing_list_with_tracking(cycle_copier):
    original: list = [1]
    original.append(original)

    copied = cycle_copier.copy(original)

    assert copied is not original
    assert copied[1] is copied


def test_shared_sub_objects_stay_shared_with_tracking(cycle_copier, copier):
    shared = [1]
    original = {"a": shared, "b": shared}

    tracked = cycle_copier.copy(original)
    untracked = copier.copy(original)

    assert tracked["a"] is tracked["b"]
    assert untracked["a"] is not untracked["b"]


def test_tuple_cycle_through_list_with_tracking(cycle_copier):
    inner: list = []
    outer = (inner,)
    inner.append(outer)

    copied = cycle_copier.copy(outer)

    assert copied[0][0] is copied


# Determinism


def test_repeated_copies_are_equal_and_distinct(copier, andrey):
    first = copier.copy(andrey)
    second = copier.copy(andrey)

    assert first == second
    assert first is not second
    assert first.books is not second.books


def test_copy_of_copy_equals_original(copier, andrey):
    assert copier.copy(copier.copy(andrey)) == andrey


def test_module_level_deep_copy(andrey):
    copied = deep_copy(andrey)
    assert copied == andrey
    assert copied is not andrey


def test_module_level_deep_copy_with_settings():
    original: list = []
    original.append(original)

    copied = deep_copy(original, settings=CopySettings(preserve_cycles=True))

    assert copied[0] is copied
