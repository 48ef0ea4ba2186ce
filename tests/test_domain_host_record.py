"""Tests for the descriptor-aware host record model."""

import pytest

from entrymapper.domain import UNDEFINED, HostRecord, RecordPropertyError, Symbol


def test_host_record_own_property_keys_follow_host_order() -> None:
    """List integer-like keys, then string keys, then symbols.

    Returns:
        None: Assertions validate own key ordering.

    Raises:
        AssertionError: Raised when own keys are misordered.
    """

    tag = Symbol("tag")
    record = HostRecord([("b", 1), (tag, "t"), ("a", 2), ("2", 3), ("1", 4)])
    record.record_define_property("hidden", 5, enumerable=False)

    assert record.record_own_property_keys() == ["1", "2", "b", "a", "hidden", tag]
    assert record.record_own_enumerable_string_entries() == [("b", 1), ("a", 2), ("2", 3), ("1", 4)]


def test_host_record_reads_inherited_members_through_prototype() -> None:
    """Resolve missing own keys through the prototype chain.

    Returns:
        None: Assertions validate inherited reads.

    Raises:
        AssertionError: Raised when prototype lookup is wrong.
    """

    base = HostRecord([("inherited", "yes")])
    record = HostRecord([("own", 1)], prototype=base)

    assert record["inherited"] == "yes"
    assert "inherited" in record
    assert record.record_get("missing") is UNDEFINED
    assert record.record_own_enumerable_string_entries() == [("own", 1)]
    with pytest.raises(KeyError):
        record["missing"]


def test_host_record_enforces_writable_and_configurable_flags() -> None:
    """Reject writes to read-only members and deletes of non-configurable ones.

    Returns:
        None: Assertions validate descriptor enforcement.

    Raises:
        AssertionError: Raised when a descriptor flag is ignored.
    """

    record = HostRecord()
    record.record_define_property("fixed", 1, writable=False, configurable=False)
    record.record_define_property("loose", 2)

    with pytest.raises(RecordPropertyError, match="read-only"):
        record["fixed"] = 10
    with pytest.raises(RecordPropertyError, match="non-configurable"):
        record.record_delete("fixed")

    record["loose"] = 20
    record.record_delete("loose")
    assert "loose" not in record
    assert record["fixed"] == 1


def test_host_record_freeze_blocks_all_changes() -> None:
    """Freeze existing members and block new ones.

    Returns:
        None: Assertions validate frozen behavior.

    Raises:
        AssertionError: Raised when a frozen record accepts changes.
    """

    record = HostRecord([("a", 1)]).record_freeze()

    assert record.record_is_frozen()
    descriptor = record.record_own_descriptor("a")
    assert descriptor is not None
    assert not descriptor.writable
    assert not descriptor.configurable
    with pytest.raises(RecordPropertyError):
        record["a"] = 2
    with pytest.raises(RecordPropertyError, match="frozen"):
        record["b"] = 2


def test_host_record_rejects_unsupported_key_types() -> None:
    """Reject keys that are neither strings nor symbols.

    Returns:
        None: Assertions validate key type checks.

    Raises:
        AssertionError: Raised when an integer key is accepted.
    """

    with pytest.raises(TypeError, match="str or Symbol"):
        HostRecord([(1, "one")])  # type: ignore[list-item]


def test_symbols_with_equal_descriptions_stay_distinct() -> None:
    """Keep symbol identity independent of description.

    Returns:
        None: Assertions validate symbol identity.

    Raises:
        AssertionError: Raised when two symbols compare equal.
    """

    first = Symbol("same")
    second = Symbol("same")
    record = HostRecord([(first, 1), (second, 2)])

    assert first != second
    assert record[first] == 1
    assert record[second] == 2


def test_host_record_container_protocol_covers_hidden_and_inherited_members() -> None:
    """Count and iterate own keys only while membership also sees inherited keys.

    Returns:
        None: Assertions validate container dunder behavior.

    Raises:
        AssertionError: Raised when container behavior differs.
    """

    tag = Symbol("tag")
    record = HostRecord([("b", 1), ("0", 2), (tag, 3)], prototype=HostRecord([("base", 4)]))
    record.record_define_property("hidden", 5, enumerable=False)

    assert len(record) == 4
    assert list(record) == ["0", "b", "hidden", tag]
    assert "base" in record
    assert tag in record
    assert 0 not in record
    assert not record.record_is_frozen()
    assert repr(HostRecord([("a", 1)])) == "HostRecord({'a': 1})"
