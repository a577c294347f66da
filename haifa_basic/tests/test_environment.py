import pytest

from haifa_basic.environment import BasicEnvironment


def test_unset_variable_reads_zero():
    env = BasicEnvironment()
    assert env.read("X") == 0.0
    assert env.snapshot() == {}


def test_write_always_overwrites():
    env = BasicEnvironment()
    env.write("X", 1.0)
    env.write("X", 2.0)
    assert env.read("X") == 2.0
    assert env.snapshot() == {"X": 2.0}


def test_names_are_case_insensitive():
    env = BasicEnvironment()
    env.write("total", 4.0)
    assert env.read("TOTAL") == 4.0


def test_full_name_is_significant_by_default():
    env = BasicEnvironment()
    env.write("COUNT", 5.0)
    env.write("CO", 1.0)
    assert env.read("COUNT") == 5.0
    assert env.read("CO") == 1.0
    assert env.snapshot() == {"COUNT": 5.0, "CO": 1.0}


def test_prefix_identity_applies_to_reads_and_writes():
    env = BasicEnvironment(significant_length=2)
    env.write("COUNT", 5.0)
    assert env.read("CO") == 5.0
    assert env.read("COUNTER") == 5.0
    env.write("CO", 1.0)
    assert env.read("COUNT") == 1.0
    assert env.snapshot() == {"CO": 1.0}


def test_significant_length_must_be_positive():
    with pytest.raises(ValueError):
        BasicEnvironment(significant_length=0)


def test_format_lists_sorted_variables():
    env = BasicEnvironment()
    env.write("B", 2.5)
    env.write("A", 1.0)
    assert env.format() == "A: 1\nB: 2.5"
