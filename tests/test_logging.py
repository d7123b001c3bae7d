import pytest
from loguru import logger

from nfakit.automata.fsa import EPSILON
from nfakit.automata.nfa import NFA


@pytest.fixture
def records():
    logger.enable("nfakit")
    found = []
    handler_id = logger.add(lambda message: found.append(message.record), level="DEBUG")
    yield found
    logger.remove(handler_id)
    logger.disable("nfakit")


def messages(records, level=None):
    return [r["message"] for r in records if level is None or r["level"].name == level]


def test_quiet_by_default():
    found = []
    handler_id = logger.add(lambda message: found.append(message), level="TRACE")
    try:
        nfa = NFA()
        assert not nfa.add_transition("missing", {"x"}, "a")
    finally:
        logger.remove(handler_id)
    assert found == []


def test_rejections_logged(records):
    nfa = NFA()
    nfa.add_sigma("a")
    nfa.add_state("a")
    assert not nfa.add_state("a")
    assert not nfa.add_sigma(EPSILON)
    assert not nfa.add_transition("a", {"nope", "gone"}, "a")
    assert not nfa.add_transition("a", {"a"}, "b")

    logged = messages(records, "DEBUG")
    assert "State 'a' already exists" in logged
    assert "Epsilon cannot be an input symbol" in logged
    assert "Unknown destination states ['gone', 'nope']" in logged
    assert "Symbol 'b' is not in the alphabet" in logged


def test_start_replacement_warns(records):
    nfa = NFA()
    nfa.add_state("a")
    nfa.add_state("b")
    nfa.set_start("a")
    nfa.set_start("a")
    assert messages(records, "WARNING") == []
    nfa.set_start("b")
    assert messages(records, "WARNING") == [
        "Start state moved from 'a' to 'b'; 'a' keeps its start flag"
    ]


def test_debug_steps(records):
    nfa = NFA()
    nfa.add_sigma("0")
    nfa.add_sigma("1")
    nfa.add_state("a")
    nfa.add_state("b")
    nfa.set_start("a")
    nfa.set_final("b")
    nfa.add_transition("a", {"b"}, "1")
    nfa.add_transition("b", {"a"}, EPSILON)

    assert nfa.accepts("10", debug=True) is False
    assert messages(records) == ["start: ['a']", "'1' -> ['a', 'b']", "'0' -> []"]

    del records[:]
    assert nfa.accepts("1")
    assert records == []
