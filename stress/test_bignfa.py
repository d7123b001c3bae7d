import random

from nfakit.automata.fsa import EPSILON
from nfakit.automata.nfa import NFA


def kth_from_last(k):
    # Accepts binary strings whose k-th symbol from the end is "1"
    nfa = NFA()
    nfa.add_sigma("0")
    nfa.add_sigma("1")
    for i in range(k + 1):
        nfa.add_state(f"q{i}")
    nfa.set_start("q0")
    nfa.set_final(f"q{k}")
    nfa.add_transition("q0", {"q0"}, "0")
    nfa.add_transition("q0", {"q0", "q1"}, "1")
    for i in range(1, k):
        nfa.add_transition(f"q{i}", {f"q{i + 1}"}, "0")
        nfa.add_transition(f"q{i}", {f"q{i + 1}"}, "1")
    return nfa


def test_kth_from_last():
    k = 12
    nfa = kth_from_last(k)
    assert not nfa.is_dfa()
    rng = random.Random(0)
    for _ in range(200):
        string = "".join(rng.choice("01") for _ in range(rng.randint(0, 40)))
        expected = len(string) >= k and string[-k] == "1"
        assert nfa.accepts(string) == expected


def test_kth_from_last_copies():
    k = 20
    nfa = kth_from_last(k)
    assert nfa.max_copies("") == 1
    assert nfa.max_copies("0" * 1000) == 1
    assert nfa.max_copies("1" * 5) == 6
    assert nfa.max_copies("1" * 1000) == k + 1


def test_long_epsilon_chain():
    n = 5000
    nfa = NFA()
    nfa.add_sigma("x")
    for i in range(n):
        nfa.add_state(f"s{i}")
    nfa.set_start("s0")
    nfa.set_final(f"s{n - 1}")
    for i in range(n - 1):
        nfa.add_transition(f"s{i}", {f"s{i + 1}"}, EPSILON)
    nfa.add_transition(f"s{n - 1}", {"s0"}, EPSILON)

    assert len(nfa.eclosure("s0")) == n
    assert nfa.accepts("")
    assert not nfa.accepts("x")
    assert nfa.max_copies("xx") == n
