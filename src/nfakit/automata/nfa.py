# Copyright 2026 Matt Chaput. All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
#    1. Redistributions of source code must retain the above copyright notice,
#       this list of conditions and the following disclaimer.
#
#    2. Redistributions in binary form must reproduce the above copyright
#       notice, this list of conditions and the following disclaimer in the
#       documentation and/or other materials provided with the distribution.
#
# THIS SOFTWARE IS PROVIDED BY MATT CHAPUT ``AS IS'' AND ANY EXPRESS OR
# IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE IMPLIED WARRANTIES OF
# MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO
# EVENT SHALL MATT CHAPUT OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT, INDIRECT,
# INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT
# LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA,
# OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF
# LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING
# NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE,
# EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
#
# The views and conclusions contained in the software and documentation are
# those of the authors and should not be interpreted as representing official
# policies, either expressed or implied, of Matt Chaput.

import sys

from loguru import logger

from nfakit.automata.fsa import EPSILON, FSA, State, is_symbol


def _names(states):
    return sorted(state.name for state in states)


class NFAState(State):
    """
    A state of a non-deterministic finite automaton.

    Each state maps transition labels to a *set* of destination states. The
    label is either a one-character input symbol or the ``EPSILON`` marker,
    so epsilon transitions live in the same mapping as ordinary ones and
    share one lookup path, but can never be mistaken for an input symbol.

    Attributes:
        name (str): The name of the state.
        transitions (dict): Maps labels to sets of destination states.

    Example:
        >>> a = NFAState("a")
        >>> b = NFAState("b")
        >>> a.add_transition("0", b)
        >>> a.transitions_on("0")
        frozenset({NFAState('b')})
        >>> a.transitions_on("1") is None
        True
    """

    def __init__(self, name):
        super().__init__(name)
        self.transitions = {}
        self._start = False

    def add_transition(self, symbol, target):
        """
        Adds ``target`` to the destinations of this state on ``symbol``.

        Adding the same edge twice has no further effect.

        Args:
            symbol (object): A one-character symbol or ``EPSILON``.
            target (NFAState): The destination state.
        """
        self.transitions.setdefault(symbol, set()).add(target)

    def transitions_on(self, symbol):
        """
        Returns the destinations of this state on ``symbol``.

        Args:
            symbol (object): A one-character symbol or ``EPSILON``.

        Returns:
            frozenset: The destination states, or None if this state has no
            transition on the symbol.
        """
        dests = self.transitions.get(symbol)
        if not dests:
            return None
        return frozenset(dests)

    to_states = transitions_on

    def epsilon_transitions(self):
        """
        Returns the states reachable from this one by a single epsilon move.

        Returns:
            frozenset: The epsilon destinations (empty if there are none).
        """
        return frozenset(self.transitions.get(EPSILON, ()))

    def labels(self):
        """Returns an iterator of the labels leaving this state."""
        return iter(self.transitions)

    def set_start(self, flag):
        self._start = bool(flag)

    def is_start(self):
        return self._start


class NFA(FSA):
    """
    NFA (Non-Deterministic Finite Automaton) with epsilon transitions.

    States are created by name with :meth:`add_state` and wired together with
    :meth:`add_transition`. Strings are simulated by tracking the set of all
    states that are active at once: the epsilon closure of the start state,
    then, for every input character, the epsilon closure of the states reached
    on that character.

    Attributes:
        states (dict): Maps state names to :class:`NFAState` objects.
        sigma (set): The declared input symbols. ``EPSILON`` is never a member.
        final_states (set): The accepting states.
        start (NFAState): The current start state, or None.
        epsilon_alias (str): A character that ``add_transition`` reads as
            epsilon, or None.

    Methods:
        add_state(name): Creates a new state.
        add_sigma(symbol): Declares an input symbol.
        set_start(name): Marks the start state.
        set_final(name): Marks a final state.
        add_transition(from_name, to_names, symbol): Adds edges.
        eclosure(state): Returns the epsilon closure of a state.
        closure(states): Returns the epsilon closure of a set of states.
        step(states, symbol): Returns the states reached on a symbol.
        accepts(string): Checks if the string is accepted.
        max_copies(string): Returns the largest active set seen for a string.
        is_dfa(): Checks if the transition structure is deterministic.

    Example:
        >>> nfa = NFA()
        >>> nfa.add_sigma("1")
        True
        >>> nfa.add_state("a"), nfa.add_state("b")
        (True, True)
        >>> nfa.set_start("a"), nfa.set_final("b")
        (True, True)
        >>> nfa.add_transition("a", {"b"}, "1")
        True
        >>> nfa.accepts("1")
        True
    """

    def __init__(self, epsilon_alias=None):
        """
        Initializes an empty NFA.

        Args:
            epsilon_alias (str, optional): A character that callers use to
                spell epsilon in :meth:`add_transition`. It is translated to
                ``EPSILON`` before anything is stored and can no longer be
                declared as an input symbol. Defaults to None, in which case
                only ``EPSILON`` itself denotes epsilon.

        Raises:
            ValueError: If the alias is not a one-character string.
        """
        super().__init__()
        if epsilon_alias is not None and not is_symbol(epsilon_alias):
            raise ValueError(f"Epsilon alias must be one character: {epsilon_alias!r}")
        self.epsilon_alias = epsilon_alias
        self.start = None

    def __repr__(self):
        return f"<{type(self).__name__} with {len(self)} states>"

    @property
    def start_state(self):
        return self.start

    def _label(self, symbol):
        if self.epsilon_alias is not None and symbol == self.epsilon_alias:
            return EPSILON
        return symbol

    # Mutation

    def add_state(self, name):
        """
        Creates a state with the given name and adds it to the automaton.

        Args:
            name (str): The name of the new state.

        Returns:
            bool: True if the state was created, False if the name is already
            taken (or is not a string). Nothing is changed on failure.
        """
        if not isinstance(name, str):
            logger.debug("Refusing state with non-string name {!r}", name)
            return False
        if name in self.states:
            logger.debug("State {!r} already exists", name)
            return False
        self.states[name] = NFAState(name)
        return True

    def add_sigma(self, symbol):
        """
        Adds a symbol to the input alphabet.

        Adding a symbol that is already declared is harmless. ``EPSILON``, the
        configured epsilon alias, and anything that is not a single character
        are refused.

        Args:
            symbol (str): The symbol to declare.

        Returns:
            bool: True if the symbol is (now) in the alphabet.
        """
        if symbol is EPSILON or (
            self.epsilon_alias is not None and symbol == self.epsilon_alias
        ):
            logger.debug("Epsilon cannot be an input symbol")
            return False
        if not is_symbol(symbol):
            logger.debug("Refusing input symbol {!r}", symbol)
            return False
        self.sigma.add(symbol)
        return True

    def set_start(self, name):
        """
        Marks the named state as the start state.

        Setting a new start state does not clear the start flag of the
        previous one: :meth:`is_start` keeps answering True for it, while the
        simulation only uses the most recent start state.

        Args:
            name (str): The name of the state.

        Returns:
            bool: False if no state has that name.
        """
        state = self.get_state(name)
        if state is None:
            logger.debug("Cannot set unknown state {!r} as start", name)
            return False
        if self.start is not None and self.start is not state:
            logger.warning(
                "Start state moved from {!r} to {!r}; {!r} keeps its start flag",
                self.start.name,
                name,
                self.start.name,
            )
        state.set_start(True)
        self.start = state
        return True

    def set_final(self, name):
        """
        Marks the named state as a final state.

        Args:
            name (str): The name of the state.

        Returns:
            bool: False if no state has that name.
        """
        state = self.get_state(name)
        if state is None:
            logger.debug("Cannot set unknown state {!r} as final", name)
            return False
        self.final_states.add(state)
        return True

    def add_transition(self, from_name, to_names, symbol):
        """
        Adds an edge from one state to each of a set of states on a symbol.

        Everything is checked before any edge is added, so a refused call
        leaves the automaton exactly as it was. As a side effect a successful
        call registers ``symbol`` in the alphabet (epsilon is never
        registered).

        Args:
            from_name (str): The name of the source state.
            to_names (iterable): The names of the destination states. A single
                name may be passed as a plain string.
            symbol (object): A declared input symbol, ``EPSILON``, or the
                configured epsilon alias.

        Returns:
            bool: False if the source is unknown, the symbol is neither epsilon
            nor declared, or any destination is unknown.

        Example:
            nfa.add_sigma("1")
            nfa.add_state("q2")
            nfa.add_state("q3")
            nfa.add_transition("q2", {"q2", "q3"}, "1")  # True
            nfa.add_transition("q2", {"q4"}, "1")  # False, q4 is unknown
        """
        src = self.get_state(from_name)
        if src is None:
            logger.debug("Unknown source state {!r}", from_name)
            return False

        label = self._label(symbol)
        if label is not EPSILON and label not in self.sigma:
            logger.debug("Symbol {!r} is not in the alphabet", symbol)
            return False

        if isinstance(to_names, str):
            to_names = (to_names,)
        targets = []
        missing = []
        for name in to_names:
            state = self.get_state(name)
            if state is None:
                missing.append(name)
            else:
                targets.append(state)
        if missing:
            logger.debug("Unknown destination states {!r}", sorted(missing, key=repr))
            return False

        for target in targets:
            src.add_transition(label, target)
        if label is not EPSILON:
            self.sigma.add(label)
        return True

    # Queries

    def is_start(self, name):
        """
        Checks if the named state carries the start flag.

        Args:
            name (str): The name of the state.

        Returns:
            bool: False for unknown names.
        """
        state = self.get_state(name)
        return state is not None and state.is_start()

    def get_to_state(self, state, symbol):
        """
        Returns the destinations of one state on one symbol.

        Args:
            state (NFAState): The source state.
            symbol (object): An input symbol, ``EPSILON`` or the epsilon alias.

        Returns:
            set: The destination states (empty if there are none).
        """
        dests = state.transitions_on(self._label(symbol))
        return set(dests) if dests else set()

    def triples(self):
        """
        Generates all (source state, label, destination state) triples.

        Yields:
            tuple: A triple (source state, label, destination state).
        """
        for src in self.states.values():
            for label, dests in src.transitions.items():
                for dest in dests:
                    yield src, label, dest

    def get_labels(self, states):
        """
        Returns the set of labels leaving any of the given states.

        Args:
            states (set): The set of states.

        Returns:
            set: The labels, which may include ``EPSILON``.
        """
        labels = set()
        for state in states:
            labels.update(state.labels())
        return labels

    def closure(self, states):
        """
        Expands a set of states by following epsilon transitions.

        The traversal keeps its own record of the states it has seen, so it
        terminates on cyclic epsilon graphs and nothing carries over from one
        call to the next.

        Args:
            states (iterable): The states to expand.

        Returns:
            frozenset: The given states plus every state reachable from them
            by epsilon transitions only.
        """
        seen = set(states)
        frontier = list(seen)
        while frontier:
            state = frontier.pop()
            for dest in state.transitions.get(EPSILON, ()):
                if dest not in seen:
                    seen.add(dest)
                    frontier.append(dest)
        return frozenset(seen)

    def eclosure(self, state):
        """
        Returns the epsilon closure of a single state.

        The closure always contains the state itself.

        Args:
            state (NFAState or str): The state, or its name.

        Returns:
            frozenset: The epsilon closure, or an empty set for an unknown name.

        Example:
            # With an epsilon edge from "b" to "a"
            nfa.eclosure("b")  # frozenset({NFAState("a"), NFAState("b")})
        """
        if not isinstance(state, NFAState):
            state = self.get_state(state)
        if state is None:
            return frozenset()
        return self.closure((state,))

    def step(self, states, symbol):
        """
        Returns the states reached from any of ``states`` on ``symbol``.

        States without a transition on the symbol contribute nothing, and a
        symbol outside the alphabet yields the empty set. The result is not
        epsilon-closed.

        A step never follows epsilon edges, however epsilon is spelled: neither
        ``EPSILON`` nor the epsilon alias is in the alphabet, so both yield the
        empty set. Use :meth:`closure` to follow epsilon edges.

        Args:
            states (iterable): The current states.
            symbol (str): The input symbol.

        Returns:
            frozenset: The union of the destination sets.
        """
        if symbol not in self.sigma:
            return frozenset()
        dests = set()
        for state in states:
            dests.update(state.transitions.get(symbol, ()))
        return frozenset(dests)

    def _simulate(self, string, debug=False):
        # Yields the active set before any input and after each character
        active = self.eclosure(self.start)
        if debug:
            logger.debug("start: {}", _names(active))
        yield active

        for char in string:
            active = self.closure(self.step(active, char))
            if debug:
                logger.debug("{!r} -> {}", char, _names(active))
            yield active
            if not active:
                # Nothing can become active again
                break

    def accepts(self, string, debug=False):
        """
        Checks if a given string is accepted by the automaton.

        The active set starts as the epsilon closure of the start state and is
        advanced once per character. Only the set left after the whole string
        has been read is tested against the final states.

        Args:
            string (str): The string to check.
            debug (bool, optional): Whether to log the active set after each
                step. Defaults to False.

        Returns:
            bool: True if the string is accepted. Always False when no start
            state has been set.
        """
        if self.start is None:
            return False
        active = frozenset()
        for active in self._simulate(string, debug):
            pass
        return not self.final_states.isdisjoint(active)

    def max_copies(self, string, debug=False):
        """
        Returns the largest number of states active at once for a string.

        This is the number of parallel copies a naive simulator has to run.
        The epsilon closure of the start state counts before any input is
        read, so the result is at least 1 whenever a start state exists.

        Args:
            string (str): The string to simulate.
            debug (bool, optional): Whether to log the active set after each
                step. Defaults to False.

        Returns:
            int: The maximum active set size, or -1 if no start state is set.
        """
        if self.start is None:
            return -1
        return max(len(active) for active in self._simulate(string, debug))

    def is_dfa(self):
        """
        Checks if the transition structure happens to be deterministic.

        This is a structural test: no state may have an epsilon transition and
        no (state, symbol) pair may lead to more than one state. Missing
        transitions are allowed.

        Returns:
            bool: True if the automaton is deterministic.
        """
        for state in self.states.values():
            if state.transitions.get(EPSILON):
                return False
            for symbol in self.sigma:
                if len(state.transitions.get(symbol, ())) > 1:
                    return False
        return True

    def dump(self, stream=sys.stdout):
        """
        Prints a textual representation of the NFA to the specified stream.

        Each state is printed on its own line, prefixed with ``@`` if it is
        the start state, followed by one indented line per edge. Final states
        are suffixed with ``||``.

        Args:
            stream (file): The stream to print to. Defaults to sys.stdout.

        Example:
            For a start state "a" looping on "0", moving to the final state "b"
            on "1", and an epsilon edge from "b" back to "a", ``nfa.dump()``
            prints:

            @ a
              0 -> a
              1 -> b||
              b||
              <EPSILON> -> a
        """
        finals = self.final_states
        for src in sorted(self.states.values()):
            beg = "@" if src is self.start else " "
            end = "||" if src in finals else ""
            print(f"{beg} {src.name}{end}", file=stream)
            labels = sorted(src.transitions, key=lambda lb: (lb is EPSILON, str(lb)))
            for label in labels:
                for dest in sorted(src.transitions[label]):
                    mark = "||" if dest in finals else ""
                    print(f"  {label} -> {dest.name}{mark}", file=stream)
