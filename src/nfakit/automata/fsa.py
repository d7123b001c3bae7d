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

# Marker constants


class Marker:
    """
    Represents a marker object.

    Markers are singletons that stand for something other than a literal
    input character. The automata in this package use them as transition
    labels that can never be equal to a character of the input alphabet.

    Attributes:
        name (str): The name of the marker.

    Example:
        >>> marker = Marker("EPSILON")
        >>> marker.name
        'EPSILON'
        >>> repr(marker)
        '<EPSILON>'
    """

    def __init__(self, name):
        """
        Initializes a new Marker object.

        Args:
            name (str): The name of the marker.
        """
        self.name = name

    def __repr__(self):
        return f"<{self.name}>"


EPSILON = Marker("EPSILON")


def is_symbol(label):
    """
    Returns True if the label can be declared as an input symbol.

    Input symbols are single characters. Markers (such as ``EPSILON``) and
    strings of any other length are not symbols.

    Args:
        label (object): The label to check.

    Returns:
        bool: True if the label is a one-character string.
    """
    return isinstance(label, str) and len(label) == 1


# States


class State:
    """
    Base class for a named automaton state.

    A state is identified by its name alone: two states with the same name
    compare equal and hash the same, so a name can be unique only once per
    automaton.

    Attributes:
        name (str): The name of the state. It must not change after creation.

    Raises:
        TypeError: If the name is not a string.
    """

    def __init__(self, name):
        if not isinstance(name, str):
            raise TypeError(f"State name must be a string, not {name!r}")
        self._name = name

    @property
    def name(self):
        return self._name

    def get_name(self):
        """
        Returns the name of the state.

        Returns:
            str: The name of the state.
        """
        return self._name

    def __eq__(self, other):
        return type(self) is type(other) and self._name == other._name

    def __hash__(self):
        return hash((type(self).__name__, self._name))

    def __lt__(self, other):
        if not isinstance(other, State):
            return NotImplemented
        return self._name < other._name

    def __repr__(self):
        return f"{type(self).__name__}({self._name!r})"

    def __str__(self):
        return self._name


# Base class


class FSA:
    """
    Finite State Automaton (FSA) base class.

    This class describes the surface shared by finite automata that are built
    one state at a time by name and then queried. Every fallible mutation
    returns a boolean success flag instead of raising, and every query on an
    unknown name answers ``False`` or ``None``.

    Attributes:
        states (dict): Maps state names to state objects.
        sigma (set): The declared input alphabet.
        final_states (set): The accepting states.

    Methods:
        __len__(): Returns the total number of states in the automaton.
        __contains__(name): Checks if a state with the given name exists.
        all_states(): Returns a set of all states in the automaton.
        add_state(name): Creates and registers a new state.
        add_sigma(symbol): Adds a symbol to the alphabet.
        get_sigma(): Returns a copy of the alphabet.
        get_state(name): Looks up a state by name.
        set_start(name): Marks a state as the start state.
        set_final(name): Marks a state as a final state.
        is_start(name): Checks if a named state is the start state.
        is_final(name): Checks if a named state is a final state.
        accepts(string): Checks if a given string is accepted by the automaton.
    """

    def __init__(self):
        """
        Initialize an empty Finite State Automaton (FSA).

        Attributes:
            states (dict): Maps state names to state objects.
            sigma (set): The declared input symbols.
            final_states (set): A set of final states in the FSA.
        """
        self.states = {}
        self.sigma = set()
        self.final_states = set()

    def __len__(self):
        """
        Returns the number of states in the finite state automaton.

        :return: The number of states in the automaton.
        :rtype: int
        """
        return len(self.states)

    def __contains__(self, name):
        return isinstance(name, str) and name in self.states

    def all_states(self):
        """
        Returns a set of all states in the automaton.

        Returns:
            set: A set of all states in the automaton.
        """
        return set(self.states.values())

    def get_sigma(self):
        """
        Returns a copy of the input alphabet.

        Changing the returned set does not change the automaton.

        Returns:
            set: The declared input symbols.
        """
        return set(self.sigma)

    def get_state(self, name):
        """
        Returns the state with the given name.

        Args:
            name (str): The name of the state.

        Returns:
            State: The state, or None if no state has that name. Anything
            that is not a string names no state.
        """
        if not isinstance(name, str):
            return None
        return self.states.get(name)

    def is_final(self, name):
        """
        Checks if the named state is a final state.

        Unknown names are not final; the method never raises.

        Args:
            name (str): The name of the state to check.

        Returns:
            bool: True if the state exists and is final, False otherwise.
        """
        state = self.get_state(name)
        return state is not None and state in self.final_states

    def add_state(self, name):
        """
        Creates a state with the given name and adds it to the automaton.

        Args:
            name (str): The name of the new state.

        Returns:
            bool: False if a state with that name already exists.

        Raises:
            NotImplementedError: This method should be implemented in a subclass.
        """
        raise NotImplementedError

    def add_sigma(self, symbol):
        """
        Adds a symbol to the input alphabet.

        Args:
            symbol (str): The symbol to add.

        Returns:
            bool: False if the symbol cannot be part of an alphabet.

        Raises:
            NotImplementedError: This method should be implemented in a subclass.
        """
        raise NotImplementedError

    def set_start(self, name):
        """
        Marks the named state as the start state.

        Raises:
            NotImplementedError: This method should be implemented in a subclass.
        """
        raise NotImplementedError

    def set_final(self, name):
        """
        Marks the named state as a final state.

        Raises:
            NotImplementedError: This method should be implemented in a subclass.
        """
        raise NotImplementedError

    def is_start(self, name):
        """
        Checks if the named state is flagged as a start state.

        Raises:
            NotImplementedError: This method should be implemented in a subclass.
        """
        raise NotImplementedError

    def accepts(self, string, debug=False):
        """
        Checks if a given string is accepted by the automaton.

        Args:
            string (str): The string to check.
            debug (bool, optional): Whether to log each step. Defaults to False.

        Returns:
            bool: True if the string is accepted, False otherwise.

        Raises:
            NotImplementedError: This method should be implemented in a subclass.
        """
        raise NotImplementedError
