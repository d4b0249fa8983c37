# src/scifi_classes/people/person.py

from __future__ import annotations

import sys
from typing import Optional, TextIO

DEFAULT_NAME = "Anonymous"
DEFAULT_TIME_OF_DAY = "day"


def _clean(value: Optional[str]) -> str:
    return (value or "").strip()


class Person:
    """
    A named entity that produces greeting strings.

    ``name`` is null-resettable: assigning ``None`` or a blank string stores
    the default placeholder instead, so greetings never contain an empty
    name segment.

    Examples:
        Person("Ada").greet()                       -> "Hi, I'm Ada"
        Person("Ada").greet("Hello there,")         -> "Hello there, Ada"
        Person().greet_at_time("Ada", "morning")    -> "Good morning, Ada"
    """

    def __init__(self, name: Optional[str] = None, *, default_name: str = DEFAULT_NAME):
        self.default_name = _clean(default_name) or DEFAULT_NAME
        self._name = self.default_name
        self.set_name(name)

    def __repr__(self) -> str:
        return f"Person(name={self._name!r})"

    # ---------------------------------------------------------
    # Name
    # ---------------------------------------------------------
    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: Optional[str]) -> None:
        self.set_name(value)

    def set_name(self, value: Optional[str]) -> None:
        """Replace the name; empty or absent resets to the default."""
        self._name = _clean(value) or self.default_name

    # ---------------------------------------------------------
    # Greetings
    # ---------------------------------------------------------
    def greet(self, custom_greeting: Optional[str] = None) -> str:
        greeting = _clean(custom_greeting)
        if not greeting:
            return f"Hi, I'm {self._name}"
        return f"{greeting} {self._name}"

    def greeting_for_time(self, time: Optional[str]) -> str:
        return f"Good {_clean(time) or DEFAULT_TIME_OF_DAY}"

    def greet_at_time(self, name: Optional[str], time: Optional[str]) -> str:
        """Greet ``name`` for a time-of-day label such as "morning"."""
        return f"{self.greeting_for_time(time)}, {_clean(name) or self.default_name}"

    # ---------------------------------------------------------
    # Printing
    # ---------------------------------------------------------
    def print_greeting(
        self,
        custom_greeting: Optional[str] = None,
        stream: Optional[TextIO] = None,
    ) -> str:
        text = self.greet(custom_greeting)
        print(text, file=stream or sys.stdout)
        return text

    def print_greeting_at_time(
        self,
        name: Optional[str],
        time: Optional[str],
        stream: Optional[TextIO] = None,
    ) -> str:
        text = self.greet_at_time(name, time)
        print(text, file=stream or sys.stdout)
        return text
