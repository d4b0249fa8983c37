"""
People package: the greeting-capable ``Person`` entity.
"""

from scifi_classes.people.person import DEFAULT_NAME, DEFAULT_TIME_OF_DAY, Person

__all__ = [
    "DEFAULT_NAME",
    "DEFAULT_TIME_OF_DAY",
    "Person",
]
