# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Entity - target of the self-typed builder chain.

Example:
    >>> me = Entity.new().called('MyName').work_as('Dev').build()
    >>> str(me)
    'Name: MyName, Position: Dev'
"""

from __future__ import annotations

from dataclasses import dataclass

from .builders.base_builder import JobBuilder


@dataclass
class Entity:
    """A person described by name and position.

    Fields are filled incrementally by the builder; both stay None until
    the corresponding builder operation is called.
    """

    name: str | None = None
    position: str | None = None

    class Builder(JobBuilder["Builder"]):
        """Concrete builder closing the self-typed recursion."""

        pass

    @classmethod
    def new(cls) -> Entity.Builder:
        """Return a concrete builder owning a fresh entity of this class."""
        return cls.Builder(cls())

    def __str__(self) -> str:
        return f"Name: {self.name}, Position: {self.position}"
