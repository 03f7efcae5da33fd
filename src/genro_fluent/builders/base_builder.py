# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Self-typed builder chain - fluent builder inheritance.

Each level of the hierarchy adds its own setters and returns ``SelfT``,
the concrete builder that closes the recursion, so an inherited setter
never narrows the chain back to the class that defines it.

Hierarchy:
    - **EntityBuilder**: owns the draft entity, exposes build()
    - **InfoBuilder[SelfT]**: called(name)
    - **JobBuilder[SelfT]**: work_as(position)

Closing the recursion:
    >>> class Builder(JobBuilder["Builder"]):
    ...     pass
    >>> Builder().called('MyName').work_as('Dev').build()
    Entity(name='MyName', position='Dev')

Without the self type, called() would return an InfoBuilder and the
following work_as() would not exist on it.

Adding a level means subclassing the last generic level and closing it
again in a new concrete builder:
    >>> class EducationBuilder(JobBuilder[EduSelfT]):
    ...     def studied_at(self, school: str) -> EduSelfT:
    ...         self._assign(school=school)
    ...         return self._as_self('studied_at')

The self type is a contract that static checkers verify. At runtime it is
checked on every chained call: an open generic or a wrong closing type
raises SelfTypeError.
"""

from __future__ import annotations

import logging
from abc import ABC
from typing import TYPE_CHECKING, Any, ForwardRef, Generic, TypeVar, get_args, get_origin

from ..exceptions import SelfTypeError

if TYPE_CHECKING:
    from ..entity import Entity

logger = logging.getLogger(__name__)

InfoSelfT = TypeVar("InfoSelfT", bound="InfoBuilder[Any]")
JobSelfT = TypeVar("JobSelfT", bound="JobBuilder[Any]")


class EntityBuilder(ABC):
    """Root of the builder hierarchy: owns the entity under construction.

    Subclasses reach the draft only through ``_entity`` and ``_assign()``.

    Attributes:
        _self_type: Closing type recorded at class creation. None while the
            class is still generic, a class once closed, or a str when the
            forward reference could not be resolved.
    """

    _self_type: type | str | None = None

    def __init__(self, entity: Entity | None = None) -> None:
        """Initialize the builder.

        Args:
            entity: Draft to fill. If None, a new empty Entity is created.

        Raises:
            TypeError: If EntityBuilder itself is instantiated.
        """
        if type(self) is EntityBuilder:
            raise TypeError("Can't instantiate abstract class EntityBuilder; use a builder level")
        if entity is None:
            from ..entity import Entity
            entity = Entity()
        self.__entity = entity

    def __init_subclass__(cls, **kwargs: Any) -> None:
        """Record the self type when a subclass closes the recursion."""
        super().__init_subclass__(**kwargs)

        # Only bases declared on this class, not the inherited ones
        for base in cls.__dict__.get("__orig_bases__", ()):
            origin = get_origin(base)
            if not (isinstance(origin, type) and issubclass(origin, EntityBuilder)):
                continue
            args = get_args(base)
            if not args or isinstance(args[0], TypeVar):
                continue

            closing = args[0]
            if isinstance(closing, ForwardRef):
                closing = closing.__forward_arg__
            if isinstance(closing, str) and closing in (cls.__name__, cls.__qualname__):
                closing = cls
            cls._self_type = closing

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.__entity!r})"

    @property
    def _entity(self) -> Entity:
        """The draft entity."""
        return self.__entity

    def _assign(self, **fields: Any) -> None:
        """Set fields on the draft entity."""
        for field, value in fields.items():
            setattr(self.__entity, field, value)

    def _as_self(self, operation: str) -> Any:
        """Return self after checking it satisfies the closing self type.

        Args:
            operation: Name of the chained operation, used in messages.

        Raises:
            SelfTypeError: If the builder is an open generic or does not
                match the type that closes its recursion.
        """
        cls = type(self)
        self_type = cls._self_type

        if self_type is None:
            raise SelfTypeError(
                f"{cls.__name__}.{operation}(): '{cls.__name__}' is an open self-typed "
                f"builder; subclass it as 'class Builder({cls.__name__}[\"Builder\"])'"
            )
        if isinstance(self_type, str):
            names = {c.__name__ for c in cls.__mro__} | {c.__qualname__ for c in cls.__mro__}
            if self_type not in names:
                raise SelfTypeError(
                    f"{cls.__name__}.{operation}(): self type '{self_type}' "
                    f"does not name '{cls.__name__}' or one of its bases"
                )
            type_name = self_type
        else:
            if not isinstance(self, self_type):
                raise SelfTypeError(
                    f"{cls.__name__}.{operation}(): '{cls.__name__}' is not "
                    f"a '{self_type.__name__}'"
                )
            type_name = self_type.__name__

        logger.debug("%s.%s - self type: %s", _defining_class(cls, operation), operation, type_name)
        return self

    def build(self) -> Entity:
        """Return the entity under construction."""
        return self.__entity


def _defining_class(cls: type, operation: str) -> str:
    """Name of the first class in the MRO defining operation."""
    for klass in cls.__mro__:
        if operation in klass.__dict__:
            return klass.__name__
    return cls.__name__


class InfoBuilder(EntityBuilder, Generic[InfoSelfT]):
    """Builder level for personal information."""

    def called(self, name: str) -> InfoSelfT:
        """Set the entity name."""
        self._assign(name=name)
        return self._as_self("called")  # type: ignore[no-any-return]


class JobBuilder(InfoBuilder[JobSelfT]):
    """Builder level for job information."""

    def work_as(self, position: str) -> JobSelfT:
        """Set the entity position."""
        self._assign(position=position)
        return self._as_self("work_as")  # type: ignore[no-any-return]
