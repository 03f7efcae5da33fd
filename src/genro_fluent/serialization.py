# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Serialization of built values.

Element trees and entities are converted to plain dicts and encoded with
TYTX, which preserves Python types in the wire format. Entities carry the
fully qualified name of their class, so Entity subclasses defined at module
level come back with their own type and fields.

TYTX Transports:
    - 'json': JSON string
    - 'msgpack': Binary MessagePack

Example:
    >>> from genro_fluent import Entity, HtmlBuilder
    >>> from genro_fluent.serialization import to_tytx, from_tytx
    >>>
    >>> me = Entity.new().called('MyName').work_as('Dev').build()
    >>> from_tytx(to_tytx(me)) == me
    True
    >>> tree = HtmlBuilder('ul').add_child('li', 'hello').root
    >>> from_tytx(to_tytx(tree)) == tree
    True
"""

from __future__ import annotations

import dataclasses
import importlib
from typing import TYPE_CHECKING, Any, Literal

from genro_toolbox import safe_is_instance

if TYPE_CHECKING:
    from .element import HtmlElement
    from .entity import Entity


def element_to_dict(element: HtmlElement) -> dict[str, Any]:
    """Convert an element tree to nested dicts."""
    return {
        "name": element.name,
        "text": element.text,
        "children": [element_to_dict(child) for child in element.children],
    }


def element_from_dict(data: dict[str, Any]) -> HtmlElement:
    """Rebuild an element tree from element_to_dict() output."""
    from .element import HtmlElement

    element = HtmlElement(data["name"], data.get("text", ""))
    element.children.extend(element_from_dict(child) for child in data.get("children", ()))
    return element


def entity_to_dict(entity: Entity) -> dict[str, Any]:
    """Convert an entity to its class path and field values.

    Raises:
        TypeError: If the entity class is local to a function.
    """
    cls = type(entity)
    if "<locals>" in cls.__qualname__:
        raise TypeError(f"Cannot serialize {cls.__qualname__}: class is not importable")
    return {
        "class": f"{cls.__module__}:{cls.__qualname__}",
        "fields": dataclasses.asdict(entity),
    }


def entity_from_dict(data: dict[str, Any]) -> Entity:
    """Rebuild an entity from entity_to_dict() output."""
    from .entity import Entity

    module_name, _, qualname = data["class"].partition(":")
    cls: Any = importlib.import_module(module_name)
    for part in qualname.split("."):
        cls = getattr(cls, part)

    if not (isinstance(cls, type) and issubclass(cls, Entity)):
        raise ValueError(f"'{data['class']}' is not an Entity class")
    return cls(**data["fields"])


def to_tytx(
    value: HtmlElement | Entity,
    transport: Literal["json", "msgpack"] = "json",
) -> str | bytes:
    """Serialize an element tree or an entity to TYTX format.

    Args:
        value: An HtmlElement (the whole subtree is encoded) or an Entity.
        transport: 'json' for a JSON string, 'msgpack' for bytes.

    Returns:
        The serialized data.

    Raises:
        TypeError: If value is neither an HtmlElement nor an Entity, or is
            an Entity whose class cannot be imported back by name.
    """
    from genro_tytx import to_tytx as tytx_encode

    # safe_is_instance avoids importing the model modules here
    if safe_is_instance(value, "genro_fluent.element.HtmlElement"):
        data = {"element": element_to_dict(value)}
    elif safe_is_instance(value, "genro_fluent.entity.Entity"):
        data = {"entity": entity_to_dict(value)}
    else:
        raise TypeError(
            f"Cannot serialize {type(value).__name__}: expected HtmlElement or Entity"
        )

    # genro_tytx uses transport=None for JSON
    return tytx_encode(data, transport=None if transport == "json" else transport)


def from_tytx(
    data: str | bytes,
    transport: Literal["json", "msgpack"] = "json",
) -> HtmlElement | Entity:
    """Deserialize an element tree or an entity from TYTX format.

    Args:
        data: Serialized data from to_tytx().
        transport: Input format matching how data was serialized.

    Returns:
        The rebuilt HtmlElement or Entity.

    Raises:
        ValueError: If the payload holds neither an element nor an entity,
            or names a class that is not an Entity.
    """
    from genro_tytx import from_tytx as tytx_decode

    parsed = tytx_decode(data, transport=None if transport == "json" else transport)

    if "element" in parsed:
        return element_from_dict(parsed["element"])
    if "entity" in parsed:
        return entity_from_dict(parsed["entity"])
    raise ValueError(f"Unknown TYTX payload: expected 'element' or 'entity', got {list(parsed)}")
