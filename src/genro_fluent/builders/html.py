# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""HtmlBuilder - fluent builder for a markup tree.

The builder wraps a root HtmlElement and appends children to it through
a chainable add_child(). The result is rendered as indented markup.

Example:
    Building a list::

        from genro_fluent.builders import HtmlBuilder

        builder = HtmlBuilder('ul')
        builder.add_child('li', 'hello').add_child('li', 'world')
        print(builder)

    Output::

        <ul>
          <li>
            hello
          </li>
          <li>
            world
          </li>
        </ul>
"""

from __future__ import annotations

import logging
from typing import Any

from ..element import HtmlElement
from ..exceptions import InvalidTagError, InvalidTextError

logger = logging.getLogger(__name__)


def _check_tag(name: Any) -> str:
    """Return name if usable as a tag, raise InvalidTagError otherwise."""
    if not isinstance(name, str):
        raise InvalidTagError(f"Tag name must be a str, not {type(name).__name__}")
    if not name.strip():
        raise InvalidTagError("Tag name cannot be empty")
    return name


def _check_text(text: Any) -> str:
    """Return text if usable as element text, raise InvalidTextError otherwise."""
    if text is None:
        return ''
    if not isinstance(text, str):
        raise InvalidTextError(f"Element text must be a str, not {type(text).__name__}")
    return text


class HtmlBuilder:
    """Fluent builder for an HtmlElement tree.

    Attributes:
        root: The element under construction.
    """

    def __init__(self, root_name: str) -> None:
        """Initialize the builder with an empty root element.

        Args:
            root_name: Tag name of the root element. Kept for reset().

        Raises:
            InvalidTagError: If root_name is empty or not a string.
        """
        self._root_name = _check_tag(root_name)
        self._root = HtmlElement(self._root_name)

    def __repr__(self) -> str:
        return f"HtmlBuilder({self._root_name!r}, children={len(self._root.children)})"

    def __str__(self) -> str:
        return self.render()

    @property
    def root(self) -> HtmlElement:
        """The current root element."""
        return self._root

    def add_child(self, child_name: str, child_text: str = '') -> HtmlBuilder:
        """Append a new element to the root.

        Args:
            child_name: Tag name of the child.
            child_text: Inner text of the child. Empty means no text line.

        Returns:
            This builder, for chaining.

        Raises:
            InvalidTagError: If child_name is empty or not a string.
            InvalidTextError: If child_text is not a string.
        """
        self._root.children.append(HtmlElement(_check_tag(child_name), _check_text(child_text)))
        return self

    def reset(self) -> None:
        """Discard all children, keeping the original root name."""
        logger.debug(
            "Resetting <%s>, discarding %d children",
            self._root_name, len(self._root.children),
        )
        self._root = HtmlElement(self._root_name)

    def render(self) -> str:
        """Render the tree starting at indentation level 0."""
        return self._root.render()
