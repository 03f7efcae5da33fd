# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""HtmlElement module - nodes of the markup tree.

An HtmlElement gathers a tag name, an optional text and an ordered list of
child elements. Rendering is a recursive descent producing one line per tag
and one indented line for the text, if any.

Example:
    >>> ul = HtmlElement('ul')
    >>> ul.children.append(HtmlElement('li', 'hello'))
    >>> print(ul, end='')
    <ul>
      <li>
        hello
      </li>
    </ul>

Names and text are emitted as they are: no escaping is performed.
"""

from __future__ import annotations


class HtmlElement:
    """A node of the markup tree.

    Attributes:
        name: Tag identifier.
        text: Inner text. Empty (or blank) text emits no text line.
        children: Child elements in insertion order.
        indent_size: Spaces per nesting level used by render().
    """

    __slots__ = ('name', 'text', 'children')

    indent_size: int = 2

    def __init__(self, name: str = '', text: str = '') -> None:
        self.name = name
        self.text = text or ''
        self.children: list[HtmlElement] = []

    def __eq__(self, other: object) -> bool:
        """Two elements are equal if name, text and children match."""
        if not isinstance(other, HtmlElement):
            return NotImplemented
        return (
            self.name == other.name
            and self.text == other.text
            and self.children == other.children
        )

    def __repr__(self) -> str:
        return f"HtmlElement({self.name!r}, text={self.text!r}, children={len(self.children)})"

    def __str__(self) -> str:
        return self.render()

    def render(self, indent: int = 0) -> str:
        """Render this element and its descendants.

        Args:
            indent: Nesting level of this element. Each level adds
                ``indent_size`` spaces in front of every emitted line.

        Returns:
            The markup text, every line terminated by a newline.
        """
        spaces = ' ' * (self.indent_size * indent)
        lines = [f"{spaces}<{self.name}>\n"]

        if self.text.strip():
            lines.append(f"{' ' * (self.indent_size * (indent + 1))}{self.text}\n")

        for child in self.children:
            lines.append(child.render(indent + 1))

        lines.append(f"{spaces}</{self.name}>\n")
        return ''.join(lines)
