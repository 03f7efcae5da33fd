# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Genro-Fluent - Fluent builders for markup trees and entities.

Two independent builders:

- **HtmlBuilder**: builds an HtmlElement tree with chained add_child()
  and renders it as indented markup.
- **Entity.Builder**: self-typed builder chain where every inherited
  setter returns the concrete builder, so chains never lose methods.

Example:
    >>> from genro_fluent import Entity, HtmlBuilder
    >>> print(HtmlBuilder('ul').add_child('li', 'hello'), end='')
    <ul>
      <li>
        hello
      </li>
    </ul>
    >>> Entity.new().called('MyName').work_as('Dev').build()
    Entity(name='MyName', position='Dev')
"""

__version__ = "0.1.0"

from .builders import EntityBuilder, HtmlBuilder, InfoBuilder, JobBuilder
from .element import HtmlElement
from .entity import Entity
from .exceptions import FluentBuilderError, InvalidTagError, InvalidTextError, SelfTypeError

__all__ = [
    # Tree builder
    "HtmlElement",
    "HtmlBuilder",
    # Self-typed chain
    "Entity",
    "EntityBuilder",
    "InfoBuilder",
    "JobBuilder",
    # Exceptions
    "FluentBuilderError",
    "InvalidTagError",
    "InvalidTextError",
    "SelfTypeError",
]
