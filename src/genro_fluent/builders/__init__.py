# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Builders for markup trees and entities.

Builder Types:
    - **HtmlBuilder**: fluent builder for an HtmlElement tree
    - **EntityBuilder**: root of the self-typed entity builder chain
    - **InfoBuilder** / **JobBuilder**: generic self-typed builder levels

Example:
    >>> from genro_fluent.builders import HtmlBuilder
    >>>
    >>> builder = HtmlBuilder('ul')
    >>> builder.add_child('li', 'hello').add_child('li', 'world')
"""

from genro_fluent.builders.base_builder import EntityBuilder, InfoBuilder, JobBuilder
from genro_fluent.builders.html import HtmlBuilder

__all__ = [
    "EntityBuilder",
    "InfoBuilder",
    "JobBuilder",
    "HtmlBuilder",
]
