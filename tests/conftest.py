# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Pytest configuration and fixtures."""

import pytest

from genro_fluent import HtmlBuilder

LIST_MARKUP = (
    "<ul>\n"
    "  <li>\n"
    "    hello\n"
    "  </li>\n"
    "  <li>\n"
    "    world\n"
    "  </li>\n"
    "</ul>\n"
)


@pytest.fixture
def list_builder():
    """A 'ul' builder with two 'li' children."""
    return HtmlBuilder('ul').add_child('li', 'hello').add_child('li', 'world')


@pytest.fixture
def list_markup():
    """Markup rendered by list_builder."""
    return LIST_MARKUP
