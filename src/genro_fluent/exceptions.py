# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Fluent builder exceptions."""

from __future__ import annotations


class FluentBuilderError(Exception):
    """Base exception for fluent builder errors."""

    pass


class InvalidTagError(FluentBuilderError, ValueError):
    """Raised when an element is added with an empty or invalid tag name."""

    pass


class SelfTypeError(FluentBuilderError, TypeError):
    """Raised when a builder does not close its self-type recursion correctly."""

    pass


class InvalidTextError(FluentBuilderError, TypeError):
    """Raised when an element is added with text that is not a string."""

    pass
