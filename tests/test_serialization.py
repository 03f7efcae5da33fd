# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Tests for TYTX serialization of built values."""

from dataclasses import dataclass

import pytest
from builder_samples import Student
from genro_tytx import to_tytx as raw_to_tytx

from genro_fluent import Entity, HtmlElement
from genro_fluent.serialization import (
    element_from_dict,
    element_to_dict,
    entity_to_dict,
    from_tytx,
    to_tytx,
)


class TestElementDict:
    """Tests for element dict conversion."""

    def test_element_to_dict(self, list_builder):
        """Element tree becomes nested dicts."""
        assert element_to_dict(list_builder.root) == {
            'name': 'ul',
            'text': '',
            'children': [
                {'name': 'li', 'text': 'hello', 'children': []},
                {'name': 'li', 'text': 'world', 'children': []},
            ],
        }

    def test_element_from_dict_defaults(self):
        """Missing text and children default to empty."""
        assert element_from_dict({'name': 'br'}) == HtmlElement('br')


class TestTytx:
    """Tests for to_tytx / from_tytx."""

    def test_element_tree(self, list_builder, list_markup):
        """Element tree survives a TYTX round trip."""
        restored = from_tytx(to_tytx(list_builder.root))
        assert isinstance(restored, HtmlElement)
        assert restored == list_builder.root
        assert restored.render() == list_markup

    def test_entity(self):
        """Built entity survives a TYTX round trip."""
        me = Entity.new().called('MyName').work_as('Dev').build()
        restored = from_tytx(to_tytx(me))
        assert isinstance(restored, Entity)
        assert restored == me

    def test_unsupported_value_raises(self):
        """Values other than elements and entities are rejected."""
        with pytest.raises(TypeError, match='expected HtmlElement or Entity'):
            to_tytx({'name': 'ul'})

    def test_unknown_payload_raises(self):
        """Payloads without element or entity are rejected."""
        with pytest.raises(ValueError, match='Unknown TYTX payload'):
            from_tytx(raw_to_tytx({'other': 1}))

    def test_entity_subclass(self):
        """Entity subclass keeps its type and extra fields."""
        student = Student.new().called('Ann').work_as('Dev').studied_at('MIT').build()
        restored = from_tytx(to_tytx(student))
        assert type(restored) is Student
        assert restored == Student(name='Ann', position='Dev', school='MIT')

    def test_unset_fields_stay_none(self):
        """Fields never set come back as None."""
        restored = from_tytx(to_tytx(Entity.new().called('Solo').build()))
        assert restored == Entity(name='Solo')

    def test_local_entity_class_raises(self):
        """Entity classes defined inside a function cannot be encoded."""

        @dataclass
        class LocalEntity(Entity):
            pass

        with pytest.raises(TypeError, match='not importable'):
            to_tytx(LocalEntity('A'))

    def test_non_entity_class_raises(self):
        """Payload naming a class that is not an Entity is rejected."""
        payload = raw_to_tytx({
            'entity': {'class': 'genro_fluent.element:HtmlElement', 'fields': {}},
        })
        with pytest.raises(ValueError, match='is not an Entity class'):
            from_tytx(payload)


class TestTytxMsgpack:
    """Tests for the msgpack transport."""

    def test_element_tree(self, list_builder, list_markup):
        """Element tree survives a msgpack round trip."""
        data = to_tytx(list_builder.root, transport='msgpack')
        assert isinstance(data, bytes)
        restored = from_tytx(data, transport='msgpack')
        assert restored == list_builder.root
        assert restored.render() == list_markup

    def test_entity(self):
        """Built entity survives a msgpack round trip."""
        me = Entity.new().called('MyName').work_as('Dev').build()
        restored = from_tytx(to_tytx(me, transport='msgpack'), transport='msgpack')
        assert restored == me

    def test_entity_subclass(self):
        """Entity subclass survives a msgpack round trip."""
        student = Student('Ann', 'Dev', 'MIT')
        restored = from_tytx(to_tytx(student, transport='msgpack'), transport='msgpack')
        assert type(restored) is Student
        assert restored == student


class TestEntityDict:
    """Tests for entity dict conversion."""

    def test_entity_to_dict(self):
        """Entity becomes class path plus field values."""
        assert entity_to_dict(Student('Ann', 'Dev', 'MIT')) == {
            'class': 'builder_samples:Student',
            'fields': {'name': 'Ann', 'position': 'Dev', 'school': 'MIT'},
        }
        assert entity_to_dict(Entity('A'))['class'] == 'genro_fluent.entity:Entity'
