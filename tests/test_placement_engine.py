# -*- coding: utf-8 -*-
"""Tests for family symbol lookup and wall-hosted placement."""
import pytest

from mocks.revit_api import (
    DB,
    MockBuiltInCategory,
    MockFamilySymbol,
    MockRoofType,
    mock_document,
    mock_level,
    mock_wall,
)

import placement_engine


DOOR_FAMILY = u"Одиночные-Щитовые"
DOOR_TYPE = u"0915 x 2134 мм"


def _door(type_name=DOOR_TYPE, family_name=DOOR_FAMILY, **kwargs):
    return MockFamilySymbol(type_name, family_name, category=MockBuiltInCategory.OST_Doors, **kwargs)


def test_find_family_symbol_matches_family_and_type():
    other_family = _door(family_name=u"Двойные")
    other_type = _door(type_name=u"0864 x 2032 мм")
    target = _door()
    doc = mock_document(other_family, other_type, target)
    found = placement_engine.find_family_symbol(
        doc, DOOR_FAMILY, DOOR_TYPE, category_bic=DB.BuiltInCategory.OST_Doors
    )
    assert found is target


def test_find_family_symbol_respects_category():
    window_named_like_door = MockFamilySymbol(
        DOOR_TYPE, DOOR_FAMILY, category=MockBuiltInCategory.OST_Windows
    )
    doc = mock_document(window_named_like_door)
    assert placement_engine.find_family_symbol(
        doc, DOOR_FAMILY, DOOR_TYPE, category_bic=DB.BuiltInCategory.OST_Doors
    ) is None
    assert placement_engine.find_family_symbol(doc, DOOR_FAMILY, DOOR_TYPE) is window_named_like_door


def test_find_family_symbol_returns_first_match():
    first = _door()
    second = _door()
    doc = mock_document(first, second)
    assert placement_engine.find_family_symbol(doc, DOOR_FAMILY, DOOR_TYPE) is first


def test_find_family_symbol_without_type_name():
    assert placement_engine.find_family_symbol(mock_document(_door()), DOOR_FAMILY, "") is None


def test_iter_family_symbols_by_category():
    window = MockFamilySymbol("W", "F", category=MockBuiltInCategory.OST_Windows)
    doors = [_door(type_name=str(i)) for i in range(3)]
    doc = mock_document(window, *doors)
    assert list(placement_engine.iter_family_symbols(doc, DB.BuiltInCategory.OST_Doors)) == doors
    assert len(list(placement_engine.iter_family_symbols(doc))) == 4
    assert list(placement_engine.iter_family_symbols(None)) == []


def test_find_roof_type():
    wrong = MockRoofType(u"Типовой - 400мм", u"Базовая крыша")
    target = MockRoofType(u"Типовой - 125мм", u"Базовая крыша")
    doc = mock_document(wrong, target)
    assert placement_engine.find_roof_type(doc, u"Базовая крыша", u"Типовой - 125мм") is target
    assert placement_engine.find_roof_type(doc, u"Плоская", u"Типовой - 125мм") is None


def test_wall_midpoint():
    wall = mock_wall(start=(-5.0, -2.0, 0.0), end=(5.0, -2.0, 0.0))
    mid = placement_engine.wall_midpoint(wall)
    assert (mid.X, mid.Y, mid.Z) == (0.0, -2.0, 0.0)


def test_wall_midpoint_without_location_curve():
    wall = mock_wall()
    wall.Location = None
    with pytest.raises(ValueError):
        placement_engine.wall_midpoint(wall)


def test_place_wall_hosted_instance_activates_symbol():
    level = mock_level(u"Уровень 1")
    wall = mock_wall(start=(0.0, 0.0, 0.0), end=(0.0, 8.0, 0.0))
    symbol = _door()
    doc = mock_document(level, wall, symbol)

    inst = placement_engine.place_wall_hosted_instance(doc, symbol, wall, level)

    assert symbol.IsActive
    assert doc.regenerate_calls == 1
    assert inst.Host is wall
    assert inst.Symbol is symbol
    assert inst.LevelId == level.Id
    assert inst.StructuralType == DB.Structure.StructuralType.NonStructural
    assert (inst.Location.Point.X, inst.Location.Point.Y) == (0.0, 4.0)
    assert inst in doc.elements


def test_place_wall_hosted_instance_requires_symbol():
    with pytest.raises(ValueError):
        placement_engine.place_wall_hosted_instance(mock_document(), None, mock_wall(), mock_level())
