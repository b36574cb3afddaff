# -*- coding: utf-8 -*-

from pyrevit import DB

import house_geometry
from utils_revit import ensure_symbol_active


def iter_family_symbols(doc, category_bic=None):
    """Yield FamilySymbol, optionally filtered by category."""
    if doc is None:
        return

    col = DB.FilteredElementCollector(doc).OfClass(DB.FamilySymbol)
    if category_bic is not None:
        col = col.OfCategory(category_bic)

    for s in col:
        yield s


def _matches(elem, family_name, type_name):
    return (getattr(elem, 'Name', None) == type_name
            and getattr(elem, 'FamilyName', None) == family_name)


def find_family_symbol(doc, family_name, type_name, category_bic=None):
    """Find FamilySymbol by exact family and type name.

    Names are compared as Revit stores them (localized, case-sensitive).
    """
    if not type_name:
        return None
    for s in iter_family_symbols(doc, category_bic=category_bic):
        if _matches(s, family_name, type_name):
            return s
    return None


def find_roof_type(doc, family_name, type_name):
    """Find RoofType by exact family and type name."""
    if doc is None or not type_name:
        return None
    for rt in DB.FilteredElementCollector(doc).OfClass(DB.RoofType):
        if _matches(rt, family_name, type_name):
            return rt
    return None


def wall_endpoints(wall):
    loc = getattr(wall, 'Location', None)
    if not isinstance(loc, DB.LocationCurve):
        raise ValueError(u'Wall {0} has no location curve'.format(getattr(wall, 'Id', '?')))
    curve = loc.Curve
    return curve.GetEndPoint(0), curve.GetEndPoint(1)


def wall_midpoint(wall):
    """Return the midpoint of the wall location line."""
    p1, p2 = wall_endpoints(wall)
    return house_geometry.midpoint(p1, p2)


def place_wall_hosted_instance(doc, symbol, wall, level):
    """Place a wall-hosted family instance at the wall midpoint.

    Returns the created FamilyInstance.
    """
    if symbol is None:
        raise ValueError('Family symbol is required for placement')

    point = wall_midpoint(wall)
    ensure_symbol_active(doc, symbol)
    return doc.Create.NewFamilyInstance(
        point,
        symbol,
        wall,
        level,
        DB.Structure.StructuralType.NonStructural
    )
