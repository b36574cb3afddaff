# -*- coding: utf-8 -*-
"""Построение однокомнатного домика в активном документе.

Стены между двумя уровнями, дверь посередине первой стены, окна посередине
остальных трёх и двускатная крыша выдавливанием. Все изменения выполняются
в одной транзакции.

Все поиски (уровни, типоразмеры, тип крыши, вид) проверяются до начала
транзакции: если чего-то нет в проекте, документ не меняется, а
MissingElementError перечисляет все недостающие имена.
"""
import math

from pyrevit import DB

import config_loader
import house_geometry
import placement_engine
import rollback_utils
from utils_revit import find_level_by_name, find_view_by_name, get_logger, set_comments, set_param, tx
from utils_units import mm_to_ft, positive_mm_to_ft


KIND_LEVEL = u'Уровень'
KIND_DOOR = u'Дверь'
KIND_WINDOW = u'Окно'
KIND_ROOF = u'Тип крыши'
KIND_VIEW = u'Вид'


class HouseBuildError(Exception):
    """Base error of the house command."""


class ConfigurationError(HouseBuildError):
    """Rules contain values the builder cannot use."""


class MissingElementError(HouseBuildError):
    """Levels, types or views named in the rules are absent from the project."""

    def __init__(self, missing):
        self.missing = list(missing)
        lines = [u'  {0}: {1}'.format(kind, name) for kind, name in self.missing]
        super(MissingElementError, self).__init__(
            u'Не найдены элементы проекта:\n' + u'\n'.join(lines)
        )


def read_dimensions(rules):
    """Convert rule dimensions to feet and resolve the eave cut enum."""
    try:
        dims = {
            'width_ft': positive_mm_to_ft(rules.get('house_width_mm'), 'house_width_mm'),
            'depth_ft': positive_mm_to_ft(rules.get('house_depth_mm'), 'house_depth_mm'),
            'ridge_height_ft': positive_mm_to_ft(rules.get('roof_ridge_height_mm'), 'roof_ridge_height_mm'),
            'sill_height_mm': float(rules.get('window_sill_height_mm')),
        }
    except (TypeError, ValueError) as ex:
        raise ConfigurationError(str(ex))

    sill = dims['sill_height_mm']
    if not math.isfinite(sill) or sill < 0:
        raise ConfigurationError(
            u'window_sill_height_mm must be a finite non-negative number, got {0}'.format(sill)
        )

    dims['eave_cuts'] = eave_cutter(rules.get('roof_eave_cuts') or 'TwoCutSquare')
    return dims


def eave_cutter(name):
    """Return the DB.EaveCutterType member called `name`."""
    member = getattr(DB.EaveCutterType, name, None) if isinstance(name, str) else None
    # attributes like __doc__ resolve too; only enum members are accepted
    if not isinstance(member, DB.EaveCutterType):
        raise ConfigurationError(u'Unknown roof_eave_cuts value: {0}'.format(name))
    return member


def resolve_inputs(doc, rules):
    """Look up every element the build needs.

    Raises:
        MissingElementError: with all missing (kind, name) pairs at once.
    """
    missing = []

    def _check(kind, name, value):
        if value is None:
            missing.append((kind, name))
        return value

    base_name = rules['base_level_name']
    top_name = rules['top_level_name']
    inputs = {
        'base_level': _check(KIND_LEVEL, base_name, find_level_by_name(doc, base_name)),
        'top_level': _check(KIND_LEVEL, top_name, find_level_by_name(doc, top_name)),
        'door_symbol': _check(
            KIND_DOOR,
            u'{0} : {1}'.format(rules['door_family_name'], rules['door_type_name']),
            placement_engine.find_family_symbol(
                doc, rules['door_family_name'], rules['door_type_name'],
                category_bic=DB.BuiltInCategory.OST_Doors
            )
        ),
        'window_symbol': _check(
            KIND_WINDOW,
            u'{0} : {1}'.format(rules['window_family_name'], rules['window_type_name']),
            placement_engine.find_family_symbol(
                doc, rules['window_family_name'], rules['window_type_name'],
                category_bic=DB.BuiltInCategory.OST_Windows
            )
        ),
        'roof_type': _check(
            KIND_ROOF,
            u'{0} : {1}'.format(rules['roof_family_name'], rules['roof_type_name']),
            placement_engine.find_roof_type(doc, rules['roof_family_name'], rules['roof_type_name'])
        ),
        'view': _check(KIND_VIEW, rules['roof_view_name'], find_view_by_name(doc, rules['roof_view_name'])),
    }

    if missing:
        raise MissingElementError(missing)
    return inputs


def create_walls(doc, base_level, top_level, width_ft, depth_ft):
    """Create four walls around the footprint, constrained to the top level."""
    logger = get_logger()
    walls = []
    for start, end in house_geometry.wall_segments(width_ft, depth_ft):
        line = DB.Line.CreateBound(start, end)
        wall = DB.Wall.Create(doc, line, base_level.Id, False)
        set_param(wall, DB.BuiltInParameter.WALL_HEIGHT_TYPE, top_level.Id)
        logger.debug(u'Wall {0} created'.format(wall.Id))
        walls.append(wall)
    return walls


def add_door(doc, level, wall, symbol):
    return placement_engine.place_wall_hosted_instance(doc, symbol, wall, level)


def add_window(doc, level, wall, symbol, sill_height_mm):
    window = placement_engine.place_wall_hosted_instance(doc, symbol, wall, level)
    if not set_param(window, DB.BuiltInParameter.INSTANCE_SILL_HEIGHT_PARAM, mm_to_ft(sill_height_mm)):
        get_logger().warning(
            u'Sill height parameter missing or read-only on window {0}'.format(window.Id)
        )
    return window


def add_roof(doc, level, walls, roof_type, view, width_ft, depth_ft, ridge_height_ft, eave_cuts=None,
             plane_name=None):
    """Create a gable extrusion roof over the walls.

    The profile is drawn in the YZ plane through the origin and extruded
    along X over the full length of the house. The reference plane of the
    profile gets `plane_name` when given.
    """
    if not walls:
        raise ValueError('At least one wall is required to size the roof')

    wall_width = float(walls[0].Width)
    profile = house_geometry.gable_profile(depth_ft, wall_width, level.Elevation, ridge_height_ft)

    curves = DB.CurveArray()
    for start, end in house_geometry.profile_segments(profile):
        curves.Append(DB.Line.CreateBound(start, end))

    plane = doc.Create.NewReferencePlane(
        DB.XYZ(0, 0, 0), DB.XYZ(0, 0, 20), DB.XYZ(0, 20, 0), view
    )
    if plane_name:
        plane.Name = plane_name
    extrusion_start, extrusion_end = house_geometry.roof_extrusion_extents(width_ft, wall_width)
    roof = doc.Create.NewExtrusionRoof(curves, plane, level, roof_type, extrusion_start, extrusion_end)
    roof.EaveCuts = eave_cuts if eave_cuts is not None else DB.EaveCutterType.TwoCutSquare
    return roof


def _tag_elements(result, prefix, timestamp):
    groups = (
        ('WALL', result['walls']),
        ('DOOR', [result['door']]),
        ('WINDOW', result['windows']),
        ('ROOF', [result['roof']]),
    )
    for kind, elements in groups:
        tag = rollback_utils.generate_tag(kind, timestamp=timestamp, prefix=prefix)
        for elem in elements:
            set_comments(elem, tag)


def build_house(doc, rules=None, now=None):
    """Build walls, door, windows and roof in one transaction.

    Args:
        doc: Active Revit document.
        rules: Rules dict; defaults to config/rules.default.json.
        now: Optional datetime used for the comment tag timestamp.

    Returns:
        Dict with 'walls', 'door', 'windows', 'roof', 'tag_prefix', 'timestamp'.

    Raises:
        ConfigurationError, MissingElementError: before any change is made.
        Any host exception raised while building, after rolling back.
    """
    if doc is None:
        raise HouseBuildError(u'Нет активного документа.')

    logger = get_logger()
    rules = config_loader.apply_defaults(rules if rules is not None else config_loader.load_rules())
    dims = read_dimensions(rules)
    inputs = resolve_inputs(doc, rules)

    base_level = inputs['base_level']
    top_level = inputs['top_level']
    prefix = rules['comment_tag'] or rollback_utils.DEFAULT_TAG_PREFIX
    timestamp = rollback_utils.make_timestamp(now)
    plane_tag = rollback_utils.generate_tag('PLANE', timestamp=timestamp, prefix=prefix)

    with tx(rules['transaction_name'], doc=doc):
        walls = create_walls(doc, base_level, top_level, dims['width_ft'], dims['depth_ft'])
        door = add_door(doc, base_level, walls[0], inputs['door_symbol'])
        windows = [
            add_window(doc, base_level, wall, inputs['window_symbol'], dims['sill_height_mm'])
            for wall in walls[1:]
        ]
        roof = add_roof(
            doc, top_level, walls, inputs['roof_type'], inputs['view'],
            dims['width_ft'], dims['depth_ft'], dims['ridge_height_ft'], dims['eave_cuts'],
            plane_name=plane_tag
        )
        result = {
            'walls': walls,
            'door': door,
            'windows': windows,
            'roof': roof,
            'tag_prefix': prefix,
            'timestamp': timestamp,
        }
        _tag_elements(result, prefix, timestamp)

    logger.info(u'House built: {0} walls, 1 door, {1} windows, roof {2}'.format(
        len(walls), len(windows), roof.Id))
    return result


def format_report(result):
    """Markdown lines for the pyRevit output window."""
    return [
        u'Стен: **{0}**'.format(len(result['walls'])),
        u'Дверей: **1**',
        u'Окон: **{0}**'.format(len(result['windows'])),
        u'Крыша: **{0}**'.format(result['roof'].Id),
        u'Тег элементов: `{0}:*:{1}`'.format(result['tag_prefix'], result['timestamp']),
    ]
