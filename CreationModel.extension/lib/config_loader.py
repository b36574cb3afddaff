# -*- coding: utf-8 -*-
"""Загрузчик конфигурации для CreationModel.

Загружает имена уровней, типоразмеров и размеры дома из JSON
с разумными дефолтами.
"""
import io
import json
import os


DEFAULT_RULES = {
    'base_level_name': u'Уровень 1',
    'top_level_name': u'Уровень 2',
    'door_family_name': u'Одиночные-Щитовые',
    'door_type_name': u'0915 x 2134 мм',
    'window_family_name': u'Фиксированные',
    'window_type_name': u'0915 x 0610 мм',
    'roof_family_name': u'Базовая крыша',
    'roof_type_name': u'Типовой - 125мм',
    'roof_view_name': u'Уровень 1',
    'house_width_mm': 10000,
    'house_depth_mm': 5000,
    'window_sill_height_mm': 600,
    # 10 футов над верхним уровнем
    'roof_ridge_height_mm': 3048,
    'roof_eave_cuts': 'TwoCutSquare',
    'transaction_name': u'Построение',
    'comment_tag': 'AUTO_HOUSE',
}


def _extension_root_from_lib():
    """Получить корневую директорию расширения из расположения lib."""
    return os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def get_default_rules_path():
    """Получить путь к файлу конфигурации по умолчанию."""
    return os.path.join(_extension_root_from_lib(), 'config', 'rules.default.json')


def apply_defaults(data):
    """Дополнить словарь правил недостающими ключами."""
    rules = dict(data or {})
    for key, val in DEFAULT_RULES.items():
        if key not in rules:
            rules[key] = val
    return rules


def load_rules(path=None):
    """Загрузить правила из JSON конфигурационного файла.

    Args:
        path: Путь к JSON конфиг-файлу. Если None, используется дефолтный файл правил.

    Returns:
        Словарь со всеми ключами конфигурации, с применёнными дефолтами.

    Raises:
        IOError/OSError: файл не найден или не читается.
        ValueError: файл не является JSON-объектом.
    """
    rules_path = path or get_default_rules_path()
    # utf-8-sig: файлы, сохранённые Блокнотом, начинаются с BOM
    with io.open(rules_path, 'r', encoding='utf-8-sig') as fp:
        data = json.load(fp)

    if not isinstance(data, dict):
        raise ValueError(u'Файл правил должен содержать JSON-объект: {0}'.format(rules_path))

    return apply_defaults(data)
