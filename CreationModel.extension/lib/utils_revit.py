# -*- coding: utf-8 -*-

import traceback

from pyrevit import DB
from pyrevit import forms
from pyrevit import revit
from pyrevit import script


TOOL_TITLE = 'CreationModel'


def get_output():
    return script.get_output()


def get_logger():
    return script.get_logger()


def _safe_log(logger_method, msg):
    try:
        logger_method(msg)
    except UnicodeEncodeError:
        # repr escapes non-ascii
        logger_method(repr(msg))


def alert(msg, title=TOOL_TITLE, warn_icon=True):
    try:
        forms.alert(msg, title=title, warn_icon=warn_icon)
    except Exception:
        # As a last resort if UI is unavailable
        _safe_log(get_logger().warning, msg)


def log_exception(prefix='Error'):
    logger = get_logger()
    _safe_log(logger.error, prefix)
    _safe_log(logger.error, traceback.format_exc())


def _find_by_name(doc, cls, name):
    if doc is None or not name:
        return None
    for elem in DB.FilteredElementCollector(doc).OfClass(cls):
        if getattr(elem, 'Name', None) == name:
            return elem
    return None


def find_level_by_name(doc, name):
    """Return the first Level named exactly `name`, or None."""
    return _find_by_name(doc, DB.Level, name)


def find_view_by_name(doc, name):
    """Return the first View named exactly `name`, or None.

    Plan views share their level's name, so templates are skipped.
    """
    if doc is None or not name:
        return None
    for view in DB.FilteredElementCollector(doc).OfClass(DB.View):
        if getattr(view, 'IsTemplate', False):
            continue
        if getattr(view, 'Name', None) == name:
            return view
    return None


def ensure_symbol_active(doc, family_symbol):
    if family_symbol is None:
        return
    try:
        if not family_symbol.IsActive:
            family_symbol.Activate()
            doc.Regenerate()
    except AttributeError:
        # Some types don't expose IsActive/Activate
        pass


def get_param(elem, name):
    if elem is None or not name:
        return None
    try:
        return elem.LookupParameter(name)
    except Exception:
        return None


def set_param(elem, bip, value):
    """Set built-in parameter `bip`. Returns False if missing or read-only."""
    if elem is None:
        return False
    p = elem.get_Parameter(bip)
    if p is None or p.IsReadOnly:
        return False
    p.Set(value)
    return True


def set_string_param(elem, param_name, value):
    p = get_param(elem, param_name)
    if p is None:
        return False
    if p.IsReadOnly:
        return False
    p.Set(str(value) if value is not None else '')
    return True


def set_comments(elem, value):
    if elem is None:
        return False

    text = str(value) if value is not None else ''

    # Prefer built-in parameter if available
    if set_param(elem, DB.BuiltInParameter.ALL_MODEL_INSTANCE_COMMENTS, text):
        return True

    # Fallback by name
    if set_string_param(elem, 'Comments', text):
        return True
    return set_string_param(elem, u'Комментарии', text)


def tx(name, doc=None):
    """Transaction context manager.

    Commits on clean exit, rolls back and re-raises when the block fails.

    Usage:
        with tx(u'Построение', doc=doc):
            ...
    """
    doc = doc or revit.doc
    t = DB.Transaction(doc, name)

    def _rollback():
        rb = getattr(t, 'RollBack', None) or getattr(t, 'Rollback', None)
        if rb is None:
            return
        try:
            rb()
        except Exception:
            # the block's exception propagates, not the rollback failure
            get_logger().warning(u'Rollback failed for transaction: {0}'.format(name))

    class _Tx(object):
        def __enter__(self):
            t.Start()
            return t

        def __exit__(self, exc_type, exc, tb):
            if exc_type:
                _rollback()
                return False

            try:
                t.Commit()
            except Exception:
                _rollback()
                raise
            return False

    return _Tx()
