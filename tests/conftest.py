# -*- coding: utf-8 -*-
"""Pytest fixtures for CreationModel tests."""
import json
import os
import sys
import tempfile
import types
from unittest.mock import MagicMock

import pytest

ROOT = os.path.dirname(os.path.dirname(__file__))
EXT = os.path.join(ROOT, "CreationModel.extension")
LIB = os.path.join(EXT, "lib")
if LIB not in sys.path:
    sys.path.insert(0, LIB)


# pyRevit only exists inside Revit; expose the mock DB namespace under its name.
if "pyrevit" not in sys.modules:
    from mocks.revit_api import DB as MockDB

    pyrevit_stub = types.ModuleType("pyrevit")
    pyrevit_stub.DB = MockDB
    pyrevit_stub.forms = MagicMock()
    pyrevit_stub.revit = MagicMock()
    pyrevit_stub.script = MagicMock()
    sys.modules["pyrevit"] = pyrevit_stub

from mocks.revit_api import (  # noqa: E402
    MockFamilySymbol,
    MockRoofType,
    MockView,
    mock_document,
    mock_level,
)


@pytest.fixture
def temp_config_file():
    """Create a temporary config file and return its path. Cleans up after test."""
    files = []

    def _create(data, raw=None, encoding="utf-8"):
        f = tempfile.NamedTemporaryFile(mode='w', suffix='.json', delete=False, encoding=encoding)
        if raw is not None:
            f.write(raw)
        else:
            json.dump(data, f, ensure_ascii=False)
        f.flush()
        f.close()
        files.append(f.name)
        return f.name

    yield _create

    for path in files:
        try:
            os.unlink(path)
        except OSError:
            pass


@pytest.fixture
def default_rules():
    import config_loader

    return config_loader.apply_defaults({})


@pytest.fixture
def project_doc(default_rules):
    """Document holding every level, type and view the default rules name."""
    from mocks.revit_api import MockBuiltInCategory

    rules = default_rules
    return mock_document(
        mock_level(rules["base_level_name"], 0.0),
        mock_level(rules["top_level_name"], 4000 / 304.8),
        MockFamilySymbol(
            rules["door_type_name"], rules["door_family_name"],
            category=MockBuiltInCategory.OST_Doors,
        ),
        MockFamilySymbol(
            rules["window_type_name"], rules["window_family_name"],
            category=MockBuiltInCategory.OST_Windows,
        ),
        MockRoofType(rules["roof_type_name"], rules["roof_family_name"]),
        MockView(rules["roof_view_name"], is_template=True),
        MockView(rules["roof_view_name"]),
    )
