# -*- coding: utf-8 -*-
"""Mock modules for testing Revit-dependent code without Revit."""

from .revit_api import DB, mock_document, mock_level, mock_wall, mock_xyz

__all__ = ["DB", "mock_document", "mock_level", "mock_wall", "mock_xyz"]
