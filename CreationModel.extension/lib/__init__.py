# -*- coding: utf-8 -*-

"""CreationModel shared library.

This folder is auto-added to sys.path by pyRevit for this extension.
Keep modules dependency-free (pyRevit + RevitAPI only).

Modules:
    utils_units: Unit conversion between mm and feet
    config_loader: Configuration file loading
    house_geometry: Footprint and roof profile math
    placement_engine: Family symbol lookup and wall-hosted placement
    house_builder: Walls, door, windows and roof in one transaction
    rollback_utils: Find and delete generated elements
"""

__version__ = "0.1.0"
__author__ = "CreationModel Team"
