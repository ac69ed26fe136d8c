"""
Repository layer for read-only reference catalogs (JSON files).
"""

from uldplan_app.repositories.catalog_source import CatalogRecords, read_catalog
from uldplan_app.repositories.aircraft_repository import AircraftRepository
from uldplan_app.repositories.uld_type_repository import ULDTypeRepository

__all__ = [
    "CatalogRecords",
    "read_catalog",
    "AircraftRepository",
    "ULDTypeRepository",
]
