"""Static fixtures for the intake signal engine.

Contains:
- The selectable symptom catalog
"""

from app.fixtures.symptom_catalog import SYMPTOM_CATALOG, get_catalog_symptom, list_catalog

__all__ = ["SYMPTOM_CATALOG", "get_catalog_symptom", "list_catalog"]
