"""Static reference data loaded once at startup."""
from .champion_catalog_loader import load_champion_catalog, parse_champion_catalog

__all__ = ['load_champion_catalog', 'parse_champion_catalog']
