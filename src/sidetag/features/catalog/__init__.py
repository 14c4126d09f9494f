# Where: sidetag.features.catalog.__init__
# What: Expose catalog loading and lookup.
# Why: Provide a cohesive import surface for the tagging pipeline.

from .catalog import Catalog, CatalogLoadError, CatalogRecord, load_catalog, parse_catalog

__all__ = [
    "Catalog",
    "CatalogLoadError",
    "CatalogRecord",
    "load_catalog",
    "parse_catalog",
]
