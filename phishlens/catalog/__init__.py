from phishlens.catalog.catalog import FeatureCatalog, default_catalog
from phishlens.catalog.exceptions import CatalogIntegrityError, UnknownFeatureError
from phishlens.catalog.models import FeatureCategory, FeatureDefinition

__all__ = [
    "CatalogIntegrityError",
    "FeatureCatalog",
    "FeatureCategory",
    "FeatureDefinition",
    "UnknownFeatureError",
    "default_catalog",
]
