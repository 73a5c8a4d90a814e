class CatalogError(Exception):
    """Base exception for feature catalog errors."""


class UnknownFeatureError(CatalogError, KeyError):
    """Raised when a feature id is not part of the catalog."""


class CatalogIntegrityError(CatalogError):
    """Raised when categories do not partition the feature table exactly."""
