class CatalogConfigurationError(ValueError):
    """Raised when a catalog definition is invalid or incomplete."""
