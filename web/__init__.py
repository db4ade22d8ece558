"""Flask JSON API for the storefront facet engine."""
