"""Centralized configuration for the facet web API."""

import os

# Flask app settings (env overrides; debug off unless FLASK_DEBUG=true)
# FLASK_PORT wins over the PORT set by hosting platforms; 5000 locally.
FLASK_HOST = os.getenv("FLASK_HOST", "0.0.0.0")
FLASK_PORT = int(os.getenv("FLASK_PORT", os.getenv("PORT", "5000")))
FLASK_DEBUG = os.getenv("FLASK_DEBUG", "False").lower() == "true"

# Upper bound on components accepted in one request body
MAX_COMPONENTS = int(os.getenv("MAX_COMPONENTS", "5000"))
