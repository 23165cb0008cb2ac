# Schemas package init
"""Request and response shapes for the JSON API."""
