"""Domain layer: document codecs, records, and aggregation.

This layer depends on stdlib, pydantic, ruamel.yaml, and the jinja2
document templates in ``infrastructure.templates``. It must never import
from services, commands, or config.
"""
