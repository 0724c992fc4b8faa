"""Metaform scaffolding from Swagger schema definitions."""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
