"""Kubernetes swagger schema browser."""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
