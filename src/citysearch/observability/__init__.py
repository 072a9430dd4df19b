"""Observability — structured logging and MLflow tracing helpers."""

from citysearch.observability.logging import get_request_id, request_scope, setup_logging
from citysearch.observability.tracing import configure_tracing

__all__ = ["configure_tracing", "get_request_id", "request_scope", "setup_logging"]
