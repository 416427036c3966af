"""Conector SparkLoop — cliente da API de subscribers."""

from .errors import UNKNOWN_ERROR, extract_error_detail
from .http_client import SparkLoopHttpClient, create_sparkloop_http_client

__all__ = [
    "UNKNOWN_ERROR",
    "SparkLoopHttpClient",
    "create_sparkloop_http_client",
    "extract_error_detail",
]
