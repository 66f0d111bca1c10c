"""HTTP access to the conversion backend."""

from .client import ApiClient, ApiResponse

__all__ = ["ApiClient", "ApiResponse"]
