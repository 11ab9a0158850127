"""Venue connectivity (public REST only)."""
from .txbit_rest import TxbitPublicClient, PUBLIC_ENDPOINTS

__all__ = ["TxbitPublicClient", "PUBLIC_ENDPOINTS"]
