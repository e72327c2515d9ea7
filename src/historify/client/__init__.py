"""Historify Python SDK: Client library for the Historify API.

Provides both async and sync clients for interacting with a Historify server.

Quick start::

    from historify.client import HistorifyClient

    client = HistorifyClient("http://localhost:8080")
    response = client.search("smith john", exact_phrase=True)
    suggestions = client.suggestions("cen")
"""

from historify.client.client import AsyncHistorifyClient, HistorifyClient

__all__ = ["AsyncHistorifyClient", "HistorifyClient"]
