"""metagate: a validated REST façade over the Meta Graph API."""

__version__ = "1.0.0"
