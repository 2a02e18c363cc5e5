"""LE SAGE DEV booking client.

Python client and auth-configuration layer for the LE SAGE DEV hotel and
restaurant booking backend.
"""

__version__ = "0.1.0"
