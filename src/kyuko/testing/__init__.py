"""Test utilities for kyuko applications::

    from kyuko.testing import TestClient
"""

from kyuko.testing.client import TestClient, TestResponse

__all__ = ["TestClient", "TestResponse"]
