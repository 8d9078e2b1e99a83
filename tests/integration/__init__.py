"""Integration tests for components working together.

Coverage:
    - Send, suggestion and summary flows through the controller and a real
      CompletionClient backed by httpx.MockTransport
    - Host application endpoints through httpx.ASGITransport
"""
