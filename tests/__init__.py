"""Test package for Aiko.

Unit tests cover isolated logic; integration tests drive the controller and
the completion client together against a stubbed HTTP transport.

Structure:
    - unit/: Individual function and class tests
    - integration/: End-to-end conversation flows and the host application

No test touches the network. Leverages pytest with pytest-check for soft
assertions.
"""
