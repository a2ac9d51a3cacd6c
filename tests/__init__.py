"""MboaSMS Test Suite.

Test organization mirrors src/ structure:
    tests/
    ├── conftest.py          # Shared fixtures
    ├── test_cli.py          # Command-line entry point
    ├── test_core/           # Phone, config, logging, exceptions
    ├── test_engine/         # Sender names, contacts, messaging
    └── test_integrations/   # Gateway client and base classes

No test performs real network calls; HTTP is patched.
"""
