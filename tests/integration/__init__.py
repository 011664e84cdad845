"""
Integration Tests Package
==========================

Integration tests run the load driver over real sockets:
- Dummy target served by uvicorn on an ephemeral local port
- A closed local port for the unreachable case

To run integration tests:
    pytest tests/integration/ -v -m integration
"""
