"""Integration tests for pynanoleaf library.

These tests talk to a real Nanoleaf device using settings from a .env file.
They are marked with @pytest.mark.integration and skipped by default.

To run integration tests:
    pytest tests/integration -v -m integration

Environment variables required in .env:
    NANOLEAF_HOST: Device host name or IP address
    NANOLEAF_TOKEN: Authorization token (see the nanoleaf-token command)
    NANOLEAF_PORT: API port (optional, defaults to 16021)
"""
