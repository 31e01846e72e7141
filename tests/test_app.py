"""Tests for app.py and __main__.py."""

# pylint: disable=missing-function-docstring

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from ns_gate import __main__ as entrypoint
from ns_gate.api.routes import reset_dependencies
from ns_gate.app import app
from ns_gate.utils.exceptions import ConfigurationError


class TestLifespan:
    """Tests for application startup."""

    def test_startup_serves_healthcheck(self):
        reset_dependencies()
        try:
            with TestClient(app) as client:
                response = client.get("/healthcheck")
        finally:
            reset_dependencies()

        assert response.status_code == 200
        assert response.json()["status"] == "ok"
        assert response.json()["allowed_nameservers"] >= 1

    def test_startup_fails_without_configuration(self):
        with patch(
            "ns_gate.app.get_settings",
            side_effect=ConfigurationError("OUR_NS environment variable not set"),
        ):
            with pytest.raises(ConfigurationError):
                with TestClient(app):
                    pass


class TestMain:
    """Tests for the command line entry point."""

    def test_exits_when_configuration_missing(self):
        with (
            patch.object(
                entrypoint, "get_settings", side_effect=ConfigurationError("missing")
            ),
            patch.object(entrypoint.uvicorn, "run") as mock_run,
        ):
            with pytest.raises(SystemExit) as excinfo:
                entrypoint.main()

        assert excinfo.value.code == 1
        mock_run.assert_not_called()

    def test_runs_uvicorn_on_configured_port(self, test_settings):
        with (
            patch.object(entrypoint, "get_settings", return_value=test_settings),
            patch.object(entrypoint.uvicorn, "run") as mock_run,
        ):
            entrypoint.main()

        mock_run.assert_called_once_with(
            "ns_gate.app:app",
            host="0.0.0.0",
            port=9000,
            log_level="warning",
        )
