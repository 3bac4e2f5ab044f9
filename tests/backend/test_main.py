"""
Tests for application startup and the command-line entry point.

These tests cover:
- Lifespan opening and closing the database connection
- Fatal startup conditions
- Flag parsing and help output
"""

from unittest.mock import AsyncMock, patch

import pytest


class TestLifespan:
    """Tests for the application lifespan."""

    def test_startup_connects_with_current_profile_uri(self, app, mock_connect):
        from fastapi.testclient import TestClient

        with TestClient(app):
            assert app.state.db_service is not None
            assert app.state.db_service.profile.id == "default"

        mock_connect.assert_awaited_once()
        assert mock_connect.await_args.args[0] == "mongodb://localhost:27017/"
        assert app.state.db_service is None

    def test_startup_fails_when_connection_fails(self, settings, store):
        from fastapi.testclient import TestClient
        from mdbui.core.errors import UpstreamError
        from mdbui.main import create_app

        app = create_app(settings, store)
        with patch("mdbui.main.connect", new=AsyncMock(side_effect=UpstreamError("refused"))):
            with pytest.raises(UpstreamError):
                with TestClient(app):
                    pass

    def test_api_unavailable_without_connection(self, settings, store, assert_error_response):
        """Routes fail cleanly if the lifespan never ran."""
        from fastapi.testclient import TestClient
        from mdbui.main import create_app

        client = TestClient(create_app(settings, store))

        assert_error_response(client.get("/api/v1/databases"), 503, "not initialized")


class TestSettings:
    """Tests for pagination settings."""

    def test_page_size_defaults(self, settings):
        assert settings.default_page_size == 20
        assert settings.max_page_size == 100

    def test_default_above_max_is_rejected(self, connections_file):
        from pydantic import ValidationError
        from mdbui.config import Settings

        with pytest.raises(ValidationError):
            Settings(connections_file=str(connections_file), default_page_size=50, max_page_size=10)

    def test_service_limit_follows_max_page_size(self, settings, store, mock_connect):
        from fastapi.testclient import TestClient
        from mdbui.main import create_app

        app = create_app(settings.model_copy(update={"max_page_size": 250}), store)
        with TestClient(app):
            assert app.state.db_service.max_limit == 250


class TestCreateApp:
    """Tests for create_app."""

    def test_create_app_loads_store_from_settings(self, settings, connections_file):
        from mdbui.main import create_app

        app = create_app(settings)

        assert connections_file.exists()
        assert app.state.store.get_current_id() == "default"


class TestCommandLine:
    """Tests for main() and flag parsing."""

    def test_help_exits_zero(self, capsys):
        from mdbui.main import main

        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])

        assert exc_info.value.code == 0
        assert "--port" in capsys.readouterr().out

    def test_short_help_exits_zero(self):
        from mdbui.main import main

        with pytest.raises(SystemExit) as exc_info:
            main(["-h"])

        assert exc_info.value.code == 0

    def test_defaults_come_from_settings(self, settings):
        from mdbui.main import parse_args

        args = parse_args([], settings)

        assert args.host == "127.0.0.1"
        assert args.port == 8082

    def test_flags_override_settings(self, settings):
        from mdbui.main import parse_args

        args = parse_args(["--host", "0.0.0.0", "--port", "9000"], settings)

        assert args.host == "0.0.0.0"
        assert args.port == 9000

    def test_main_serves_with_flag_values(self, settings, connections_file):
        from mdbui.main import main

        with patch("mdbui.main.get_settings", return_value=settings), \
             patch("mdbui.main.uvicorn.run") as mock_run:
            main(["--port", "9001"])

        mock_run.assert_called_once()
        assert mock_run.call_args.kwargs["host"] == "127.0.0.1"
        assert mock_run.call_args.kwargs["port"] == 9001
        assert connections_file.exists()

    def test_main_exits_when_no_profile_configured(self, settings, write_connections):
        from mdbui.main import main

        write_connections([])
        with patch("mdbui.main.get_settings", return_value=settings), \
             patch("mdbui.main.uvicorn.run") as mock_run:
            with pytest.raises(SystemExit) as exc_info:
                main([])

        assert exc_info.value.code == 1
        mock_run.assert_not_called()

    def test_main_exits_when_connections_file_is_malformed(self, settings, connections_file):
        from mdbui.main import main

        connections_file.write_text("[{]")
        with patch("mdbui.main.get_settings", return_value=settings), \
             patch("mdbui.main.uvicorn.run") as mock_run:
            with pytest.raises(SystemExit) as exc_info:
                main([])

        assert exc_info.value.code == 1
        mock_run.assert_not_called()
