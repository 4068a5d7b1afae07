"""
Tests for the LocalSystemOpener.
"""

import os
from unittest.mock import patch

import pytest

from quicklauncher.adapters.system.local_system_opener import LocalSystemOpener
from quicklauncher.exceptions import LaunchError


class TestLocalSystemOpener:
    def test_open_path_linux(self, spawner, mock_logger):
        opener = LocalSystemOpener(spawner, mock_logger, platform="linux")
        opener.open_path("/home/ann/report.pdf")

        assert spawner.plans[0].args == ["xdg-open", "/home/ann/report.pdf"]

    def test_open_path_macos(self, spawner, mock_logger):
        opener = LocalSystemOpener(spawner, mock_logger, platform="darwin")
        opener.open_path("/Users/ann/report.pdf")

        assert spawner.plans[0].args == ["open", "/Users/ann/report.pdf"]

    def test_open_path_windows_uses_startfile(self, spawner, mock_logger):
        opener = LocalSystemOpener(spawner, mock_logger, platform="win32")
        with patch("os.startfile", create=True) as startfile:
            opener.open_path(r"C:\report.pdf")

        startfile.assert_called_once_with(r"C:\report.pdf")
        assert spawner.plans == []

    def test_open_path_failure(self, make_spawner, mock_logger):
        opener = LocalSystemOpener(make_spawner("xdg-open"), mock_logger, platform="linux")
        with pytest.raises(LaunchError, match="Failed to open"):
            opener.open_path("/tmp/x")

    def test_open_url_custom_scheme(self, spawner, mock_logger):
        opener = LocalSystemOpener(spawner, mock_logger, platform="linux")
        opener.open_url("myapp://open")

        assert spawner.plans[0].args == ["xdg-open", "myapp://open"]

    def test_open_url_falls_back_to_webbrowser(self, make_spawner, mock_logger):
        opener = LocalSystemOpener(make_spawner("xdg-open"), mock_logger, platform="linux")
        with patch(
            "quicklauncher.adapters.system.local_system_opener.webbrowser.open",
            return_value=True,
        ) as browser:
            opener.open_url("https://example.com")

        browser.assert_called_once_with("https://example.com")
        mock_logger.warning.assert_called_once()

    def test_open_url_no_handler(self, make_spawner, mock_logger):
        opener = LocalSystemOpener(make_spawner("open"), mock_logger, platform="darwin")
        with patch(
            "quicklauncher.adapters.system.local_system_opener.webbrowser.open",
            return_value=False,
        ):
            with pytest.raises(LaunchError, match="No handler"):
                opener.open_url("https://example.com")

    def test_reveal_linux_opens_parent(self, temp_directory, spawner, mock_logger):
        opener = LocalSystemOpener(spawner, mock_logger, platform="linux")
        opener.reveal(os.path.join(temp_directory, "notes.txt"))

        assert spawner.plans[0].args == ["xdg-open", temp_directory]

    def test_reveal_macos(self, spawner, mock_logger):
        opener = LocalSystemOpener(spawner, mock_logger, platform="darwin")
        opener.reveal("/Users/ann/report.pdf")

        assert spawner.plans[0].args == ["open", "-R", "/Users/ann/report.pdf"]

    def test_reveal_windows(self, spawner, mock_logger):
        opener = LocalSystemOpener(spawner, mock_logger, platform="win32")
        opener.reveal("C:/data/report.pdf")

        args = spawner.plans[0].args
        assert isinstance(args, str)
        assert args.startswith('explorer /select,"')
