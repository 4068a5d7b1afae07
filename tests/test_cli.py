"""
Tests for the command line interface.
"""

import json
from unittest.mock import patch

import pytest

from quicklauncher import cli
from quicklauncher.entities.Item import LauncherItem
from quicklauncher.entities.Target import DispatchResult, TargetKind
from quicklauncher.exceptions import ItemNotFoundError


@pytest.fixture
def patched_container(dependency_container):
    with patch("quicklauncher.cli.container", dependency_container):
        yield dependency_container


class TestCli:
    def test_classify_url(self, patched_container, capsys):
        code = cli.main(["classify", "https://example.com"])

        assert code == 0
        assert json.loads(capsys.readouterr().out) == {
            "raw": "https://example.com",
            "kind": "url",
        }

    def test_classify_unknown_exit_code(self, patched_container, capsys):
        assert cli.main(["classify", ""]) == 1

    def test_open_command_uses_terminal(self, patched_container, spawner, capsys):
        code = cli.main(["open", "htop"])

        assert code == 0
        assert spawner.launchers == ["gnome-terminal"]
        assert json.loads(capsys.readouterr().out)["action"] == "run_command"

    def test_items_add_and_list(self, patched_container, capsys):
        assert cli.main(["items", "add", "example.com", "--name", "Example"]) == 0
        capsys.readouterr()

        assert cli.main(["items", "list"]) == 0
        items = json.loads(capsys.readouterr().out)
        assert items == [{"path": "example.com", "type": "url", "name": "Example"}]

    def test_items_open_failure_exit_code(self, patched_container):
        with patch.object(patched_container, "get_open_item_use_case") as get_uc:
            get_uc.return_value.execute.return_value = DispatchResult(
                TargetKind.URL, ok=False, action="open_url", error="no handler"
            )
            assert cli.main(["items", "open", "0"]) == 1

    def test_domain_error_exit_code(self, patched_container, capsys):
        with patch.object(patched_container, "get_remove_item_use_case") as get_uc:
            get_uc.return_value.execute.side_effect = ItemNotFoundError(
                "Item does not exist: index 3"
            )
            code = cli.main(["items", "remove", "3"])

        assert code == 2
        assert "Item does not exist" in capsys.readouterr().err

    def test_items_clear(self, patched_container):
        patched_container.get_item_repository().add_item(LauncherItem("htop", "command"))

        assert cli.main(["items", "clear"]) == 0
        assert patched_container.get_item_repository().list_items() == []
