"""
Tests for the ClassifyTargetUseCase.
"""

import os

import pytest

from quicklauncher.entities.Target import TargetKind
from quicklauncher.use_cases.targets.classify_target import ClassifyTargetUseCase


class TestClassifyTargetUseCase:
    @pytest.fixture
    def use_case(self, mock_logger):
        return ClassifyTargetUseCase(mock_logger)

    def test_existing_paths(self, use_case, temp_directory):
        assert use_case.execute(os.path.join(temp_directory, "notes.txt")) is TargetKind.FILE
        assert use_case.execute(os.path.join(temp_directory, "projects")) is TargetKind.FOLDER

    def test_existing_file_beats_url_shape(self, use_case, temp_directory):
        assert use_case.execute(os.path.join(temp_directory, "example.com")) is TargetKind.FILE

    @pytest.mark.parametrize(
        "raw, kind",
        [
            ("https://example.com", TargetKind.URL),
            ("example.com/docs", TargetKind.URL),
            ("ls -la", TargetKind.COMMAND),
            ("echo hi\necho there", TargetKind.COMMAND),
            ("", TargetKind.UNKNOWN),
        ],
    )
    def test_strings(self, use_case, raw, kind):
        assert use_case.execute(raw) is kind

    def test_non_string_is_unknown(self, use_case):
        assert use_case.execute(None) is TargetKind.UNKNOWN
        assert use_case.execute(42) is TargetKind.UNKNOWN

    def test_to_target(self, use_case):
        target = use_case.to_target("https://example.com", display_name="Example")

        assert target.kind is TargetKind.URL
        assert target.raw == "https://example.com"
        assert target.display_name == "Example"

    def test_to_target_non_string(self, use_case):
        target = use_case.to_target(None)

        assert target.kind is TargetKind.UNKNOWN
        assert target.raw == ""
