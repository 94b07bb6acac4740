"""Tests for the real environment and file capabilities (infra/local_files.py)."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from askcosmos.exceptions import ConfigurationError
from askcosmos.infra.local_files import (
    environment_snapshot,
    read_key_file,
    read_text_or_none,
)


class TestReadTextOrNone:
    def test_reads_file(self, tmp_path: Path) -> None:
        target = tmp_path / ".env"
        target.write_text("A=1\n", encoding="utf-8")
        assert read_text_or_none(target) == "A=1\n"

    def test_missing_file(self, tmp_path: Path) -> None:
        assert read_text_or_none(tmp_path / ".env") is None

    def test_directory_is_unreadable(self, tmp_path: Path) -> None:
        assert read_text_or_none(tmp_path) is None

    def test_undecodable_file(self, tmp_path: Path) -> None:
        target = tmp_path / ".env"
        target.write_bytes(b"\xff\xfe\xfa")
        assert read_text_or_none(target) is None


class TestReadKeyFile:
    def test_missing(self, tmp_path: Path) -> None:
        assert read_key_file(tmp_path / "key") is None

    def test_contents_untrimmed(self, tmp_path: Path) -> None:
        target = tmp_path / "key"
        target.write_text(" abc \n", encoding="utf-8")
        assert read_key_file(target) == " abc \n"


class TestEnvironmentSnapshot:
    def test_is_a_copy(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ASKCOSMOS_TEST_VALUE", "1")
        snapshot = environment_snapshot()
        monkeypatch.setenv("ASKCOSMOS_TEST_VALUE", "2")
        assert snapshot["ASKCOSMOS_TEST_VALUE"] == "1"


class TestUnreadableKeyFile:
    def test_undecodable_key_file_is_configuration_error(self, tmp_path: Path) -> None:
        target = tmp_path / "key"
        target.write_bytes(b"\xff\xfe\xfa")
        with pytest.raises(ConfigurationError) as exc_info:
            read_key_file(target)
        assert str(target) in str(exc_info.value)

    def test_permission_denied_is_configuration_error(self, tmp_path: Path) -> None:
        target = tmp_path / "key"
        target.write_text("abc", encoding="utf-8")
        with patch.object(Path, "read_text", side_effect=PermissionError("denied")):
            with pytest.raises(ConfigurationError, match="could not be read: denied"):
                read_key_file(target)
