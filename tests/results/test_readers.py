"""Tests for artifact readers."""

import json
from pathlib import Path
from unittest.mock import patch

from qagate.results.readers import (
    ArtifactPaths,
    load_artifacts,
    read_json_artifact,
    read_text_artifact,
)


class TestReadTextArtifact:
    """Test read_text_artifact."""

    def test_reads_content(self, tmp_path: Path) -> None:
        path = tmp_path / "unit.txt"
        path.write_text("ℹ pass 3\n", encoding="utf-8")
        assert read_text_artifact(path) == "ℹ pass 3\n"

    def test_missing_file_is_absent(self, tmp_path: Path, log_messages: list[str]) -> None:
        """Missing artifacts are absent, noted at debug level only."""
        assert read_text_artifact(tmp_path / "missing.txt") is None
        assert any("not found" in m for m in log_messages)

    def test_empty_file_is_absent(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.txt"
        path.write_text("", encoding="utf-8")
        assert read_text_artifact(path) is None

    def test_directory_is_absent(self, tmp_path: Path, log_messages: list[str]) -> None:
        """Unreadable paths are swallowed and logged."""
        assert read_text_artifact(tmp_path) is None
        assert any("Error reading" in m for m in log_messages)

    def test_invalid_utf8_is_absent(self, tmp_path: Path) -> None:
        path = tmp_path / "binary.txt"
        path.write_bytes(b"\xff\xfe\xfa")
        assert read_text_artifact(path) is None

    def test_name_too_long_is_absent(self, tmp_path: Path, log_messages: list[str]) -> None:
        """ENAMETOOLONG is an unreadable artifact, not a crash."""
        assert read_text_artifact(tmp_path / ("x" * 300)) is None
        assert any("Error reading" in m for m in log_messages)

    def test_file_as_parent_is_absent(self, tmp_path: Path) -> None:
        parent = tmp_path / "not-a-dir"
        parent.write_text("plain file", encoding="utf-8")
        assert read_text_artifact(parent / "unit.txt") is None

    def test_permission_denied_is_absent(self, tmp_path: Path, log_messages: list[str]) -> None:
        """Permission errors on the path degrade to absent."""
        with patch.object(Path, "read_text", side_effect=PermissionError("denied")):
            assert read_text_artifact(tmp_path / "locked" / "unit.txt") is None
        assert any("Error reading" in m for m in log_messages)


class TestReadJsonArtifact:
    """Test read_json_artifact."""

    def test_reads_object(self, tmp_path: Path) -> None:
        path = tmp_path / "report.json"
        path.write_text(json.dumps({"run": {"stats": {}}}), encoding="utf-8")
        assert read_json_artifact(path) == {"run": {"stats": {}}}

    def test_truncated_json_is_absent(self, tmp_path: Path, log_messages: list[str]) -> None:
        """Malformed JSON degrades to absent with a diagnostic."""
        path = tmp_path / "report.json"
        path.write_text('{"run": {"stats": ', encoding="utf-8")

        assert read_json_artifact(path) is None
        assert any("Error parsing JSON" in m for m in log_messages)

    def test_non_object_is_absent(self, tmp_path: Path) -> None:
        path = tmp_path / "report.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        assert read_json_artifact(path) is None

    def test_missing_is_absent(self, tmp_path: Path) -> None:
        assert read_json_artifact(tmp_path / "nope.json") is None


class TestLoadArtifacts:
    """Test load_artifacts."""

    def test_nothing_present(self, tmp_path: Path) -> None:
        artifacts = load_artifacts(ArtifactPaths(), tmp_path)
        assert artifacts.unit is None
        assert artifacts.lcov is None
        assert artifacts.bdd is None
        assert artifacts.api is None
        assert artifacts.api_json is None
        assert artifacts.ui is None

    def test_default_layout(self, write_artifact, tmp_path: Path) -> None:
        """Artifacts are found at their default relative locations."""
        write_artifact("backend/unit-test-results.txt", "unit")
        write_artifact("backend/coverage/lcov.info", "LF:1\nLH:1\n")
        write_artifact("backend/bdd-test-results.txt", "bdd")
        write_artifact("backend/api-test-results.json", '{"run": {}}')
        write_artifact("ui-tests/ui-test-results.txt", "ui")

        artifacts = load_artifacts(ArtifactPaths(), tmp_path)

        assert artifacts.unit == "unit"
        assert artifacts.lcov == "LF:1\nLH:1\n"
        assert artifacts.bdd == "bdd"
        assert artifacts.api is None
        assert artifacts.api_json == {"run": {}}
        assert artifacts.ui == "ui"

    def test_absolute_paths_kept(self, tmp_path: Path) -> None:
        elsewhere = tmp_path / "elsewhere" / "ui.txt"
        elsewhere.parent.mkdir()
        elsewhere.write_text("2 passing", encoding="utf-8")

        artifacts = load_artifacts(ArtifactPaths(ui=elsewhere), tmp_path / "project")

        assert artifacts.ui == "2 passing"

    def test_unusable_configured_path(self, tmp_path: Path) -> None:
        """One unreadable configured path does not stop the other layers loading."""
        (tmp_path / "backend").mkdir()
        (tmp_path / "backend" / "bdd-test-results.txt").write_text("bdd", encoding="utf-8")

        artifacts = load_artifacts(ArtifactPaths(ui=Path("y" * 300)), tmp_path)

        assert artifacts.ui is None
        assert artifacts.bdd == "bdd"

    def test_resolve(self, tmp_path: Path) -> None:
        resolved = ArtifactPaths().resolve(tmp_path)
        assert resolved.unit == tmp_path / "backend" / "unit-test-results.txt"
