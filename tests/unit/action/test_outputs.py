"""Unit tests for output sinks."""

from pathlib import Path

import pytest

from boardplacer.action import GitHubOutputs, MemoryOutputs


@pytest.mark.unit
class TestGitHubOutputs:
    """Tests for GitHubOutputs."""

    def test_appends_to_output_file(self, tmp_path: Path) -> None:
        """Each write appends a name=value line."""
        path = tmp_path / "output"
        path.write_text("other=1\n", encoding="utf-8")
        outputs = GitHubOutputs(path)

        outputs.set_output("itemId", "PVTI_1")
        outputs.set_output("itemId", "PVTI_2")

        assert path.read_text(encoding="utf-8") == "other=1\nitemId=PVTI_1\nitemId=PVTI_2\n"

    def test_echoes_without_file(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Falls back to stdout when no output file is configured."""
        GitHubOutputs(None).set_output("itemId", "PVTI_1")

        assert capsys.readouterr().out == "itemId=PVTI_1\n"


@pytest.mark.unit
class TestMemoryOutputs:
    """Tests for MemoryOutputs."""

    def test_last_write_wins(self) -> None:
        """values holds the latest, history holds everything."""
        outputs = MemoryOutputs()

        outputs.set_output("itemId", "a")
        outputs.set_output("itemId", "b")

        assert outputs.values == {"itemId": "b"}
        assert outputs.history == [("itemId", "a"), ("itemId", "b")]
