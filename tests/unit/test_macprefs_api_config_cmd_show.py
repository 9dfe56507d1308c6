"""Unit tests for config cmd_show."""

from macprefs.api.config.cmd_show import cmd_show
from tests.conftest import run_cmd


class TestCmdShow:
    def test_lists_sections(self, macprefs_home):
        result = run_cmd(cmd_show, "")
        assert result.success
        assert result.output["content"] == {"sections": ["system", "plans", "log"]}
        assert result.output["config_exists"] is True

    def test_valid_section(self, macprefs_home):
        result = run_cmd(cmd_show, "system")
        assert result.success
        assert result.output["content"]["type"] == "sandbox"
        assert result.output["content"]["data"]["state_file"] == "sandbox.json"

    def test_unknown_section(self, macprefs_home):
        result = run_cmd(cmd_show, "daemon")
        assert not result.success
        assert "Unknown section" in result.output["errors"][0]

    def test_missing_config_warns(self, tmp_path, monkeypatch):
        monkeypatch.setenv("MACPREFS_HOME", str(tmp_path))
        result = run_cmd(cmd_show, "plans")
        assert result.success
        assert result.output["config_exists"] is False
        assert result.output["warnings"]
        assert result.output["content"] == {"directory": "plans"}

    def test_invalid_config_file(self, tmp_path, monkeypatch):
        monkeypatch.setenv("MACPREFS_HOME", str(tmp_path))
        (tmp_path / "config.json").write_text("{invalid json")

        result = run_cmd(cmd_show, "log")
        assert result.success is False
        assert result.output["section"] == "log"
        assert result.output["errors"]
