"""
Tests for layered resolution order and provenance.
"""
import pytest
from melvis_segment import (
    MelvisOptions,
    MelvisResolver,
    ValueSource,
    resolve_config
)

@pytest.fixture
def workspace(tmp_path):
    (tmp_path / "settings.yml").write_text('stack_name: "from-file"\npf: "file-pf"\nsb_version: "1.4"\n')
    (tmp_path / ".mdk.env").write_text("STACK_NAME=from-env-file\nPF=env-file-pf\n")
    return tmp_path

class TestMelvisResolver:
    def test_process_env_wins(self, workspace):
        """Last writer wins when every layer sets both names."""
        environ = {"STACK_NAME": "from-env", "PF": "env-pf"}
        config = resolve_config(str(workspace), environ)

        assert config.stack_name == environ["STACK_NAME"]
        assert config.pf_name == environ["PF"]
        assert config.stack_name_source == ValueSource.FROM_PROCESS_ENV
        assert config.pf_name_source == ValueSource.FROM_PROCESS_ENV
        assert config.sb_version == "1.4"

    def test_env_file_overrides_settings(self, workspace):
        config = resolve_config(str(workspace), {})

        assert config.stack_name == "from-env-file"
        assert config.stack_name_source == ValueSource.FROM_FILE
        assert config.pf_name == "env-file-pf"
        assert config.pf_name_source == ValueSource.FROM_ENV_FILE

    def test_corrected_env_file_tag(self, workspace):
        options = MelvisOptions(env_file_stack_name_source=ValueSource.FROM_ENV_FILE)
        config = resolve_config(str(workspace), {}, options)

        assert config.stack_name_source == ValueSource.FROM_ENV_FILE

    def test_env_cannot_touch_version(self, workspace):
        (workspace / ".mdk.env").write_text("SB_VERSION=9.9\n")
        config = resolve_config(str(workspace), {"SB_VERSION": "9.9", "sb_version": "9.9"})

        assert config.sb_version == "1.4"

    def test_scenario_b(self, tmp_path):
        """No settings file, STACK_NAME from env file, PF from process env."""
        (tmp_path / ".mdk.env").write_text("STACK_NAME=staging\n")
        config = resolve_config(str(tmp_path), {"PF": "api"})

        assert config.stack_name == "staging"
        assert config.stack_name_source == ValueSource.FROM_FILE
        assert config.pf_name == "api"
        assert config.pf_name_source == ValueSource.FROM_PROCESS_ENV

    def test_nothing_configured(self, tmp_path):
        config = resolve_config(str(tmp_path), {})

        assert config.is_empty()
        assert config.stack_name_source == ValueSource.FROM_FILE
        assert config.pf_name_source == ValueSource.FROM_FILE

    def test_read_results_recorded_in_order(self, workspace):
        result = MelvisResolver().resolve(str(workspace), {})

        assert [r.source for r in result.reads] == [
            ValueSource.FROM_FILE,
            ValueSource.FROM_ENV_FILE,
            ValueSource.FROM_PROCESS_ENV,
        ]
        assert result.reads[0].path == str(workspace / "settings.yml")
        assert result.reads[1].path == str(workspace / ".mdk.env")
        assert all(r.applied for r in result.reads)

    def test_missing_files_reported_not_raised(self, tmp_path):
        result = MelvisResolver().resolve(str(tmp_path), {})

        assert result.reads[0].applied is False
        assert result.reads[1].applied is False
        assert result.reads[0].error
        assert result.reads[1].error == "file not found"

    def test_custom_file_names(self, tmp_path):
        (tmp_path / "conf").mkdir()
        (tmp_path / "conf" / "stack.yaml").write_text("stack_name: custom\n")
        absolute_env = tmp_path / "elsewhere.env"
        absolute_env.write_text("PF=abs\n")
        options = MelvisOptions(settings_file="conf/stack.yaml", env_file=str(absolute_env))

        config = resolve_config(str(tmp_path), {}, options)

        assert config.stack_name == "custom"
        assert config.pf_name == "abs"

    def test_defaults_to_os_environ(self, workspace, monkeypatch):
        monkeypatch.setenv("PF", "live-pf")
        monkeypatch.delenv("STACK_NAME", raising=False)
        config = resolve_config(str(workspace))

        assert config.pf_name == "live-pf"
        assert config.pf_name_source == ValueSource.FROM_PROCESS_ENV

    def test_fresh_config_per_call(self, workspace):
        resolver = MelvisResolver()
        first = resolver.resolve(str(workspace), {"PF": "one"}).config
        second = resolver.resolve(str(workspace), {}).config

        assert first is not second
        assert first.pf_name == "one"
        assert second.pf_name == "env-file-pf"
