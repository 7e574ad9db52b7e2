import json
from pathlib import Path

import yaml
from click.testing import CliRunner

from reqres_collector.cli import main
from reqres_collector.config import CONFIG_ENV_VAR

FIXTURES = Path(__file__).parent / "fixtures"


class TestCliDescribe:
    def test_describe_action(self):
        runner = CliRunner()
        result = runner.invoke(main, ["describe", "users", "show", "--root", str(FIXTURES)])

        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert payload["description"] == "Returns a single user. \n Admins also see the email address."
        assert payload["params"] == [
            {"name": "id", "required": "required", "type": "Integer", "description": "the user id"},
        ]

    def test_describe_missing_action(self):
        runner = CliRunner()
        result = runner.invoke(main, ["describe", "users", "destroy", "--root", str(FIXTURES)])

        assert result.exit_code == 0
        assert '"params": []' in result.output
        assert "No documentation found" in result.output

    def test_describe_with_config(self, tmp_path):
        config = tmp_path / "reqres.yaml"
        config.write_text(
            yaml.safe_dump({"controllers_root": str(FIXTURES), "param_types": ["String"]}),
            encoding="utf-8",
        )
        runner = CliRunner()
        result = runner.invoke(main, ["describe", "api/posts", "index", "--config", str(config)])

        assert result.exit_code == 0
        payload = json.loads(result.output)
        # Integer is not in the configured vocabulary
        assert payload["params"][0]["type"] is None
        assert payload["params"][0]["description"] == "Integer owner of the posts"

    def test_describe_with_broken_config(self, tmp_path):
        config = tmp_path / "bad.yaml"
        config.write_text("key: [invalid\n", encoding="utf-8")
        runner = CliRunner()
        result = runner.invoke(main, ["describe", "users", "show", "--config", str(config)])

        assert result.exit_code != 0
        assert "Cannot read config" in result.output


class TestCliShowConfig:
    def test_show_defaults(self, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        runner = CliRunner()
        result = runner.invoke(main, ["show-config"])

        assert result.exit_code == 0
        data = yaml.safe_load(result.output)
        assert data["routing_key"] == "wsgiorg.routing_args"
        assert "X-Frame-Options" in data["excluded_response_headers"]

    def test_show_config_from_env(self, monkeypatch):
        monkeypatch.setenv(CONFIG_ENV_VAR, str(FIXTURES / "reqres.yaml"))
        runner = CliRunner()
        result = runner.invoke(main, ["show-config"])

        assert result.exit_code == 0
        data = yaml.safe_load(result.output)
        assert data["excluded_request_headers"] == ["wsgi.", "HTTP_COOKIE"]
