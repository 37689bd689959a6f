# tests/config/test_report_config.py
import pytest

from propreport.config import ConfigIssue, ReportConfig, load_config, validate_config
from propreport.config import loader
from propreport.core.errors import ReportError, codes


@pytest.fixture(autouse=True)
def no_home_config(tmp_path, monkeypatch):
    monkeypatch.setattr(loader, "DEFAULT_CONFIG_PATH", tmp_path / "absent" / "config.yml")


def test_defaults_without_yaml():
    config = ReportConfig.from_yaml()

    assert config == ReportConfig.default()
    assert config.reserved_name == "properties"
    assert config.placeholder == "{...}"
    assert config.failure_suffix == "[Rendering failed]"
    assert config.null_text == "null"
    assert config.output_format == "text"


def test_yaml_overrides_and_ignores_unknown_keys(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text(
        "report:\n"
        "  placeholder: '<self>'\n"
        "  qualified_type_names: true\n"
        "  colour: blue\n",
        encoding="utf-8",
    )

    config = ReportConfig.from_yaml(path)

    assert config.placeholder == "<self>"
    assert config.qualified_type_names is True
    assert config.reserved_name == "properties"


def test_default_path_is_used_when_present(tmp_path, monkeypatch):
    path = tmp_path / "home.yml"
    path.write_text("report:\n  output_format: json\n", encoding="utf-8")
    monkeypatch.setattr(loader, "DEFAULT_CONFIG_PATH", path)

    assert load_config().output_format == "json"


def test_explicit_missing_path_is_an_error(tmp_path):
    with pytest.raises(ReportError) as exc_info:
        ReportConfig.from_yaml(tmp_path / "nope.yml")

    assert exc_info.value.error_code == codes.CONFIG_INVALID


def test_non_mapping_yaml_is_an_error(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")

    with pytest.raises(ReportError):
        ReportConfig.from_yaml(path)


def test_load_config_rejects_error_issues(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("report:\n  output_format: xml\n  placeholder: ''\n", encoding="utf-8")

    with pytest.raises(ReportError) as exc_info:
        load_config(path)

    assert exc_info.value.error_code == codes.CONFIG_INVALID
    assert set(exc_info.value.details["issues"]) == {"report.output_format", "report.placeholder"}


def test_validate_warns_on_title_with_json():
    issues = validate_config(ReportConfig(output_format="json", title="T"))

    assert issues == [
        ConfigIssue(
            level="warn",
            path="report.title",
            message="title has no effect with output_format='json'",
        )
    ]


def test_default_config_has_no_issues():
    assert validate_config(ReportConfig()) == []


def test_to_dict():
    data = ReportConfig().to_dict()

    assert data["report"]["reserved_name"] == "properties"
    assert data["report"]["title"] is None


def test_invalid_yaml_chains_the_parser_error(tmp_path):
    import yaml

    path = tmp_path / "config.yml"
    path.write_text("report: [unclosed\n", encoding="utf-8")

    with pytest.raises(ReportError) as exc_info:
        ReportConfig.from_yaml(path)

    assert isinstance(exc_info.value.__cause__, yaml.YAMLError)
    assert exc_info.value.cause is exc_info.value.__cause__
