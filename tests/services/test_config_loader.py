import pytest

from shadowpromote.errors import PromoteError
from shadowpromote.services.config_loader import ConfigLoader


def _write_config(tmp_path, content):
    (tmp_path / ".shadowpromote.yml").write_text(content, encoding="utf-8")


def test_config_loader_loads_yaml_mapping(tmp_path):
    _write_config(tmp_path, "timeout: 5\npassword_file: /etc/mfs/admin-password\nverbose: true\n")

    loaded = ConfigLoader().load(str(tmp_path))

    assert loaded["timeout"] == 5
    assert loaded["password_file"] == "/etc/mfs/admin-password"
    assert loaded["verbose"] is True


def test_config_loader_returns_empty_without_file(tmp_path):
    assert ConfigLoader().load(str(tmp_path)) == {}


def test_config_loader_rejects_unknown_keys(tmp_path):
    _write_config(tmp_path, "retry_count: 3\n")

    with pytest.raises(PromoteError, match="Unknown configuration keys: retry_count"):
        ConfigLoader().load(str(tmp_path))


def test_config_loader_rejects_non_mapping_root(tmp_path):
    _write_config(tmp_path, "- timeout\n")

    with pytest.raises(PromoteError, match="YAML mapping"):
        ConfigLoader().load(str(tmp_path))


@pytest.mark.parametrize(
    "content,message",
    [
        ("verbose: 'false'\n", "'verbose' must be bool, got str"),
        ("request_id: true\n", "'request_id' must be int, got bool"),
        ("timeout: soon\n", "'timeout' must be int or float, got str"),
    ],
)
def test_config_loader_rejects_wrongly_typed_values(tmp_path, content, message):
    _write_config(tmp_path, content)

    with pytest.raises(PromoteError, match=message):
        ConfigLoader().load(str(tmp_path))
