import json

from loguru import logger
import pytest

from linear_collections.config import ENV_DEBUG_LEVEL, ENV_DELIMITER
import run


@pytest.fixture(autouse=True)
def isolated(monkeypatch, tmp_path):
	for name in (ENV_DELIMITER, ENV_DEBUG_LEVEL):
		monkeypatch.setenv(name, "")
		monkeypatch.delenv(name)
	monkeypatch.chdir(tmp_path)
	yield
	logger.remove()
	logger.disable("linear_collections")


def test_config_file(tmp_path, capsys):
	path = tmp_path / "config.json"
	path.write_text(json.dumps({"delimiter": " | ", "debug_level": 1}))

	run.main(["--config", str(path), "--only", "linked_list"])

	err = capsys.readouterr().err
	assert "print: a | c | d" in err
	assert "TRACE" not in err


def test_delimiter_flag_overrides_config_file(tmp_path, capsys):
	path = tmp_path / "config.json"
	path.write_text(json.dumps({"delimiter": " | ", "debug_level": 1}))

	run.main(["-c", str(path), "-d", ", ", "-o", "linked_list"])

	assert "print: a, c, d" in capsys.readouterr().err


def test_env_used_without_config_file(monkeypatch, capsys):
	monkeypatch.setenv(ENV_DELIMITER, " ~ ")
	run.main(["-l", "-o", "linked_list"])
	assert "print: a ~ c ~ d" in capsys.readouterr().err


@pytest.mark.parametrize("contents", [
	"{\"delimiter\": ",
	json.dumps({"delimiter": " | ", "debug_level": True}),
])
def test_bad_config_file(tmp_path, capsys, contents):
	path = tmp_path / "config.json"
	path.write_text(contents)

	with pytest.raises(SystemExit) as exc_info:
		run.main(["--config", str(path)])

	assert exc_info.value.code == 2
	assert "Could not load config" in capsys.readouterr().err


def test_unknown_demo():
	with pytest.raises(SystemExit):
		run.main(["--only", "heap"])
