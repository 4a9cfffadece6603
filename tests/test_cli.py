import json
from typer.testing import CliRunner
from wordflow.cli import app

runner = CliRunner()

def test_level_json_offline():
    result = runner.invoke(app, ["level", "--offline", "--json", "--length", "6"])
    assert result.exit_code == 0, result.output

    level = json.loads(result.output)
    assert len(level["root_letters"]) == 6
    assert sorted(ch.lower() for ch in level["display_letters"]) == list(level["root_letters"])
    assert 0 < len(level["valid_words"]) <= 12

def test_level_table_offline():
    result = runner.invoke(app, ["level", "--offline", "-n", "5"])
    assert result.exit_code == 0, result.output
    assert "Letters:" in result.output

def test_check_known_word():
    result = runner.invoke(app, ["check", "Strain", "--offline"])
    assert result.exit_code == 0
    assert "STRAIN is a valid word" in result.output

def test_check_unknown_word():
    result = runner.invoke(app, ["check", "qwzx", "--offline"])
    assert result.exit_code == 1
    assert "not in the dictionary" in result.output

def test_check_local_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("zebra\nquartz\n", encoding="utf-8")
    result = runner.invoke(app, ["check", "quartz", "--file", str(path)])
    assert result.exit_code == 0
    assert "QUARTZ is a valid word" in result.output

def test_play_until_quit():
    result = runner.invoke(app, ["play", "--offline"], input="xyzzy\n:giveup\n:quit\n")
    assert result.exit_code == 0, result.output
    assert "Level 1" in result.output
    assert "Not a word!" in result.output
    assert "Words revealed!" in result.output
