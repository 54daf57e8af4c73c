import json
from typer.testing import CliRunner
from superschema.cli import app

runner = CliRunner()

def write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return str(path)

def test_check_ok(tmp_path):
    data = write(tmp_path, "data.toml", 'name = "svc"\nports = [80, 443]\n[owner]\nemail = "a@b.c"\n')
    pattern = write(tmp_path, "pattern.toml", 'name = "string"\nports = "array number"\n"owner.email" = "string"\n')
    result = runner.invoke(app, ["check", data, "--pattern", pattern])
    assert result.exit_code == 0
    assert "OK" in result.output

def test_check_reports_pattern_error(tmp_path):
    data = write(tmp_path, "data.json", json.dumps({"ports": [80, "443"]}))
    pattern = write(tmp_path, "pattern.toml", '[pattern]\n__type = "object"\nports = "array number"\n')
    result = runner.invoke(app, ["check", data, "-p", pattern, "--name", "service"])
    assert result.exit_code == 1
    assert "service.ports[1] should have number type!" in result.output

def test_check_selects_key_with_string_pattern(tmp_path):
    data = write(tmp_path, "data.toml", '[server]\nmode = "fast"\n')
    pattern = write(tmp_path, "pattern.toml", 'pattern = "number"\n')
    result = runner.invoke(app, ["check", data, "-p", pattern, "-k", "server.mode"])
    assert result.exit_code == 1
    assert "server.mode should have number type!" in result.output

def test_check_reports_config_error(tmp_path):
    data = write(tmp_path, "data.toml", 'a = 1\n')
    pattern = write(tmp_path, "pattern.toml", 'a = "integer"\n')
    result = runner.invoke(app, ["check", data, "-p", pattern])
    assert result.exit_code == 2
    assert "Unknown type: integer" in result.output

def test_check_unsupported_document(tmp_path):
    data = write(tmp_path, "data.yaml", 'a: 1\n')
    pattern = write(tmp_path, "pattern.toml", 'a = "number"\n')
    result = runner.invoke(app, ["check", data, "-p", pattern])
    assert result.exit_code == 2
    assert "Unsupported document type: .yaml" in result.output

def test_types_lists_registry():
    result = runner.invoke(app, ["types"])
    assert result.exit_code == 0
    assert result.output.split() == ["array", "boolean", "date", "function", "number", "object", "observable", "string"]
