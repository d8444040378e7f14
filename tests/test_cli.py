import ast
import json

import pytest

from twirpgen.cli import main


DESCRIPTOR = {
    "services": [
        {
            "package": "example",
            "proto_name": "Greeter",
            "methods": [
                {"proto_name": "SayHello", "input_type": "HelloRequest", "output_type": "HelloResponse"},
            ],
        }
    ]
}


def test_cli_writes_module_to_file(tmp_path, capsys):
    descriptor = tmp_path / "greeter.json"
    descriptor.write_text(json.dumps(DESCRIPTOR))
    out = tmp_path / "gen" / "greeter_twirp.py"

    assert main([str(descriptor), "-o", str(out)]) == 0

    text = out.read_text()
    ast.parse(text)
    assert "async def say_hello(self, ctx: twirp.Context, req: HelloRequest) -> HelloResponse:" in text
    assert '.route("/SayHello", HelloRequest' in text
    printed = capsys.readouterr().out
    assert "  example.Greeter: 1 method(s)" in printed
    assert f"Generated: {out}" in printed


def test_cli_output_directory_and_runtime_module(tmp_path):
    descriptor = tmp_path / "my-services.json"
    descriptor.write_text(json.dumps(DESCRIPTOR["services"][0]))

    main(["--descriptor", str(descriptor), "-o", str(tmp_path / "out"), "--runtime-module", "rpc"])

    text = (tmp_path / "out" / "my_services_twirp.py").read_text()
    assert "import rpc as twirp" in text


def test_cli_missing_descriptor(tmp_path):
    with pytest.raises(SystemExit) as exc_info:
        main([str(tmp_path / "nope.json")])
    assert exc_info.value.code == 2


def test_cli_invalid_json(tmp_path):
    descriptor = tmp_path / "bad.json"
    descriptor.write_text("{not json")
    with pytest.raises(ValueError):
        main([str(descriptor), "-o", str(tmp_path / "x.py")])
