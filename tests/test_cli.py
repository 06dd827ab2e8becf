import json
import os

import pytest
from multiavatar.kernel.avatar import generate, generate_pure
from multiavatar.kernel.characters import CharacterType, Theme
from multiavatar.multiavatar_cli import build_parser, main, run

@pytest.fixture
def stdout(capsys):
    def read():
        return capsys.readouterr().out
    return read

def test_identifier_to_stdout(stdout):
    assert main(["Binx Bond"]) == 0
    assert stdout() == generate("Binx Bond") + "\n"

def test_out_file(tmp_path):
    target = tmp_path / "binx.svg"
    assert main(["Binx Bond", "--sans-env", "--out", str(target)]) == 0
    assert target.read_text(encoding="utf-8") == generate("Binx Bond", sans_env=True)

def test_pure_character(stdout):
    assert main(["--character", "08", "--theme", "b"]) == 0
    assert stdout().strip() == generate_pure(CharacterType.AFROHAIR, Theme.B)

def test_forced_version(stdout):
    assert main(["Test", "--character", "01", "--theme", "B"]) == 0
    assert stdout().strip() == generate_pure(CharacterType.GIRL, Theme.B)

def test_seed_is_repeatable(stdout):
    assert main(["--seed", "42"]) == 0
    first = stdout()
    assert main(["--seed", "42"]) == 0
    assert stdout() == first

def test_descriptor(stdout):
    assert main(["Binx Bond", "--descriptor"]) == 0
    assert stdout().strip() == "05C07C06A06A06C07C"
    assert main(["--character", "15", "--theme", "C", "--descriptor"]) == 0
    assert stdout().strip() == "15C" * 6

def test_empty_identifier(stdout):
    assert main([""]) == 0
    assert stdout() == "\n"

def test_bad_arguments():
    assert main(["--character", "16"]) == 1
    assert main(["--character", "01", "--theme", "D"]) == 1
    assert main([]) == 1
    with pytest.raises(ValueError):
        run(build_parser().parse_args([]))

def test_examples(tmp_path, stdout):
    out_dir = tmp_path / "examples"
    assert main(["--examples", str(out_dir)]) == 0
    names = os.listdir(out_dir)
    assert len(names) == 20 + 4 + 9
    assert "binx_bond.svg" in names
    assert "alice_no_background.svg" in names
    assert "version_char02_themeC.svg" in names
    assert (out_dir / "binx_bond.svg").read_text(encoding="utf-8") == generate("Binx Bond")
    assert stdout() == ""

def test_vectors(tmp_path):
    target = tmp_path / "test-vectors.json"
    assert main(["--vectors", str(target)]) == 0
    with open(target, encoding="utf-8") as f:
        vectors = json.load(f)
    assert len(vectors) == 132
    assert [v["id"] for v in vectors] == list(range(132))
    first = vectors[0]
    assert first["input"] == "Binx Bond"
    assert first["version"] is None
    assert first["output"] == generate("Binx Bond")
    assert first["length"] == len(first["output"])
    empty = [v for v in vectors if v["input"] == ""]
    assert empty[0]["output"] == "" and empty[0]["length"] == 0
    assert {"part": "00", "theme": "A"} in [v["version"] for v in vectors]
    assert "测试用户" in [v["input"] for v in vectors]

def test_vectors_then_draw(tmp_path, stdout):
    target = tmp_path / "v.json"
    assert main(["Alice", "--vectors", str(target)]) == 0
    assert target.exists()
    assert stdout().strip() == generate("Alice")

def test_conflicting_arguments(stdout):
    assert main(["Alice", "--seed", "3"]) == 1
    assert main(["Alice", "--theme", "B"]) == 1
    assert main(["--theme", "C"]) == 1
    assert stdout() == ""
    with pytest.raises(ValueError):
        run(build_parser().parse_args(["Alice", "--seed", "3"]))
