import json
import logging
import os
import re
from typing import List

from .avatar import generate
from .characters import CharacterType, Coordinate, Theme

log = logging.getLogger(__name__)

DEFAULT_INPUTS = [
    "Binx Bond", "Test User", "Alice", "Bob", "Charlie", "Diana", "Emma", "Frank",
    "Grace", "Henry", "测试用户", "user@example.com", "John Doe", "Jane Smith",
    "Admin123", "guest", "developer", "designer", "manager", "support",
]
SANS_ENV_INPUTS = ["Binx Bond", "Alice", "Charlie", "Emma"]
VERSION_INPUT = "Version Test"


def slugify(text: str) -> str:
    return re.sub(r"[^a-zA-Z0-9_-]", "_", text).lower()


def _write(path: str, svg: str) -> str:
    with open(path, "w", encoding="utf-8") as f:
        f.write(svg)
    return path


def write_examples(out_dir: str, inputs=None) -> List[str]:
    """
    Write sample avatars for eyeballing in a browser:
    <slug>.svg, <slug>_no_background.svg and version_char<id>_theme<X>.svg
    """
    inputs = DEFAULT_INPUTS if inputs is None else list(inputs)
    os.makedirs(out_dir, exist_ok=True)
    paths = []
    for text in inputs:
        paths.append(_write(os.path.join(out_dir, slugify(text) + ".svg"), generate(text)))
    for text in SANS_ENV_INPUTS:
        if text in inputs:
            name = slugify(text) + "_no_background.svg"
            paths.append(_write(os.path.join(out_dir, name), generate(text, sans_env=True)))
    for character in list(CharacterType)[:3]:
        for theme in Theme:
            svg = generate(VERSION_INPUT, version=Coordinate(character, theme))
            name = f"version_char{character.id}_theme{theme.code}.svg"
            paths.append(_write(os.path.join(out_dir, name), svg))
    log.info("wrote %d example avatars to %s", len(paths), out_dir)
    return paths


def _cases() -> list:
    cases = [
        ("Binx Bond", False, None), ("Test User", False, None),
        ("Alice", False, None), ("Bob", False, None),
        ("Example", True, None), ("No Background", True, None),
        ("", False, None), ("test", False, None), ("TEST", False, None),
        ("user@example.com", False, None), ("User Name 123!", False, None),
        ("测试用户", False, None), ("user-with-dashes", False, None),
    ]
    cases += [("Test", False, Coordinate(c, Theme.A)) for c in CharacterType]
    cases += [("Theme", False, Coordinate(CharacterType.GIRL, t)) for t in Theme]
    cases += [
        ("This is a longer test string with multiple words", False, None),
        ("john.doe@example.com", False, None),
        ("12345", False, None), ("User123", False, None),
    ]
    for c in CharacterType:
        for t in Theme:
            label = f"{c.display_name} - Theme {t.code}"
            cases.append((label, False, Coordinate(c, t)))
            cases.append((label + " (no background)", True, Coordinate(c, t)))
    return cases


def build_vectors() -> list:
    vectors = []
    for i, (text, sans_env, version) in enumerate(_cases()):
        svg = generate(text, sans_env, version)
        vectors.append({
            "id": i,
            "input": text,
            "sansEnv": sans_env,
            "version": {"part": version.character.id, "theme": version.theme.code} if version else None,
            "output": svg,
            "length": len(svg),
        })
    return vectors


def export_vectors(path: str = "test-vectors.json") -> str:
    vectors = build_vectors()
    with open(path, "w", encoding="utf-8") as f:
        json.dump(vectors, f, ensure_ascii=False, indent=2)
    log.info("wrote %d test vectors to %s", len(vectors), path)
    return path
