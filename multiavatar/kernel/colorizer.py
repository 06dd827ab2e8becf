import re
from typing import List, Sequence

PLACEHOLDER = re.compile(r"#([^;]*);")


def placeholders(template: str) -> List[str]:
    return [m.group(0) for m in PLACEHOLDER.finditer(template)]


def colorize(template: str, colors: Sequence[str]) -> str:
    """
    Fill a part template with its theme colors.

    Tokens are collected from the untouched template, then token i is
    replaced at its first occurrence in the string as rewritten so far. When
    an earlier color reproduces the text of a later token, that later step
    hits the earlier slot again. Output depends on this, keep it.
    Missing colors leave tokens as written; extra colors are ignored.
    """
    tokens = placeholders(template)
    result = template
    for token, color in zip(tokens, colors):
        result = result.replace(token, color + ";", 1)
    return result
