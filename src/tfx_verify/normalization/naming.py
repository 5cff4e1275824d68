"""Display-name helpers for modules and generated manifests."""

from __future__ import annotations

import re

_BRACKET_SEGMENT = re.compile(r"\[[^\]]*\]")


def capitalize_words(text: str) -> str:
    """Capitalize the first letter of each space separated word."""

    return " ".join(word[:1].upper() + word[1:] for word in text.split(" "))


def format_module_name(address: str) -> str:
    """Turn ``module.a["x"].module.deep_child`` into ``Deep Child``."""

    segments = _BRACKET_SEGMENT.sub("", address).split(".")
    last = segments[-1] if segments else address
    return capitalize_words(last.replace("_", " "))
