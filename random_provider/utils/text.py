import re

_WORD_PATTERN = re.compile(r"\w\S*", re.ASCII)


def to_title_case(value: str) -> str:
    """Title case each whitespace-delimited word, e.g. ``"TEMPERATURE"`` -> ``"Temperature"``."""
    return _WORD_PATTERN.sub(lambda match: match.group(0)[:1].upper() + match.group(0)[1:].lower(), value)
