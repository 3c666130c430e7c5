import re
from typing import List, Pattern

# One capturing class per precedence layer; the captured operators stay in
# the split output as their own elements.
COMPARISON_RE = re.compile(r'([<>=])')
ADDITIVE_RE = re.compile(r'([+-])')
MULTIPLICATIVE_RE = re.compile(r'([*/])')


def split_tokens(text: str, pattern: Pattern[str]) -> List[str]:
    """Split ``text`` on ``pattern`` keeping operators, trimmed, empties dropped."""
    return [part.strip() for part in pattern.split(text) if part.strip()]


def split_additive(text: str) -> List[str]:
    return split_tokens(text, ADDITIVE_RE)


def split_multiplicative(text: str) -> List[str]:
    return split_tokens(text, MULTIPLICATIVE_RE)


def split_comparison(text: str) -> List[str]:
    # raw parts: blank sides must survive so the arity check can see them
    return COMPARISON_RE.split(text)
