"""
passmeter.wordlists

Fixed knowledge bases shared by the evaluator and the tests.
Order matters only for readability; every entry is checked.
"""

from typing import Tuple

# weak words/substrings, each match costs 20 points
COMMON_WORDS: Tuple[str, ...] = (
    "password", "pass", "admin", "welcome", "letmein", "qwerty",
    "iloveyou", "monkey", "dragon", "football", "baseball", "shadow",
    "login", "master", "hello", "freedom",
)

# keyboard walks, each match costs 15 points
KEYBOARD_PATTERNS: Tuple[str, ...] = ("qwerty", "asdf", "zxcv", "12345", "09876")
