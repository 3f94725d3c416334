"""
passmeter.evaluator

Password strength evaluator:
- analyze_charset(password): which character classes appear + alphabet size
- estimate_entropy(length, alphabet_size): theoretical maximum entropy (bits)
- detect patterns: repeated chars/chunks, ascending sequences, common words,
  keyboard walks, year-like digit runs
- evaluate(password): returns an EvaluationResult with score (0-100), label,
  entropy_bits and an ordered list of feedback messages

Everything here is pure; calling evaluate() on every keystroke is fine.
"""

import logging
import math
import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from .wordlists import COMMON_WORDS, KEYBOARD_PATTERNS

logger = logging.getLogger(__name__)

LABELS: Tuple[str, ...] = ("Very Weak", "Weak", "Fair", "Strong", "Very Strong")

# (upper bound, label), first match wins
_LABEL_BANDS = ((25, "Very Weak"), (45, "Weak"), (65, "Fair"), (85, "Strong"))

BASELINE_SCORE = 50
ENTROPY_TARGET_BITS = 80.0
ENTROPY_MAX_POINTS = 25.0

COMMON_WORD_PENALTY = 20
KEYBOARD_PATTERN_PENALTY = 15
YEAR_PENALTY = 8
REPEAT_PENALTY = 10
SEQUENCE_PENALTY = 10
PASSPHRASE_BONUS = 6
PASSPHRASE_MIN_LENGTH = 14

ALPHABET = "abcdefghijklmnopqrstuvwxyz"
DIGITS = "0123456789"

MSG_EMPTY = "Password is empty."
MSG_TOO_SHORT = "Use at least 12 characters (8 is a bare minimum)."
MSG_GOOD_START = "Good start — aim for 12–16+ characters for stronger security."
MSG_ADD_LOWER = "Add lowercase letters (a–z)."
MSG_ADD_UPPER = "Add uppercase letters (A–Z)."
MSG_ADD_DIGIT = "Add digits (0–9)."
MSG_ADD_SYMBOL = "Add symbols (e.g., !@#£%)."
MSG_COMMON = "Avoid common words/keyboard patterns (e.g., password, qwerty, asdf)."
MSG_REPEATS = "Avoid repeated characters or repeated chunks (e.g., aaa, ababab)."
MSG_SEQUENCES = "Avoid sequences (e.g., abcd, 1234)."
MSG_PASSPHRASE = "Nice: passphrases with spaces can be strong and memorable."

_LOWER_RE = re.compile(r"[a-z]")
_UPPER_RE = re.compile(r"[A-Z]")
_DIGIT_RE = re.compile(r"[0-9]")
_SYMBOL_RE = re.compile(r"[^A-Za-z0-9]")
_WHITESPACE_RE = re.compile(r"\s")
_YEAR_RE = re.compile(r"19[0-9]{2}|20[0-9]{2}")
# 3+ of the same char, or a 2-4 char chunk repeated back-to-back three times
_REPEAT_RE = re.compile(r"(.)\1\1|(.{2,4})\2\2", re.DOTALL)


def _windows(chars: str, size: int = 4) -> List[str]:
    return [chars[i:i + size] for i in range(len(chars) - size + 1)]


_SEQUENCE_WINDOWS: Tuple[str, ...] = tuple(_windows(ALPHABET) + _windows(DIGITS))


@dataclass(frozen=True)
class CharsetProfile:
    has_lower: bool
    has_upper: bool
    has_digit: bool
    has_symbol: bool

    @property
    def alphabet_size(self) -> int:
        size = 0
        if self.has_lower:
            size += 26
        if self.has_upper:
            size += 26
        if self.has_digit:
            size += 10
        if self.has_symbol:
            size += 32
        # never 0, log2 must stay defined
        return max(size, 1)


@dataclass(frozen=True)
class EvaluationResult:
    score: int
    label: str
    entropy_bits: float
    feedback: Tuple[str, ...]

    def to_dict(self) -> Dict:
        return {
            "score": self.score,
            "label": self.label,
            "entropy_bits": self.entropy_bits,
            "feedback": list(self.feedback),
        }


def analyze_charset(password: str) -> Tuple[CharsetProfile, List[str]]:
    """
    Detect which character classes are present (a single occurrence is enough).
    Returns the profile plus one advisory message per missing class, in the
    order lowercase, uppercase, digit, symbol.
    """
    profile = CharsetProfile(
        has_lower=bool(_LOWER_RE.search(password)),
        has_upper=bool(_UPPER_RE.search(password)),
        has_digit=bool(_DIGIT_RE.search(password)),
        has_symbol=bool(_SYMBOL_RE.search(password)),
    )
    notes = []
    if not profile.has_lower:
        notes.append(MSG_ADD_LOWER)
    if not profile.has_upper:
        notes.append(MSG_ADD_UPPER)
    if not profile.has_digit:
        notes.append(MSG_ADD_DIGIT)
    if not profile.has_symbol:
        notes.append(MSG_ADD_SYMBOL)
    return profile, notes


def estimate_entropy(length: int, alphabet_size: int) -> float:
    """
    Theoretical maximum entropy: length * log2(alphabet_size).
    Assumes uniform random picks; patterns are handled by penalties instead.
    """
    if length <= 0:
        return 0.0
    return length * math.log2(max(alphabet_size, 1))


def has_repeats(password: str) -> bool:
    """True for runs like 'aaa' or back-to-back chunks like 'ababab'."""
    return _REPEAT_RE.search(password.lower()) is not None


def has_sequences(password: str) -> bool:
    """
    True if any 4-char ascending run of letters or digits appears
    ('abcd'..'wxyz', '0123'..'6789'). Descending/wrapped runs are not flagged.
    """
    folded = password.lower()
    return any(window in folded for window in _SEQUENCE_WINDOWS)


def dictionary_penalty(
    password: str,
    common_words: Iterable[str] = COMMON_WORDS,
    keyboard_patterns: Iterable[str] = KEYBOARD_PATTERNS,
) -> Tuple[int, Optional[str]]:
    """
    Sum penalties for every common word and keyboard pattern contained in the
    password (overlapping matches all count), plus a one-time year penalty.
    Returns (penalty, message) where message is None when penalty is 0.
    """
    folded = password.lower()
    penalty = 0
    for word in common_words:
        if word in folded:
            penalty += COMMON_WORD_PENALTY
    for pattern in keyboard_patterns:
        if pattern in folded:
            penalty += KEYBOARD_PATTERN_PENALTY
    if _YEAR_RE.search(folded):
        penalty += YEAR_PENALTY
    return penalty, (MSG_COMMON if penalty else None)


def length_score(length: int) -> Tuple[int, Optional[str]]:
    if length < 8:
        return -25, MSG_TOO_SHORT
    if length < 12:
        return 5, MSG_GOOD_START
    if length < 16:
        return 15, None
    return 20, None


def label_for(score: int) -> str:
    for upper, label in _LABEL_BANDS:
        if score < upper:
            return label
    return "Very Strong"


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _clamp(value, low, high):
    return min(max(value, low), high)


def evaluate(password: str) -> EvaluationResult:
    """
    Score a password.

    Starts from a baseline of 50, then applies the length band, the entropy
    contribution (capped at +25 for 80+ bits), dictionary/keyboard/year
    penalties, repeat and sequence penalties and the passphrase bonus.
    The total is rounded, clamped to 0..100 and mapped to a label.
    entropy_bits is returned unrounded.
    """
    if not password:
        return EvaluationResult(score=0, label="Very Weak", entropy_bits=0.0, feedback=(MSG_EMPTY,))

    feedback: List[str] = []
    length = len(password)
    score = float(BASELINE_SCORE)

    delta, msg = length_score(length)
    score += delta
    if msg:
        feedback.append(msg)

    profile, notes = analyze_charset(password)
    feedback.extend(notes)

    entropy = estimate_entropy(length, profile.alphabet_size)
    score += _clamp((entropy / ENTROPY_TARGET_BITS) * ENTROPY_MAX_POINTS, 0.0, ENTROPY_MAX_POINTS)

    penalty, msg = dictionary_penalty(password)
    score -= penalty
    if msg:
        feedback.append(msg)

    if has_repeats(password):
        score -= REPEAT_PENALTY
        feedback.append(MSG_REPEATS)

    if has_sequences(password):
        score -= SEQUENCE_PENALTY
        feedback.append(MSG_SEQUENCES)

    if _WHITESPACE_RE.search(password) and length >= PASSPHRASE_MIN_LENGTH:
        score += PASSPHRASE_BONUS
        feedback.append(MSG_PASSPHRASE)

    final = _clamp(_round_half_up(score), 0, 100)
    label = label_for(final)
    logger.debug("evaluated password of length %d: score=%d label=%s", length, final, label)

    return EvaluationResult(score=final, label=label, entropy_bits=entropy, feedback=tuple(feedback))
