"""
passmeter.display

Toolkit-independent helpers shared by the CLI, the web API and the GUI:
label -> meter style, formatted score/entropy, feedback with a friendly
default, and the "copy example password" action.
"""

import logging
from typing import Callable, Dict, List, Tuple

from .evaluator import EvaluationResult

logger = logging.getLogger(__name__)

SAMPLE_PASSPHRASE = "Correct Horse Battery Staple! 7"
LOOKS_GOOD = "Looks good — no obvious weak patterns detected."

# label -> (style name, meter colour)
FILL_STYLES: Dict[str, Tuple[str, str]] = {
    "Very Weak": ("fill-veryweak", "#d32f2f"),
    "Weak": ("fill-weak", "#f57c00"),
    "Fair": ("fill-fair", "#fbc02d"),
    "Strong": ("fill-strong", "#7cb342"),
    "Very Strong": ("fill-verystrong", "#2e7d32"),
}


def fill_style(label: str) -> Tuple[str, str]:
    """Return (style name, colour) for a label; unknown labels get the top style."""
    return FILL_STYLES.get(label, FILL_STYLES["Very Strong"])


def format_score(result: EvaluationResult) -> str:
    return f"Score: {result.score}/100"


def format_entropy(result: EvaluationResult) -> str:
    return f"Entropy: {result.entropy_bits:.1f} bits"


def feedback_lines(result: EvaluationResult) -> List[str]:
    if not result.feedback:
        return [LOOKS_GOOD]
    return list(result.feedback)


def copy_sample(write: Callable[[str], None], sample: str = SAMPLE_PASSPHRASE) -> Tuple[bool, str]:
    """
    Write the sample passphrase with the given clipboard writer.
    Returns (ok, message). When the clipboard is unavailable the message
    carries the literal sample so the user still gets it.
    """
    try:
        write(sample)
    except Exception as e:
        logger.warning("clipboard write failed: %s", e)
        return False, f"Could not access clipboard. Example: {sample}"
    return True, "Copied example password to clipboard."
