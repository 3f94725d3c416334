from passmeter.display import (
    FILL_STYLES,
    LOOKS_GOOD,
    SAMPLE_PASSPHRASE,
    copy_sample,
    feedback_lines,
    fill_style,
    format_entropy,
    format_score,
)
from passmeter.evaluator import LABELS, evaluate

def test_fill_style_covers_every_label():
    assert set(FILL_STYLES) == set(LABELS)
    names = [fill_style(label)[0] for label in LABELS]
    assert names == ["fill-veryweak", "fill-weak", "fill-fair", "fill-strong", "fill-verystrong"]
    assert fill_style("???") == fill_style("Very Strong")

def test_formatting():
    result = evaluate("password")
    assert format_score(result) == "Score: 27/100"
    assert format_entropy(result) == "Entropy: 37.6 bits"
    assert format_entropy(evaluate("")) == "Entropy: 0.0 bits"

def test_feedback_lines_default_message():
    assert feedback_lines(evaluate("X7f!9Lq@2Vb#tR4sYp")) == [LOOKS_GOOD]
    assert feedback_lines(evaluate("")) == ["Password is empty."]

def test_copy_sample_success():
    written = []
    ok, message = copy_sample(written.append)
    assert ok
    assert written == [SAMPLE_PASSPHRASE]
    assert message == "Copied example password to clipboard."

def test_copy_sample_falls_back_to_literal():
    def denied(text):
        raise PermissionError("clipboard blocked")

    ok, message = copy_sample(denied, "my sample")
    assert not ok
    assert message.endswith("Example: my sample")
