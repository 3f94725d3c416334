import json

from passmeter.cli import main

def test_score_json(capsys):
    main(["score", "password", "--json"])
    data = json.loads(capsys.readouterr().out)
    assert data["score"] == 27
    assert data["label"] == "Weak"

def test_score_panel(capsys):
    main(["score", "password"])
    out = capsys.readouterr().out
    assert "Score: 27/100" in out
    assert "Entropy: 37.6 bits" in out
    assert "Add digits (0–9)." in out

def test_score_prompts_when_omitted(monkeypatch, capsys):
    monkeypatch.setattr("passmeter.cli.getpass", lambda prompt: "")
    main(["score"])
    out = capsys.readouterr().out
    assert "Very Weak" in out
    assert "Password is empty." in out

def test_example(capsys):
    main(["example"])
    out = capsys.readouterr().out
    assert "Correct Horse Battery Staple! 7" in out
    assert "Very Strong" in out
    assert "Score: 100/100" in out

def test_score_prompt_cancelled(monkeypatch, capsys):
    def cancelled(prompt):
        raise EOFError

    monkeypatch.setattr("passmeter.cli.getpass", cancelled)
    main(["score"])
    out = capsys.readouterr().out
    assert "No password entered" in out
    assert "Score:" not in out
