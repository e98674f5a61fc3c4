import pytest

import play
from conversation import RelayError
from instructions import PLACEHOLDER_HTML
from schemas import GenerateResponse

GAME = "<html><body><script>let score=0;</script></body></html>"


class ScriptedTransport:
    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.prompts = []

    def generate(self, prompt, conversation):
        self.prompts.append(prompt)
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture
def run_play(monkeypatch, tmp_path):
    """Run play.main with scripted stdin; records the preview file before each prompt."""
    out = tmp_path / "preview.html"

    def _run(transport, lines):
        seen = []
        feed = iter(lines)

        def fake_input(_prompt=""):
            seen.append(out.read_text(encoding="utf-8"))
            line = next(feed)
            if isinstance(line, BaseException):
                raise line
            return line

        monkeypatch.setattr(play, "RelayClient", lambda url: transport)
        monkeypatch.setattr("builtins.input", fake_input)
        play.main(["--url", "http://studio.local", "--out", str(out)])
        return seen, out.read_text(encoding="utf-8")

    return _run


def test_preview_starts_as_placeholder_then_holds_game(run_play, capsys):
    transport = ScriptedTransport(GenerateResponse(reply="Dodge the asteroids.", game=GAME))
    seen, final = run_play(transport, ["retro space shooter", ""])

    assert seen[0] == PLACEHOLDER_HTML
    assert seen[1] == GAME
    assert final == GAME
    assert transport.prompts == ["retro space shooter"]
    assert "Dodge the asteroids." in capsys.readouterr().out


def test_failure_prints_error_and_keeps_preview(run_play, capsys):
    transport = ScriptedTransport(
        GenerateResponse(reply="ok", game=GAME),
        RelayError("Failed to parse model output."),
    )
    seen, final = run_play(transport, ["first", "second", ""])

    assert "[play] ERROR: Failed to parse model output." in capsys.readouterr().out
    assert seen[2] == GAME
    assert final == GAME


def test_eof_exits_with_placeholder(run_play):
    transport = ScriptedTransport()
    seen, final = run_play(transport, [EOFError()])

    assert seen == [PLACEHOLDER_HTML]
    assert final == PLACEHOLDER_HTML
    assert transport.prompts == []
