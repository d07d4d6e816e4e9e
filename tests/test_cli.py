import json

from wikichat import cli
from wikichat.chat.reply import build_reply
from wikichat.search.models import CandidateResult

_RESULTS = [
    CandidateResult(
        title="Ancient Rome",
        extract="Ancient Rome was a civilisation.",
        url="https://en.wikipedia.org/wiki/Ancient_Rome",
        relevance_score=140,
    )
]


class StubService:
    calls: list[tuple[str, str | None]] = []

    def __init__(self, config):
        self.config = config

    async def lookup(self, query, lang=None):
        StubService.calls.append((query, lang))
        return [] if "nothing" in query else _RESULTS

    async def ask(self, query, lang=None):
        return build_reply(query, await self.lookup(query, lang), lang or "en")


def test_cli_prints_reply_and_sources(monkeypatch, tmp_path, capsys) -> None:
    StubService.calls = []
    monkeypatch.setattr(cli, "ChatService", StubService)

    code = cli.main(["Ancient", "Rome", "--config", str(tmp_path / "config.json")])

    out = capsys.readouterr().out
    assert code == 0
    assert StubService.calls == [("Ancient Rome", None)]
    assert out.startswith("### Ancient Rome\nAncient Rome was a civilisation.")
    assert "- Ancient Rome: https://en.wikipedia.org/wiki/Ancient_Rome" in out


def test_cli_json_output(monkeypatch, tmp_path, capsys) -> None:
    StubService.calls = []
    monkeypatch.setattr(cli, "ChatService", StubService)

    code = cli.main(["--json", "--lang", "en", "Ancient Rome", "--config", str(tmp_path / "c.json")])

    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert payload[0]["title"] == "Ancient Rome"
    assert payload[0]["relevance_score"] == 140
    assert StubService.calls == [("Ancient Rome", "en")]


def test_cli_not_found_exit_code(monkeypatch, tmp_path, capsys) -> None:
    monkeypatch.setattr(cli, "ChatService", StubService)

    code = cli.main(["nothing here", "--config", str(tmp_path / "c.json")])

    assert code == 1
    assert "Search directly on Wikipedia" in capsys.readouterr().out
