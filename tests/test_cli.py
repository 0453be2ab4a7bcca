import json

import ph_news.__main__ as cli
from ph_news.models import Article

from conftest import NOW


def test_fetch_prints_json(monkeypatch, capsys):
    article = Article(
        id="1", title="Hello", excerpt="", image="https://img/1.jpg", category="Top",
        author="PTV", published_at=NOW, url="https://example.com/1", source="PTV",
    )
    seen = {}

    class StubAggregator:
        def __init__(self, **kwargs):
            seen.update(kwargs)

        def collect(self):
            return [article]

    monkeypatch.setattr(cli, "ArticleAggregator", StubAggregator)
    monkeypatch.setattr(cli, "configure_logging", lambda level: None)

    assert cli.main(["fetch", "--limit", "5"]) == 0

    out = json.loads(capsys.readouterr().out)
    assert out == [article.to_dict()]
    assert seen["limit"] == 5


def test_serve_runs_uvicorn_with_settings_fallback(monkeypatch):
    import uvicorn

    from ph_news.config import Settings

    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))
    monkeypatch.setattr(cli, "configure_logging", lambda level: None)
    monkeypatch.setattr(
        cli.Settings, "from_env",
        classmethod(lambda cls, dotenv_path=None: Settings(host="0.0.0.0", port=9000, log_level="WARNING")),
    )

    assert cli.main(["serve"]) == 0
    app, kwargs = calls[0]
    assert kwargs == {"host": "0.0.0.0", "port": 9000, "log_level": "warning"}
    assert app.state.aggregator.timeout == 15.0
    assert [r.path for r in app.routes if r.path == "/api/articles"]

    assert cli.main(["serve", "--host", "127.0.0.2", "--port", "8081"]) == 0
    assert calls[1][1]["host"] == "127.0.0.2"
    assert calls[1][1]["port"] == 8081
