import json
import pytest
from keypad.engine import Engine
from keypad.errors import DictionaryLoadError
from keypad.words import MemoryWordProvider
from keypad_web.web import app as flask_app


class DownProvider:
    def load(self):
        raise DictionaryLoadError("Failed to fetch words: 503", source="http://words", status=503)
    def close(self):
        pass


@pytest.fixture
def client(monkeypatch):
    import keypad_web.web as webmod
    eng = Engine(MemoryWordProvider(["wt", "wu", "xu", "yt", "ad", "be", "ed"]))
    monkeypatch.setattr(webmod, "_engine", eng)
    yield flask_app.test_client()
    eng.shutdown()


@pytest.mark.e2e
def test_expand_api(client):
    rv = client.get("/api/expand?q=213")
    assert rv.status_code == 200
    assert rv.get_json() == {"2": ["A", "B", "C"], "1": ["1"], "3": ["D", "E", "F"]}


@pytest.mark.e2e
def test_empty_query_returns_empty_list(client):
    for path in ("/api/expand", "/api/valid", "/api/resolve?q="):
        rv = client.get(path)
        assert rv.status_code == 200
    assert client.get("/api/valid").get_json() == []
    assert client.get("/api/resolve").get_json() == {"validPermutations": [], "finalResults": []}


@pytest.mark.e2e
def test_valid_api(client):
    rv = client.get("/api/valid?q=981")
    assert rv.get_json() == {"98": ["WT", "WU", "XU", "YT"], "1": ["1"]}


@pytest.mark.e2e
def test_resolve_api(client):
    data = client.get("/api/resolve?q=2333").get_json()
    assert data["validPermutations"] == {"23": ["AD", "BE"], "33": ["ED"]}
    assert data["finalResults"] == ["AD ED", "BE ED"]


@pytest.mark.e2e
def test_dictionary_failure_is_503(monkeypatch):
    import keypad_web.web as webmod
    monkeypatch.setattr(webmod, "_engine", Engine(DownProvider()))
    rv = flask_app.test_client().get("/api/resolve?q=98")
    assert rv.status_code == 503
    body = rv.get_json()
    assert body["status"] == 503 and body["source"] == "http://words"


@pytest.mark.e2e
def test_strict_input_rejection_is_400(monkeypatch):
    import keypad_web.web as webmod
    monkeypatch.setattr(webmod, "_engine", Engine(MemoryWordProvider(["a"]), strict=True))
    rv = flask_app.test_client().get("/api/valid?q=2x")
    assert rv.status_code == 400
    assert "error" in rv.get_json()


@pytest.mark.e2e
def test_health(client):
    rv = client.get("/health")
    assert rv.status_code == 200
    assert rv.get_json()["ok"] is True


@pytest.mark.e2e
def test_run_keys_keep_input_order(client):
    rv = client.get("/api/expand?q=213")
    assert "".join(json.loads(rv.get_data(as_text=True))) == "213"

    rv = client.get("/api/resolve?q=98120")
    tree = json.loads(rv.get_data(as_text=True))["validPermutations"]
    assert list(tree) == ["98", "1", "2", "0"]


def test_web_main_dictionary_failure_exit_code(tmp_path, capsys, monkeypatch):
    import keypad_web.web as webmod
    monkeypatch.setattr(webmod, "_engine", None)
    rc = webmod.main(["--words", str(tmp_path / "missing.txt")])
    assert rc == 2
    assert "dictionary unavailable" in capsys.readouterr().err
