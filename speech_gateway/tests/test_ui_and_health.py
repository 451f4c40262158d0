from fastapi.testclient import TestClient

from speech_gateway.main import app

client = TestClient(app)


def test_index_serves_listen_form():
    res = client.get("/")

    assert res.status_code == 200
    assert res.headers["content-type"].startswith("text/html")
    html = res.text
    assert 'id="text-input"' in html
    assert 'id="listen-button"' in html
    # Listen starts disabled because the text field starts empty
    assert 'id="listen-button" class="control-button" disabled' in html
    assert 'data-model="azure"' in html
    assert 'data-model="huggingface"' in html


def test_client_script_posts_to_gateway():
    res = client.get("/static/app.js")

    assert res.status_code == 200
    assert "/text-to-speech" in res.text
    assert "!state.text.trim() || state.loading" in res.text


def test_health_reports_provider_configuration(monkeypatch):
    monkeypatch.setenv("HUGGINGFACE_API_TOKEN", "hf_do_not_leak")

    res = client.get("/api/health")

    assert res.status_code == 200
    data = res.json()
    assert data["status"] == "ok"
    assert data["providers"] == {
        "azure": {"configured": False},
        "huggingface": {"configured": True},
    }
    assert "hf_do_not_leak" not in res.text


def test_unknown_route_uses_error_body():
    res = client.get("/nope")

    assert res.status_code == 404
    assert res.json() == {"error": "Not Found"}


def test_wrong_method_keeps_allow_header():
    res = client.get("/text-to-speech")

    assert res.status_code == 405
    assert res.json() == {"error": "Method Not Allowed"}
    assert res.headers["allow"] == "POST"


def test_initial_markup_shows_listen_and_hides_stop():
    html = client.get("/").text

    assert '<textarea id="text-input"' in html
    assert 'id="stop-button" class="control-button" hidden' in html
    assert '<div id="wave" class="wave-container" hidden>' in html
    assert 'class="model-button active" data-model="azure"' in html
