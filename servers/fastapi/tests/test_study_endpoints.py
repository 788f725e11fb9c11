from fastapi.testclient import TestClient

from api.main import app


client = TestClient(app)


def test_healthz():
    response = client.get("/healthz")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_recover_reports_strategy():
    response = client.post(
        "/api/v1/study/recover",
        json={"raw": '[{"q": "one"}, {"q": "tw'},
    )
    assert response.status_code == 200
    assert response.json() == {"records": [{"q": "one"}], "strategy": "truncated"}


def test_recover_garbage_is_empty_not_an_error():
    response = client.post("/api/v1/study/recover", json={"raw": "sorry, I can't"})
    assert response.status_code == 200
    assert response.json() == {"records": [], "strategy": "empty"}


def test_sanitize_endpoint():
    response = client.post("/api/v1/study/sanitize", json={"text": "2 imes 3?"})
    assert response.status_code == 200
    assert response.json() == {"text": "2 \\times 3?"}

    response = client.post("/api/v1/study/sanitize", json={"text": None})
    assert response.json() == {"text": ""}


def test_questions_endpoint_with_label():
    response = client.post(
        "/api/v1/study/questions",
        json={"raw": '[{"q": "x", "o": ["1", "2"], "a": "1"}]', "label": "Varsity Core"},
    )
    assert response.status_code == 200
    body = response.json()
    assert len(body) == 1
    assert body[0]["text"] == "[Varsity Core] x"
    assert body[0]["correct_answer"] == "1"
    assert "id" in body[0]


def test_notes_and_written_endpoints():
    notes = client.post(
        "/api/v1/study/notes",
        json={"raw": '{"notes": [{"title": "T", "content": "C", "importance": "Medium"}]}'},
    )
    assert notes.status_code == 200
    assert notes.json()[0]["importance"] == "Medium"

    written = client.post(
        "/api/v1/study/written-questions",
        json={"raw": '[{"question": "Q", "answer": "A", "marks": "10", "type": "Short Note"}]'},
    )
    assert written.status_code == 200
    assert written.json()[0]["type"] == "Short Note"
    assert written.json()[0]["subject"] == "General"


def test_missing_raw_field_is_validation_error():
    response = client.post("/api/v1/study/questions", json={})
    assert response.status_code == 422


def test_app_startup_configures_logging():
    import logging

    from utils.logging_utils import HealthCheckFilter

    with TestClient(app) as started:
        assert started.get("/healthz").status_code == 200
    access_filters = logging.getLogger("uvicorn.access").filters
    assert any(isinstance(f, HealthCheckFilter) for f in access_filters)


def test_health_check_filter_drops_healthz_lines():
    import logging

    from utils.logging_utils import HealthCheckFilter

    record = logging.LogRecord("uvicorn.access", logging.INFO, __file__, 1, '"GET /healthz HTTP/1.1" 200', None, None)
    assert HealthCheckFilter().filter(record) is False
    record.msg = '"POST /api/v1/study/recover HTTP/1.1" 200'
    assert HealthCheckFilter().filter(record) is True


def test_setup_logging_survives_bad_level_and_adds_filter_once(monkeypatch):
    import logging

    from utils.logging_utils import HealthCheckFilter, setup_logging

    monkeypatch.setenv("LOG_LEVEL", "verbose")
    setup_logging()
    setup_logging()
    access_filters = logging.getLogger("uvicorn.access").filters
    assert sum(isinstance(f, HealthCheckFilter) for f in access_filters) == 1
