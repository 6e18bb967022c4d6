import random
import threading

import pytest

import main
from engine import RunController


def _no_sleep(seconds):
    pass


@pytest.fixture
def controller(monkeypatch):
    c = RunController(sleep=_no_sleep, rng=random.Random(3))
    monkeypatch.setattr(main, "controller", c)
    return c


@pytest.fixture
def client(controller):
    main.app.config["TESTING"] = True
    with main.app.test_client() as client:
        yield client


def test_index_renders_controls(client):
    res = client.get("/")
    assert res.status_code == 200
    body = res.get_data(as_text=True)
    for label in ("Bubble Sort", "Insertion Sort", "Heap Sort", "Merge Sort", "Quick Sort", "Radix Sort"):
        assert label in body
    assert 'id="size-speed"' in body
    assert "<svg" in body


def test_state(client, controller):
    data = client.get("/api/state").get_json()
    assert data["running"] is False
    assert data["controls_enabled"] is True
    assert data["values"] == controller.values
    assert data["svg"].count('class="bar ') == len(controller.values)


def test_run_sorts_the_array(client, controller):
    original = list(controller.values)
    data = client.post("/api/run", json={"algo_key": "quick"}).get_json()
    assert data["accepted"] is True
    assert controller.wait(10)

    data = client.get("/api/state").get_json()
    assert data["values"] == sorted(original)
    assert data["sorted"] == list(range(len(original)))
    assert data["metrics"]["algo_key"] == "quick"
    assert "Quick Sort" in data["analytics"]


def test_run_unknown_algorithm(client):
    res = client.post("/api/run", json={"algo_key": "bogo"})
    assert res.status_code == 400
    assert "error" in res.get_json()


def test_new_array(client, controller):
    before = list(controller.values)
    data = client.post("/api/array/new").get_json()
    assert data["accepted"] is True
    assert data["values"] == controller.values
    assert len(data["values"]) == len(before)


def test_pacing(client):
    data = client.post("/api/pacing", json={"value": 1}).get_json()
    assert data["accepted"] is True
    assert len(data["values"]) == 10
    assert data["delay_ms"] == 240


def test_pacing_rejects_bad_payload(client):
    assert client.post("/api/pacing", json={"value": "fast"}).status_code == 400
    assert client.post("/api/pacing", json={}).status_code == 400


def test_resize(client, controller):
    data = client.post("/api/resize", json={"width": 300}).get_json()
    assert data["accepted"] is True
    assert data["bar_width"] == controller.surface.bar_width
    assert client.post("/api/resize", json={"width": 0}).status_code == 400


def test_requests_rejected_while_running(client, monkeypatch):
    entered = threading.Event()
    gate = threading.Event()

    def blocking_sleep(seconds):
        entered.set()
        gate.wait(5)

    c = RunController(sleep=blocking_sleep, rng=random.Random(8))
    monkeypatch.setattr(main, "controller", c)
    original = list(c.values)

    assert client.post("/api/run", json={"algo_key": "bubble"}).get_json()["accepted"]
    assert entered.wait(5)

    busy = client.get("/api/state").get_json()
    assert busy["running"] is True
    assert busy["controls_enabled"] is False
    assert 'class="code-line highlight"' in busy["pseudocode"]

    assert client.post("/api/run", json={"algo_key": "merge"}).get_json()["accepted"] is False
    assert client.post("/api/array/new").get_json()["accepted"] is False
    assert client.post("/api/pacing", json={"value": 90}).get_json()["accepted"] is False
    assert client.post("/api/resize", json={"width": 200}).get_json()["accepted"] is False

    gate.set()
    assert c.wait(10)
    assert c.values == sorted(original)
    assert c.algo_key == "bubble"
