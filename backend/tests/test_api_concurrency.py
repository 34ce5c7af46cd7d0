"""Concurrency-focused tests exercising per-run isolation."""

from concurrent.futures import ThreadPoolExecutor, as_completed

from fastapi.testclient import TestClient

from backend.app.main import app
from backend.indiclang.interpreter import Interpreter

client = TestClient(app)


def _post_run(payload):
    r = client.post("/run", json=payload)
    return payload, r.status_code, r.json()


def test_concurrent_runs_isolated():
    jobs = [
        {"code": "x = 1\nprint(x)"},
        {"code": "x = 2\nwhile x < 5:\n    print(x)\n    x = x + 1"},
        {"code": "print(x)", "settings": {"max_loop": 3}},
        {"code": "a, b = 'p', 'q'\nprint(b)\nprint(a)"},
    ]
    expected = {
        "x = 1\nprint(x)": "1",
        "x = 2\nwhile x < 5:\n    print(x)\n    x = x + 1": "2\n3\n4",
        "print(x)": "0",
        "a, b = 'p', 'q'\nprint(b)\nprint(a)": "q\np",
    }

    results = []
    with ThreadPoolExecutor(max_workers=4) as ex:
        futures = [ex.submit(_post_run, j) for j in jobs * 3]
        for fut in as_completed(futures):
            results.append(fut.result())

    assert len(results) == len(jobs) * 3
    for payload, status, body in results:
        assert status == 200
        assert body["error"] is None
        assert body["output"] == expected[payload["code"]]


def test_shared_interpreter_instance_across_threads():
    it = Interpreter()
    programs = [f"v = {n}\nprint(v * 2)" for n in range(20)]
    with ThreadPoolExecutor(max_workers=8) as ex:
        outputs = list(ex.map(lambda code: it.execute(code)["output"], programs))
    assert outputs == [str(n * 2) for n in range(20)]
