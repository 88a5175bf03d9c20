import json

import pytest

from dsgraph.boundary.engine import GraphEngine
from dsgraph.config.settings import GraphConfig
from dsgraph.graph.graph_schema import UNREACHABLE_DISTANCE
from dsgraph.runner import load_script, main, replay


def test_replay_with_graph_section(tmp_path):
    script_path = tmp_path / "session.json"
    script_path.write_text(
        json.dumps(
            {
                "graph": {
                    "nodes": ["A", "B", "C"],
                    "edges": [
                        ["A", "B", 3],
                        {"source": "B", "target": "C"},
                        ["A", "C"],
                    ],
                },
                "commands": [
                    {"op": "dijkstra", "start": "A"},
                    {"op": "prim", "start": "A"},
                ],
            }
        ),
        encoding="utf-8",
    )

    responses = replay(GraphEngine(), load_script(script_path))

    assert responses[0]["result"] == {"A": 0, "B": 3, "C": 1}
    assert responses[1]["result"] == [["A", "C"], ["A", "B"]]


def test_main_reports_rejected_commands(tmp_path):
    good = tmp_path / "good.json"
    good.write_text(json.dumps([{"op": "add_node", "node": "A"}]), encoding="utf-8")
    bad = tmp_path / "bad.json"
    bad.write_text(json.dumps([{"op": "teleport"}]), encoding="utf-8")

    assert main([str(good)]) == 0
    assert main([str(bad)]) == 1


def _write(tmp_path, name, payload):
    path = tmp_path / name
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_graph_section_goes_through_identifier_checks(tmp_path):
    script = load_script(
        _write(
            tmp_path,
            "mixed.json",
            {
                "graph": {
                    "nodes": ["A", 66, "AB", "hello", 300],
                    "edges": [["A", 66, 2], ["A", "hello"], {"source": 66, "target": "A"}],
                },
                "commands": [
                    {"op": "dijkstra", "start": "A"},
                    {"op": "export"},
                ],
            },
        )
    )
    engine = GraphEngine()

    responses = replay(engine, script)

    assert engine.store.nodes() == ["A", "B"]
    assert responses[0] == {
        "op": "dijkstra",
        "ok": True,
        "result": {"A": 0, "B": 2},
        "error": None,
    }
    assert responses[1]["result"]["edges"] == [
        {"source": "A", "target": "B", "weight": 2, "count": 1},
        {"source": "B", "target": "A", "weight": 1, "count": 1},
    ]


def test_graph_section_respects_uppercase_identifiers(tmp_path):
    script = load_script(
        _write(
            tmp_path,
            "lower.json",
            {
                "graph": {"nodes": ["a", "b"], "edges": [["a", "b"]]},
                "commands": [{"op": "bfs", "start": "a"}],
            },
        )
    )
    engine = GraphEngine(GraphConfig(uppercase_identifiers=True))

    responses = replay(engine, script)

    assert engine.store.nodes() == ["A", "B"]
    assert responses[0]["result"] == ["A", "B"]


def test_graph_section_skips_bad_weights(tmp_path):
    script = load_script(
        _write(
            tmp_path,
            "weights.json",
            {
                "graph": {"nodes": ["A", "B"], "edges": [["A", "B", "5"], ["B", "A", 1.5]]},
                "commands": [{"op": "dijkstra", "start": "A"}],
            },
        )
    )

    responses = replay(GraphEngine(), script)

    assert responses[0]["result"] == {"A": 0, "B": UNREACHABLE_DISTANCE}


def test_load_script_rejects_scalar_payload(tmp_path):
    with pytest.raises(ValueError, match="list of commands or an object"):
        load_script(_write(tmp_path, "scalar.json", 3))

    with pytest.raises(ValueError):
        load_script(_write(tmp_path, "shape.json", {"graph": ["A"], "commands": {"op": "bfs"}}))


def test_main_exits_non_zero_on_invalid_script(tmp_path):
    scalar = _write(tmp_path, "scalar.json", 3)
    bad_edge = _write(tmp_path, "edge.json", {"graph": {"nodes": ["A"], "edges": [["A"]]}})
    not_json = tmp_path / "broken.json"
    not_json.write_text("{not json", encoding="utf-8")

    assert main([str(scalar)]) == 2
    assert main([str(bad_edge)]) == 2
    assert main([str(not_json)]) == 2
