import argparse
import json
import logging
import time
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from dsgraph.boundary.engine import GraphEngine
from dsgraph.config.loader import load_graph_config, log_level
from dsgraph.graph.graph_builder import GraphBuilder


def load_script(path: Path) -> Dict[str, Any]:
    """
    Read a replay script.

    Either a bare list of commands, or an object with an optional "graph"
    section ({"nodes": [...], "edges": [...]}) and a "commands" list.
    """
    payload = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(payload, list):
        return {"graph": {}, "commands": payload}
    if not isinstance(payload, dict):
        raise ValueError(
            f"script must be a list of commands or an object, got {type(payload).__name__}"
        )

    graph = payload.get("graph") or {}
    commands = payload.get("commands") or []
    if not isinstance(graph, dict) or not isinstance(commands, list):
        raise ValueError("script \"graph\" must be an object and \"commands\" a list")
    return {"graph": graph, "commands": commands}


def replay(engine: GraphEngine, script: Dict[str, Any]) -> List[Dict[str, Any]]:
    graph = script.get("graph") or {}
    # Loaded through the engine so ids are validated like any command.
    builder = GraphBuilder(engine)
    builder.add_nodes(graph.get("nodes", []))
    builder.add_edges(graph.get("edges", []))

    return [engine.execute(command) for command in script.get("commands", [])]


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="dsgraph-run",
        description="Replay a JSON command script against a fresh graph engine.",
    )
    parser.add_argument("script", type=Path, help="path to the JSON script")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=log_level(),
        format="%(asctime)s %(levelname)s %(message)s",
    )
    logger = logging.getLogger("dsgraph.run")
    start = time.perf_counter()

    engine = GraphEngine(load_graph_config())
    try:
        responses = replay(engine, load_script(args.script))
    except ValueError as exc:
        logger.error("invalid script %s: %s", args.script, exc)
        return 2

    for response in responses:
        logger.info(json.dumps(response))

    failed = sum(1 for r in responses if not r["ok"])
    if failed:
        logger.warning("%s of %s commands were rejected", failed, len(responses))
    logger.info(
        "replayed %s commands in %.3fs", len(responses), time.perf_counter() - start
    )
    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
