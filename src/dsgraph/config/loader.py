from __future__ import annotations

from typing import Optional

from dynaconf import Dynaconf

from dsgraph.config.constants import DEFAULTS
from dsgraph.config.settings import GraphConfig

settings = Dynaconf(
    envvar_prefix="DSGRAPH",
    load_dotenv=True,
    settings_files=[],
)


def _setting(source: Dynaconf, key: str):
    return source.get(key, DEFAULTS[key])


def load_graph_config(source: Optional[Dynaconf] = None) -> GraphConfig:
    """
    Build a GraphConfig from DSGRAPH_* environment variables (and a .env
    file when present), falling back to DEFAULTS for anything unset.
    """
    source = settings if source is None else source

    max_nodes = int(_setting(source, "GRAPH_MAX_NODES"))

    return GraphConfig(
        max_nodes=max_nodes or None,
        byte_identifiers=bool(_setting(source, "GRAPH_BYTE_IDENTIFIERS")),
        uppercase_identifiers=bool(_setting(source, "GRAPH_UPPERCASE_IDENTIFIERS")),
        default_weight=int(_setting(source, "GRAPH_DEFAULT_WEIGHT")),
        unreachable_distance=int(_setting(source, "GRAPH_UNREACHABLE_DISTANCE")),
    )


def log_level(source: Optional[Dynaconf] = None) -> str:
    source = settings if source is None else source
    return str(_setting(source, "LOG_LEVEL")).upper()
