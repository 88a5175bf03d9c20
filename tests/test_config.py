import pytest
from dynaconf import Dynaconf

from dsgraph.config.loader import load_graph_config, log_level
from dsgraph.config.settings import GraphConfig
from dsgraph.graph.graph_schema import UNREACHABLE_DISTANCE


def _settings(monkeypatch, **env) -> Dynaconf:
    for key, value in env.items():
        monkeypatch.setenv(f"DSGRAPHTEST_{key}", value)
    return Dynaconf(envvar_prefix="DSGRAPHTEST", load_dotenv=False, settings_files=[])


def test_defaults_match_visualizer_limits(monkeypatch):
    config = load_graph_config(_settings(monkeypatch))

    assert config == GraphConfig()
    assert config.max_nodes == 256
    assert config.byte_identifiers is True
    assert config.default_weight == 1
    assert config.unreachable_distance == UNREACHABLE_DISTANCE


def test_environment_overrides(monkeypatch):
    source = _settings(
        monkeypatch,
        GRAPH_MAX_NODES="0",
        GRAPH_BYTE_IDENTIFIERS="false",
        GRAPH_UPPERCASE_IDENTIFIERS="true",
        GRAPH_DEFAULT_WEIGHT="4",
        GRAPH_UNREACHABLE_DISTANCE="1000",
        LOG_LEVEL="debug",
    )

    config = load_graph_config(source)

    assert config.max_nodes is None
    assert config.byte_identifiers is False
    assert config.uppercase_identifiers is True
    assert config.default_weight == 4
    assert config.unreachable_distance == 1000
    assert log_level(source) == "DEBUG"


def test_invalid_config_fails_loudly():
    with pytest.raises(ValueError):
        GraphConfig(max_nodes=-1)
    with pytest.raises(ValueError):
        GraphConfig(unreachable_distance=0)
