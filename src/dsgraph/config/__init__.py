"""
Configuration layer for dsgraph.

GraphConfig is the policy object handed to every engine instance.
load_graph_config() reads it from DSGRAPH_* environment variables via
dynaconf, with defaults in dsgraph.config.constants.
"""

from dsgraph.config.settings import GraphConfig
from dsgraph.config.loader import load_graph_config

__all__ = [
    "GraphConfig",
    "load_graph_config",
]
