DEFAULTS = {
    # Maximum number of nodes a graph may hold (0 disables the limit)
    "GRAPH_MAX_NODES": 256,
    # Restrict node ids to single characters below code point 256
    "GRAPH_BYTE_IDENTIFIERS": True,
    # Upper-case node ids at the call boundary, as the visualizer UI does
    "GRAPH_UPPERCASE_IDENTIFIERS": False,
    # Weight used when an edge is added without one
    "GRAPH_DEFAULT_WEIGHT": 1,
    # Distance reported for nodes Dijkstra cannot reach
    "GRAPH_UNREACHABLE_DISTANCE": 2147483647,
    # Log level used by the command runner
    "LOG_LEVEL": "INFO",
}
