from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import BaseModel, Field, TypeAdapter

NodeRef = Union[int, str]


class CreateCommand(BaseModel):
    op: Literal["create"]


class ClearCommand(BaseModel):
    op: Literal["clear"]


class ExportCommand(BaseModel):
    op: Literal["export"]


class NodeCommand(BaseModel):
    op: Literal["add_node", "remove_node"]
    node: NodeRef


class AddEdgeCommand(BaseModel):
    op: Literal["add_edge"]
    source: NodeRef
    target: NodeRef
    weight: Optional[int] = None


class RemoveEdgeCommand(BaseModel):
    op: Literal["remove_edge"]
    source: NodeRef
    target: NodeRef


class QueryCommand(BaseModel):
    op: Literal["bfs", "dfs", "dijkstra", "prim"]
    start: NodeRef


class TraceCommand(BaseModel):
    op: Literal["trace"]
    algorithm: Literal["bfs", "dfs", "dijkstra", "prim"]
    start: NodeRef


GraphCommand = Annotated[
    Union[
        CreateCommand,
        ClearCommand,
        ExportCommand,
        NodeCommand,
        AddEdgeCommand,
        RemoveEdgeCommand,
        QueryCommand,
        TraceCommand,
    ],
    Field(discriminator="op"),
]

command_adapter = TypeAdapter(GraphCommand)


class CommandResponse(BaseModel):
    op: str
    ok: bool
    result: Any = None
    error: Optional[str] = None


class GraphEdge(BaseModel):
    source: str
    target: str
    weight: int
    count: int


class GraphExportResponse(BaseModel):
    nodes: List[str]
    edges: List[GraphEdge]


class GraphStatsResponse(BaseModel):
    nodes: int
    edges: int
