"""Exceptions for the workspace module."""


class WorkspaceError(Exception):
    """Base class for editing errors on a workspace."""

    pass


class NodeNotFoundError(WorkspaceError):
    """Raised when a node ID is not on the canvas.

    Attributes:
        node_id: The ID that could not be found.
    """

    def __init__(self, node_id: str) -> None:
        self.node_id = node_id
        super().__init__(f"Node '{node_id}' not found")


class EdgeNotFoundError(WorkspaceError):
    """Raised when an edge ID is not on the canvas.

    Attributes:
        edge_id: The ID that could not be found.
    """

    def __init__(self, edge_id: str) -> None:
        self.edge_id = edge_id
        super().__init__(f"Edge '{edge_id}' not found")


class DuplicateNodeError(WorkspaceError):
    """Raised when adding a node whose ID is already taken.

    Attributes:
        node_id: The conflicting ID.
    """

    def __init__(self, node_id: str) -> None:
        self.node_id = node_id
        super().__init__(f"Node '{node_id}' already exists")
