# src/focusnav/core/exceptions.py

class NavigationException(Exception):
    """Base exception for all focus-navigation errors."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

class EmptyCandidateSetError(NavigationException, ValueError):
    """Raised when a nearest-value lookup is given no candidates to choose from."""
    pass

class InvalidTreeError(NavigationException):
    """Raised when a focus tree breaks a structural invariant."""
    pass

class DuplicateNodeIdError(InvalidTreeError):
    """Raised when the same node id appears more than once in a focus tree."""
    def __init__(self, node_id: str):
        self.node_id = node_id
        super().__init__(f"Duplicate node id '{node_id}' in focus tree.")

class NodeNotFoundError(NavigationException, KeyError):
    """Raised when a node id is not present in an indexed focus tree."""
    def __init__(self, node_id: str):
        self.node_id = node_id
        super().__init__(f"Node '{node_id}' not found in focus tree.")

    def __str__(self) -> str:
        return self.message

class InvalidPathSegmentError(NavigationException, ValueError):
    """Raised when a node id cannot be encoded as a path segment."""
    pass
