"""Transport collaborators for the review listing RPC"""

from .batchexecute import BatchExecuteTransport, parse_envelope

__all__ = ["BatchExecuteTransport", "parse_envelope"]
