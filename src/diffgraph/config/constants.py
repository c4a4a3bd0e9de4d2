DEFAULTS = {
    # Bridge predecessors to successors when a vertex is removed
    "RECONNECT_ON_REMOVE": True,
    # Reject remove_edge / insert_between_vertex when the edge is absent
    "STRICT_EDGE_REMOVAL": False,
    # Emit a log diagnostic for every rejected mutation
    "LOG_REJECTIONS": True,
    # Level used for rejection diagnostics
    "REJECTION_LOG_LEVEL": "WARNING",
}
