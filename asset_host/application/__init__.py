"""Application layer: ports, deployment policies, and the rewrite engine services."""
