"""Pipeline nodes, one per stage."""
