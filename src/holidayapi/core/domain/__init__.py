"""Domain models.

Plain data structures (Pydantic v2): what a query and a result are, with no
knowledge of HTTP or the CLI.
"""
