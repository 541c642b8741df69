"""Computor package: parser, reducer, solver and CLI for degree 2 polynomial equations."""

__all__ = [
    "config",
    "parser",
    "reducer",
    "numeric",
    "solver",
    "cli",
    "types",
    "api",
    "logging_config",
]

# Public API exports

__api_exports__ = [
    "solve_equation",
]
