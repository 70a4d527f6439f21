"""Solutions to classic competitive-programming problems, one function per problem."""

__version__ = "0.1.0"
__all__ = [
    "dynamic_programming",
    "introductory",
    "range_queries",
    "sorting_searching",
    "trees",
]