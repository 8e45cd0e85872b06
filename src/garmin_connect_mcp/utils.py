"""
Shared helpers for the tool modules.
"""


def compact(**arguments) -> dict:
    """Collect tool arguments into a request body, dropping omitted ones.

    Optional parameters without a fixed default are None; leaving them out
    of the body lets the remote API decide.

    Args:
        **arguments: Tool arguments by name

    Returns:
        Dict of the arguments whose value is not None
    """
    return {key: value for key, value in arguments.items() if value is not None}
