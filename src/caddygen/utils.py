"""CLI utility functions."""

from .errors import VariableFormatError


def parse_variables(var_flags: tuple[str, ...] | list[str]) -> dict[str, str]:
    """Parse template variables from --var flags.

    Each flag is split on its first "=", so values may contain "=" and may
    be empty. Later flags override earlier ones with the same key.

    Args:
        var_flags: KEY=VALUE strings in command-line order

    Returns:
        Dictionary of variables, ordered by first appearance of each key

    Raises:
        VariableFormatError: If a flag has no "=" or an empty key
    """
    variables: dict[str, str] = {}

    for var_str in var_flags:
        if "=" not in var_str:
            raise VariableFormatError(f"Invalid variable format: '{var_str}'. Expected key=value")

        key, value = var_str.split("=", 1)
        if not key:
            raise VariableFormatError(f"Invalid variable format: '{var_str}'. Key must not be empty")

        variables[key] = value

    return variables
