"""Human-readable formatting of byte counts."""

BINARY_STEP = 1024

# Units tried in order once a value reaches BINARY_STEP bytes
SCALED_UNITS = ("KiB", "MiB", "GiB", "TiB")

# Used for anything that is still too large after the last scaled unit
OVERFLOW_UNIT = "PiB"


def human_size(num_bytes: int) -> str:
    """Format a byte count using binary (base-1024) units.

    Counts below 1024 are rendered as whole bytes. Larger counts are scaled
    through KiB, MiB, GiB and TiB, stopping at the first unit where the value
    drops below 1024, and rendered with exactly one decimal digit. Anything
    beyond the TiB range is rendered in PiB, whatever its magnitude.

    Args:
        num_bytes: The size in bytes.

    Returns:
        The formatted size, without a space between value and unit.

    Example:
        >>> human_size(1023)
        '1023B'
        >>> human_size(1536)
        '1.5KiB'
        >>> human_size(1024 ** 5)
        '1.0PiB'
    """
    if num_bytes < BINARY_STEP:
        return f"{num_bytes}B"

    value = num_bytes / BINARY_STEP
    for unit in SCALED_UNITS:
        if value < BINARY_STEP:
            return f"{value:.1f}{unit}"
        value /= BINARY_STEP

    return f"{value:.1f}{OVERFLOW_UNIT}"
