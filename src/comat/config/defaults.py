"""Default option values for comat."""

# Transformer defaults
DEFAULT_TRANSFORM_OPTIONS: dict[str, str | bool | int] = {
    "unterminated": "error",
    "correct_underline": False,
    "cache": True,
}

# Maximum number of distinct (template, options) pairs kept compiled
TEMPLATE_CACHE_SIZE = 1024
