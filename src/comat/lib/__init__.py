"""Core building blocks: style vocabulary, template transformer, errors, logging."""
