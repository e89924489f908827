"""Building blocks for command-line applications: ordering, suggestions,
value sources, short-option parsing, help text layout and completion."""

__version__ = "0.1.0"
__all__ = ["helptext", "parsing", "sorting", "suggestions", "value_source"]