"""Computer club day simulation: parse an event log and report table revenue."""

__version__ = "0.1.0"
__all__ = ["models", "parser", "club"]