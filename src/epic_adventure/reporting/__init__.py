from .summary import ResultReporter, format_summary

__all__ = ["ResultReporter", "format_summary"]
