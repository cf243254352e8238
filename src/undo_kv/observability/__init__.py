from .logging import JsonlLogSink, LogMessage, LogSink, StdoutLogSink, log_to_dict

__all__ = [
    "JsonlLogSink",
    "LogMessage",
    "LogSink",
    "StdoutLogSink",
    "log_to_dict",
]
