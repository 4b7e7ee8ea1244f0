"""工具模块"""
from .formatting import format_result, format_history_entry, parse_history_entry

__all__ = ['format_result', 'format_history_entry', 'parse_history_entry']
