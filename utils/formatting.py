"""utils/formatting.py"""
import numpy as np

from config.config import DISPLAY_CONFIG


def format_result(value, max_fraction_digits=None):
    """
    把求值结果格式化为显示文本，最多保留 max_fraction_digits 位小数，
    去掉末尾的 0 和多余的小数点，不使用科学计数法
    """
    if max_fraction_digits is None:
        max_fraction_digits = DISPLAY_CONFIG['max_fraction_digits']

    value = np.float64(value)
    if np.isnan(value):
        return DISPLAY_CONFIG['nan_text']
    if np.isinf(value):
        sign = '-' if value < 0 else ''
        return sign + DISPLAY_CONFIG['infinity_text']

    return np.format_float_positional(
        value, precision=max_fraction_digits, unique=True, fractional=True, trim='-'
    )


def format_history_entry(expression, result_text):
    return f"{expression}{DISPLAY_CONFIG['history_separator']}{result_text}"


def parse_history_entry(entry):
    """format_history_entry 的逆操作，按最后一个分隔符切分"""
    expression, _, result_text = entry.rpartition(DISPLAY_CONFIG['history_separator'])
    return expression, result_text
