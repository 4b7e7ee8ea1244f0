"""配置文件"""

# 求值器参数
EVALUATOR_CONFIG = {
    # 显示用字符 -> 标准运算符
    "glyph_replacements": {
        "×": "*",
        "÷": "/",
        "−": "-",
    },
    "missing_operand_value": 0.0,  # 缺少操作数时的替代值
    "empty_result": 0.0,  # 空表达式的结果
    "percent_divisor": 100.0,  # a % b = a * (b / 100)
}

# 显示格式参数（对应 "#.########"）
DISPLAY_CONFIG = {
    "max_fraction_digits": 8,
    "error_text": "Error",
    "nan_text": "NaN",
    "infinity_text": "∞",
    "history_separator": " = ",
}

# 会话参数
SESSION_CONFIG = {
    "history_limit": None,  # None 表示不限制历史条数
}

# 命令行参数
CLI_CONFIG = {
    "prompt": "> ",
    "comment_prefix": "#",
    "history_path": "calc_history.csv",
    "log_level": "WARNING",
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert EVALUATOR_CONFIG["percent_divisor"] == 100.0, "百分号按 a * (b / 100) 计算"
    assert EVALUATOR_CONFIG["missing_operand_value"] == 0.0, "缺少的操作数按 0.0 处理"
    assert DISPLAY_CONFIG["max_fraction_digits"] > 0, "小数位数必须为正"
    limit = SESSION_CONFIG["history_limit"]
    assert limit is None or limit > 0, "history_limit 必须为正数或 None"
    for glyph, symbol in EVALUATOR_CONFIG["glyph_replacements"].items():
        assert len(glyph) == 1 and symbol in "+-*/", f"非法替换: {glyph} -> {symbol}"
    print("Configuration validated successfully!")
