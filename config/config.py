"""配置文件"""

# 词法分析参数
LEXER_CONFIG = {
    "max_token_size": 16,  # 单个token的最大字符数
    "max_buffer_size": 100,  # 规范化表达式缓冲区大小（含结束符）
}

# 命令行交互参数
CLI_CONFIG = {
    "prompt": "Exit(q)\nExpression: ",
    "quit_command": "q",
    "max_line_length": 98,  # 缓冲区100字节，换行符和结束符各占一位
    "precision": 6,  # 结果保留的小数位数
    "result_template": "Result: {value}",
    "postfix_template": "Postfix: {postfix}",
    "syntax_error_message": "n/a",
    "math_error_message": "n/a: math error ({reason})",
}

# 日志配置
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert LEXER_CONFIG["max_token_size"] > 0, "token长度上限必须为正"
    assert LEXER_CONFIG["max_buffer_size"] > LEXER_CONFIG["max_token_size"], "缓冲区必须能容纳至少一个token"
    assert CLI_CONFIG["max_line_length"] == LEXER_CONFIG["max_buffer_size"] - 2, "输入行长度与缓冲区不一致"
    assert CLI_CONFIG["precision"] >= 0, "小数位数不能为负"
    assert CLI_CONFIG["quit_command"], "退出命令不能为空"
    return True
