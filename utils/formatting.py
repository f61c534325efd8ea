"""utils/formatting.py"""
import numpy as np


def format_number(value, precision=6):
    """定点格式输出，等价于 printf 的 %.<precision>f"""
    return f"{float(value):.{int(precision)}f}"


def format_tokens(tokens):
    """把Token序列写成单个空格分隔的字符串"""
    return ' '.join(str(token) for token in tokens)


def is_finite_number(value):
    """结果是否为有限数值（inf/nan 返回False）"""
    return bool(np.isfinite(value))
