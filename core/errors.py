"""core/errors.py - 计算状态与异常类型"""
from enum import Enum


class Status(Enum):
    SUCCESS = "success"
    SYNTAX_ERROR = "syntax_error"  # 输入格式错误、栈下溢、栈中残留多个值
    MATH_ERROR = "math_error"  # 除零、定义域错误


class CalcError(ValueError):
    """表达式处理失败的基类，status 指明错误种类"""
    status = None


class CalcSyntaxError(CalcError):
    status = Status.SYNTAX_ERROR


class CalcMathError(CalcError):
    status = Status.MATH_ERROR
