"""core/operators.py"""
import numpy as np
import logging

from core.errors import CalcMathError

logger = logging.getLogger(__name__)


def _to_float(operand):
    return np.float64(operand)


class Operators:
    """所有操作符的静态方法集合"""

    # 二元操作符========================================
    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        with np.errstate(over='ignore'):
            return _to_float(operand1) + _to_float(operand2)

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        with np.errstate(over='ignore'):
            return _to_float(operand1) - _to_float(operand2)

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return _to_float(operand1) * _to_float(operand2)

    @staticmethod
    def div(operand1, operand2):
        """除法操作符，除数恰好为0时报错"""
        divisor = _to_float(operand2)
        if divisor == 0.0:
            raise CalcMathError("division by zero")
        with np.errstate(over='ignore', invalid='ignore'):
            return _to_float(operand1) / divisor

    # 一元操作符====================
    @staticmethod
    def neg(operand):
        """一元负号"""
        return -_to_float(operand)

    @staticmethod
    def sin(operand):
        with np.errstate(invalid='ignore'):
            return np.sin(_to_float(operand))

    @staticmethod
    def cos(operand):
        with np.errstate(invalid='ignore'):
            return np.cos(_to_float(operand))

    @staticmethod
    def tan(operand):
        with np.errstate(invalid='ignore'):
            return np.tan(_to_float(operand))

    @staticmethod
    def ctg(operand):
        """余切 1/tan(x)；tan(x) 恰好为0时无定义"""
        tangent = Operators.tan(operand)
        if tangent == 0.0:
            raise CalcMathError(f"cotangent undefined at {float(operand):g}")
        with np.errstate(over='ignore'):
            return np.float64(1.0) / tangent

    @staticmethod
    def ln(operand):
        """自然对数，要求 x > 0"""
        value = _to_float(operand)
        if value <= 0.0:
            raise CalcMathError(f"logarithm of non-positive value {float(value):g}")
        return np.log(value)

    @staticmethod
    def sqrt(operand):
        """平方根，要求 x >= 0"""
        value = _to_float(operand)
        if value < 0.0:
            raise CalcMathError(f"square root of negative value {float(value):g}")
        return np.sqrt(value)
