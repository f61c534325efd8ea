"""RPN表达式求值器 - 调用统一的Operators类"""
import numpy as np
import logging

from core.errors import CalcSyntaxError
from core.operators import Operators
from core.stack import OperatorStack
from core.token_system import TokenType, as_tokens, get_definition

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(token_sequence):
        """
        评估后缀表达式
        Args:
            token_sequence: 后缀顺序的Token序列或空格分隔字符串
        Returns:
            float 结果
        Raises:
            CalcSyntaxError: 栈下溢、未知符号、结束时栈中不是恰好一个值
            CalcMathError: 定义域错误
        """
        with OperatorStack() as stack:
            for token in as_tokens(token_sequence):
                # ================== 操作数 ==================
                if token.type == TokenType.NUMBER:
                    try:
                        stack.push(np.float64(token.text))
                    except ValueError:
                        raise CalcSyntaxError(f"malformed number: {token.text}") from None
                    continue

                definition = get_definition(token)
                op_method = getattr(Operators, definition.name, None) if definition else None
                if op_method is None:
                    logger.debug(f"Unknown token in postfix expression: {token.text!r}")
                    raise CalcSyntaxError(f"unknown symbol: {token.text}")

                # ================== 一元操作符/函数 ==================
                if definition.arity == 1:
                    if len(stack) < 1:
                        raise CalcSyntaxError(f"not enough values for {token.text}")
                    operand = stack.pop()
                    stack.push(op_method(operand))

                # ================== 二元操作符 ==================
                else:
                    if len(stack) < 2:
                        raise CalcSyntaxError(f"not enough values for {token.text}")
                    # 先弹出的是右操作数
                    operand2 = stack.pop()
                    operand1 = stack.pop()
                    stack.push(op_method(operand1, operand2))

            # 结束时栈中应恰好剩一个值
            if len(stack) != 1:
                logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
                raise CalcSyntaxError("I don't understand what you're trying to say")
            return float(stack.pop())


def evaluate_rpn(token_sequence):
    return RPNEvaluator.evaluate(token_sequence)
