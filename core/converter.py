"""core/converter.py - 中缀转后缀（调度场算法）"""
import logging

from core.errors import CalcSyntaxError
from core.stack import OperatorStack
from core.token_system import TokenType, PREFIX_TYPES, OPERATOR_TYPES, as_tokens, get_priority
from utils.formatting import format_tokens

logger = logging.getLogger(__name__)


class PostfixConverter:
    """
    See <http://en.wikipedia.org/wiki/Shunting_yard_algorithm>

    二元操作符按"栈顶优先级 >= 当前优先级即弹出"处理（左结合）；
    函数和一元负号是前缀操作符，直接入栈。
    """

    @staticmethod
    def check_adjacency(last_type, token):
        """相邻Token的种类约束"""
        if token.type == TokenType.NUMBER and last_type == TokenType.NUMBER:
            raise CalcSyntaxError(f"two numbers in a row: {token.text}")
        if token.type == TokenType.OPERATOR and last_type in OPERATOR_TYPES:
            raise CalcSyntaxError(f"operator '{token.text}' is in the wrong place")
        if token.type == TokenType.FUNCTION and last_type == TokenType.FUNCTION:
            raise CalcSyntaxError(f"function '{token.text}' is missing its argument")

    @staticmethod
    def convert(tokens):
        """
        Args:
            tokens: 校验过的中缀Token序列或规范化字符串
        Returns:
            后缀顺序的Token列表
        """
        tokens = as_tokens(tokens)
        output = []
        last_type = TokenType.END

        with OperatorStack() as stack:
            for token in tokens:
                PostfixConverter.check_adjacency(last_type, token)

                if token.type == TokenType.NUMBER:
                    output.append(token)

                elif token.type == TokenType.LBRACKET:
                    stack.push(token)

                elif token.type == TokenType.RBRACKET:
                    # 弹出直到遇到左括号
                    while not stack.is_empty() and stack.peek().type != TokenType.LBRACKET:
                        output.append(stack.pop())
                    if stack.is_empty():
                        raise CalcSyntaxError("too many right brackets")
                    stack.pop()

                # 前缀操作符有意不按优先级弹栈：它没有左操作数，栈中没有能被它结束的子式
                elif token.type in PREFIX_TYPES:
                    stack.push(token)

                elif token.type == TokenType.OPERATOR:
                    priority = get_priority(token)
                    while not stack.is_empty() and get_priority(stack.peek()) >= priority:
                        output.append(stack.pop())
                    stack.push(token)

                else:
                    raise CalcSyntaxError(f"unexpected token: {token.text!r}")

                last_type = token.type

            # 清空剩余操作符
            while not stack.is_empty():
                token = stack.pop()
                if token.type == TokenType.LBRACKET:
                    raise CalcSyntaxError("too many left brackets")
                output.append(token)

        logger.debug(f"Postfix: {format_tokens(output)}")
        return output


def to_postfix(tokens):
    return PostfixConverter.convert(tokens)


def to_postfix_string(tokens):
    return format_tokens(PostfixConverter.convert(tokens))
