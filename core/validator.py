"""core/validator.py - 结构校验：未知符号和括号配对"""
import logging

from core.errors import CalcSyntaxError
from core.token_system import TokenType, BINARY_OPERATORS, as_tokens

logger = logging.getLogger(__name__)


class ExpressionValidator:
    """只检查结构，不检查操作数个数和顺序（由转换和求值阶段负责）"""

    @staticmethod
    def check_symbols(tokens):
        """所有OPERATOR必须是已知的二元操作符"""
        for token in as_tokens(tokens):
            if token.type == TokenType.OPERATOR and token.text not in BINARY_OPERATORS:
                raise CalcSyntaxError(f"invalid operator: {token.text}")

    @staticmethod
    def check_brackets(tokens):
        """括号计数在任何前缀上都不能为负，结尾必须为0"""
        depth = 0
        for token in as_tokens(tokens):
            if token.type == TokenType.LBRACKET:
                depth += 1
            elif token.type == TokenType.RBRACKET:
                depth -= 1
                if depth < 0:
                    raise CalcSyntaxError("too many right brackets")
        if depth != 0:
            raise CalcSyntaxError("too many left brackets")

    @staticmethod
    def validate(tokens):
        tokens = as_tokens(tokens)
        ExpressionValidator.check_symbols(tokens)
        ExpressionValidator.check_brackets(tokens)
        logger.debug("Expression passed structural validation")
        return tokens

    @staticmethod
    def is_valid(tokens):
        try:
            ExpressionValidator.validate(tokens)
        except CalcSyntaxError:
            return False
        return True


def validate(tokens):
    return ExpressionValidator.validate(tokens)
