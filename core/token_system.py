"""core/token_system.py"""
from enum import Enum
from typing import NamedTuple

from core.errors import CalcSyntaxError


class TokenType(Enum):
    NUMBER = "number"  # 数字
    OPERATOR = "operator"  # 二元操作符（以及未识别的符号）
    UNARY_MINUS = "unary_minus"  # 一元负号
    FUNCTION = "function"  # 函数
    LBRACKET = "lbracket"
    RBRACKET = "rbracket"
    END = "end"  # 输入结束，不会写入输出


class Token(NamedTuple):
    type: TokenType
    text: str

    def __str__(self):
        return self.text


class OperatorDefinition(NamedTuple):
    name: str  # Operators 中对应的方法名
    arity: int
    priority: int


UNARY_MINUS_SYMBOL = 'u'

DIGITS = '0123456789'
DECIMAL_POINT = '.'
WHITESPACE = ' \t'

# 操作符定义字典
OPERATOR_DEFINITIONS = {
    # 二元操作符
    '+': OperatorDefinition('add', 2, 1),
    '-': OperatorDefinition('sub', 2, 1),
    '*': OperatorDefinition('mul', 2, 2),
    '/': OperatorDefinition('div', 2, 2),

    # 函数
    'sin': OperatorDefinition('sin', 1, 3),
    'cos': OperatorDefinition('cos', 1, 3),
    'tan': OperatorDefinition('tan', 1, 3),
    'ctg': OperatorDefinition('ctg', 1, 3),
    'ln': OperatorDefinition('ln', 1, 3),
    'sqrt': OperatorDefinition('sqrt', 1, 3),

    # 一元负号
    UNARY_MINUS_SYMBOL: OperatorDefinition('neg', 1, 4),
}

BINARY_OPERATORS = frozenset(s for s, d in OPERATOR_DEFINITIONS.items() if d.arity == 2)
FUNCTION_NAMES = frozenset(s for s, d in OPERATOR_DEFINITIONS.items()
                           if d.arity == 1 and s != UNARY_MINUS_SYMBOL)

# 前缀操作符入栈时不弹出任何元素
PREFIX_TYPES = (TokenType.FUNCTION, TokenType.UNARY_MINUS)
OPERATOR_TYPES = (TokenType.OPERATOR, TokenType.FUNCTION, TokenType.UNARY_MINUS)

LEFT_BRACKET = Token(TokenType.LBRACKET, '(')
RIGHT_BRACKET = Token(TokenType.RBRACKET, ')')
UNARY_MINUS = Token(TokenType.UNARY_MINUS, UNARY_MINUS_SYMBOL)
END = Token(TokenType.END, '')


def get_priority(token):
    """操作符/函数的优先级；括号和未识别的符号为0"""
    if token.type not in OPERATOR_TYPES:
        return 0
    definition = OPERATOR_DEFINITIONS.get(token.text)
    return definition.priority if definition else 0


def get_definition(token):
    """返回token对应的操作符定义，未识别时返回None"""
    if token.type == TokenType.UNARY_MINUS:
        return OPERATOR_DEFINITIONS[UNARY_MINUS_SYMBOL]
    if token.type == TokenType.OPERATOR and token.text in BINARY_OPERATORS:
        return OPERATOR_DEFINITIONS[token.text]
    if token.type == TokenType.FUNCTION and token.text in FUNCTION_NAMES:
        return OPERATOR_DEFINITIONS[token.text]
    return None


def classify_word(word):
    """字母序列：已知函数名为FUNCTION，否则作为OPERATOR交给校验器拒绝"""
    if word in FUNCTION_NAMES:
        return Token(TokenType.FUNCTION, word)
    return Token(TokenType.OPERATOR, word)


def parse_normalized(text):
    """
    把规范化后的空格分隔字符串还原为Token序列。
    在这种文本形式中 'u' 总是表示一元负号。
    """
    tokens = []
    for piece in text.split():
        if piece[0] in DIGITS:
            tokens.append(Token(TokenType.NUMBER, piece))
        elif piece == '(':
            tokens.append(LEFT_BRACKET)
        elif piece == ')':
            tokens.append(RIGHT_BRACKET)
        elif piece == UNARY_MINUS_SYMBOL:
            tokens.append(UNARY_MINUS)
        elif piece[0].isalpha():
            tokens.append(classify_word(piece))
        else:
            tokens.append(Token(TokenType.OPERATOR, piece))
    return tokens


def as_tokens(tokens):
    """
    各阶段既接受Token序列，也接受规范化字符串。
    注意：字符串形式中 'u' 一律解析为一元负号；而从原始输入词法分析得到的
    'u' 是未知的OPERATOR，会被校验器拒绝。
    """
    if isinstance(tokens, str):
        return parse_normalized(tokens)
    for token in tokens:
        if not isinstance(token, Token):
            raise CalcSyntaxError(f"found foreign object: {token!r}")
    return list(tokens)
