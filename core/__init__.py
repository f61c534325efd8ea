"""核心模块 - Token系统、词法分析、校验、后缀转换和RPN求值"""
from .errors import Status, CalcError, CalcSyntaxError, CalcMathError
from .token_system import (
    TokenType, Token, OPERATOR_DEFINITIONS, get_priority, parse_normalized
)
from .stack import OperatorStack
from .lexer import TokenStream, tokenize, normalize
from .validator import ExpressionValidator, validate
from .converter import PostfixConverter, to_postfix, to_postfix_string
from .rpn_evaluator import RPNEvaluator, evaluate_rpn
from .operators import Operators
from .pipeline import EvaluationResult, ExpressionCalculator, evaluate_expression, run_pipeline

__all__ = [
    'Status', 'CalcError', 'CalcSyntaxError', 'CalcMathError',
    'TokenType', 'Token', 'OPERATOR_DEFINITIONS', 'get_priority', 'parse_normalized',
    'OperatorStack', 'TokenStream', 'tokenize', 'normalize',
    'ExpressionValidator', 'validate',
    'PostfixConverter', 'to_postfix', 'to_postfix_string',
    'RPNEvaluator', 'evaluate_rpn', 'Operators',
    'EvaluationResult', 'ExpressionCalculator', 'evaluate_expression', 'run_pipeline'
]
