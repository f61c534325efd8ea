"""core/pipeline.py - 词法分析 -> 校验 -> 转后缀 -> 求值"""
import logging
from typing import NamedTuple, Optional

from config.config import CLI_CONFIG
from core.converter import PostfixConverter
from core.errors import CalcError, Status
from core.lexer import tokenize
from core.rpn_evaluator import RPNEvaluator
from core.validator import ExpressionValidator
from utils.formatting import format_number, format_tokens, is_finite_number

logger = logging.getLogger(__name__)


class EvaluationResult(NamedTuple):
    status: Status
    value: Optional[float] = None
    message: str = ''
    postfix: str = ''

    @property
    def ok(self):
        return self.status == Status.SUCCESS


def run_pipeline(line: str):
    """
    运行完整流水线，任何阶段失败都抛出 CalcError，后续阶段不再执行
    Returns:
        (后缀Token列表, float 结果)
    """
    tokens = tokenize(line)
    ExpressionValidator.validate(tokens)
    postfix = PostfixConverter.convert(tokens)
    return postfix, RPNEvaluator.evaluate(postfix)


def evaluate_expression(line: str) -> float:
    return run_pipeline(line)[1]


class ExpressionCalculator:
    """供命令行使用的计算器，把异常转换为 Status"""

    def __init__(self, precision: int = None):
        self.precision = CLI_CONFIG['precision'] if precision is None else precision

    def calculate(self, line: str) -> EvaluationResult:
        """
        Args:
            line: 用户输入的一行表达式
        Returns:
            EvaluationResult，失败时 value 为 None、message 为错误原因
        """
        try:
            postfix_tokens, value = run_pipeline(line)
        except CalcError as e:
            logger.info(f"Rejected expression {line!r}: {e} ({e.status.value})")
            return EvaluationResult(e.status, message=str(e))

        if not is_finite_number(value):
            logger.warning(f"Expression {line!r} produced a non-finite result: {value}")
        return EvaluationResult(Status.SUCCESS, value=value, postfix=format_tokens(postfix_tokens))

    def format_result(self, value):
        return format_number(value, self.precision)
