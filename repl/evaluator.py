"""repl/evaluator.py - 单行表达式求值，错误转换为结果对象"""
import logging
from typing import Optional, List

from core import TokenStream, ShuntingYard, RPNEvaluator, CalcError, Token
from utils.formatting import format_value, format_error, format_rpn

logger = logging.getLogger(__name__)


class LineResult:
    """一行输入的求值结果：value 与 error 至多一个非空，二者皆空表示空表达式"""

    def __init__(self, expression: str, value: Optional[Token] = None,
                 error: Optional[CalcError] = None, rpn: Optional[List[Token]] = None):
        self.expression = expression
        self.value = value
        self.error = error
        self.rpn = rpn or []

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def is_empty(self) -> bool:
        return self.ok and self.value is None

    def format(self) -> str:
        """结果行或诊断行"""
        if self.error is not None:
            return format_error(self.error)
        return format_value(self.value)

    def to_record(self) -> dict:
        """批处理输出用的一行记录"""
        return {
            'expression': self.expression,
            'result': format_value(self.value) if self.ok else None,
            'error': self.error.kind if self.error is not None else None,
        }

    def __repr__(self):
        return f"LineResult({self.expression!r}, value={self.value!r}, error={self.error!r})"


class LineEvaluator:
    """每次调用都新建扫描器与调度场，行与行之间不共享状态"""

    def evaluate_line(self, line: str) -> LineResult:
        rpn = None
        try:
            rpn = ShuntingYard(TokenStream(line)).get_stack()
            value = RPNEvaluator.evaluate(rpn)
        except CalcError as e:
            logger.debug(f"Evaluation of {line!r} failed: {e.kind}: {e.message}")
            return LineResult(line, error=e, rpn=rpn)

        if value is None:
            logger.debug("Expression is empty")
        else:
            logger.debug(f"{format_rpn(rpn)} => {value}")
        return LineResult(line, value=value, rpn=rpn)


def evaluate(line: str) -> LineResult:
    """便捷函数"""
    return LineEvaluator().evaluate_line(line)
