"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from core.errors import InsufficientOperands, InvalidExpression
from core.operators import Operators

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(token_sequence):
        """
        评估RPN表达式
        Args:
            token_sequence: 后缀顺序的 Token 序列（只含数字和运算符）
        Returns:
            数字 Token；序列为空时返回 None（空表达式）
        Raises:
            InsufficientOperands: 运算符可用的操作数不足两个
            InvalidExpression: 求值结束后栈中剩余多于一个值
        """
        stack = []

        for token in token_sequence:
            if token.is_num():
                stack.append(token)
            elif token.is_op():
                if len(stack) < 2:
                    raise InsufficientOperands(f"{token} needs two operands, found {len(stack)}")
                b = stack.pop()
                a = stack.pop()
                stack.append(Operators.reduce(token, a, b))

        if len(stack) == 0:
            return None
        elif len(stack) == 1:
            return stack[0]
        else:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            raise InvalidExpression(
                f"Incorrect input: {len(stack)} values left ({', '.join(str(t) for t in stack)})"
            )
