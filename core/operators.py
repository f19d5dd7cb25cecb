"""core/operators.py"""
import logging

import numpy as np

from config.config import OPERATOR_CONFIG
from core.errors import DivideByZero
from core.token_system import Token, INT_MIN, INT_MAX

logger = logging.getLogger(__name__)


def to_i32(x):
    """浮点转 32 位整数：向零截断、超范围饱和、NaN 得 0"""
    x = float(x)
    if np.isnan(x):
        return 0
    if x >= INT_MAX:
        return INT_MAX
    if x <= INT_MIN:
        return INT_MIN
    return int(np.trunc(x))


class Operators:
    """所有二元操作符的静态方法集合，参数与返回值均为 np.float64"""

    @staticmethod
    def add(a, b):
        return a + b

    @staticmethod
    def sub(a, b):
        return a - b

    @staticmethod
    def mul(a, b):
        return a * b

    @staticmethod
    def div(a, b):
        """IEEE 除法：除零得到 inf / -inf / nan 而不是异常"""
        return np.divide(a, b)

    @staticmethod
    def pow(a, b):
        """
        a 自乘 trunc(b) 次。指数 <= 0 时结果为 1（包括负指数），
        与通常的数学定义不同，这里保持原有行为。
        """
        n = to_i32(b)
        result = np.float64(1.0)
        if n <= 0:
            return result

        if n > OPERATOR_CONFIG['pow_loop_limit']:
            return np.power(a, np.float64(n))

        for i in range(n):
            result = a * result
            remaining = n - i - 1
            if remaining and (not np.isfinite(result) or result == 0 or abs(a) == 1):
                # 之后的乘法只会改变符号
                if a < 0 and remaining % 2 == 1:
                    result = -result
                break
        return result

    @staticmethod
    def reduce(operator, a, b):
        """
        对两个数字 Token 施加运算符。

        Args:
            operator: 运算符 Token
            a: 左操作数 Token
            b: 右操作数 Token（栈顶）
        Returns:
            Int ⊗ Int 得 Int，其余得 Float
        """
        op_method = getattr(Operators, operator.name)

        if a.is_int() and b.is_int():
            if operator.name == 'div' and b.value == 0:
                raise DivideByZero(f"Integer division by zero: {a.value} / 0")
            with np.errstate(all='ignore'):
                result = op_method(np.float64(a.value), np.float64(b.value))
            return Token.int_(to_i32(result))

        with np.errstate(all='ignore'):
            result = op_method(np.float64(a.value), np.float64(b.value))
        if not np.isfinite(result):
            logger.debug(f"{a} {operator.symbol} {b} produced {result}")
        return Token.float_(result)
