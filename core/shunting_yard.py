"""core/shunting_yard.py - 中缀 Token 流转后缀（逆波兰）顺序"""
import logging

from core.errors import UnmatchedLeftParen, UnmatchedRightParen
from core.token_system import TokenType, LEFT_PAREN

logger = logging.getLogger(__name__)


class ShuntingYard:
    """调度场算法，每行输入新建一个实例"""

    def __init__(self, stream):
        self.stream = stream

    def get_stack(self):
        """
        消费整个 Token 流，返回后缀顺序的 Token 列表（不含括号）。

        栈顶运算符优先级 >= 新运算符时先弹出，因此所有运算符都按左结合处理，
        包括 ^：2^3^2 == (2^3)^2。
        """
        tokens = []
        op_stack = []

        for token in self.stream:
            if token.is_num():
                tokens.append(token)
            elif token.is_op():
                while op_stack and op_stack[-1].is_op() and op_stack[-1].prec() >= token.prec():
                    tokens.append(op_stack.pop())
                op_stack.append(token)
            elif token.name == 'lparen':
                op_stack.append(token)
            elif token.name == 'rparen':
                escaped = False
                while op_stack:
                    operator = op_stack.pop()
                    if operator.name == 'lparen':
                        escaped = True
                        break
                    tokens.append(operator)
                if not escaped:
                    raise UnmatchedRightParen(f"Expected {LEFT_PAREN} before {token}")

        while op_stack:
            operator = op_stack.pop()
            if operator.type == TokenType.PAREN:
                raise UnmatchedLeftParen(f"Unexpected {LEFT_PAREN}")
            tokens.append(operator)

        logger.debug(f"RPN expression: {' '.join(str(t) for t in tokens)}")
        return tokens
