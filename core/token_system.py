"""core/token_system.py"""
from enum import Enum

import numpy as np

from config.config import OPERATOR_CONFIG

INT_MIN = int(np.iinfo(np.int32).min)
INT_MAX = int(np.iinfo(np.int32).max)


class TokenType(Enum):
    OPERAND = "operand"  # int / float
    OPERATOR = "operator"  # + - * / ^
    PAREN = "paren"  # ( )


class Token:
    """表达式中的一个记号，name 决定变体，value 只对数字有意义"""

    __slots__ = ("type", "name", "symbol", "value")

    def __init__(self, token_type, name, symbol=None, value=None):
        self.type = token_type
        self.name = name
        self.symbol = symbol
        self.value = value

    @classmethod
    def int_(cls, value):
        return cls(TokenType.OPERAND, 'int', value=int(value))

    @classmethod
    def float_(cls, value):
        return cls(TokenType.OPERAND, 'float', value=float(value))

    def prec(self):
        """运算符优先级，非运算符返回 None"""
        if self.type != TokenType.OPERATOR:
            return None
        return OPERATOR_CONFIG['precedence'][self.name]

    def is_op(self):
        return self.type == TokenType.OPERATOR

    def is_num(self):
        return self.type == TokenType.OPERAND

    def is_int(self):
        return self.name == 'int'

    def is_float(self):
        return self.name == 'float'

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        if self.name != other.name:
            return False
        if self.is_float() and np.isnan(self.value) and np.isnan(other.value):
            return True
        return self.value == other.value

    def __hash__(self):
        if self.is_float() and np.isnan(self.value):
            return hash((self.name, "nan"))
        return hash((self.name, self.value))

    def __repr__(self):
        if self.is_num():
            return f"Token({self.name}, {self.value!r})"
        return f"Token({self.name})"

    def __str__(self):
        if self.is_int():
            return f"Int ({self.value})"
        if self.is_float():
            return f"Float ({self.value!r})"
        return DISPLAY_NAMES[self.name]


# 单字符记号定义
TOKEN_DEFINITIONS = {
    '+': Token(TokenType.OPERATOR, 'add', symbol='+'),
    '-': Token(TokenType.OPERATOR, 'sub', symbol='-'),
    '*': Token(TokenType.OPERATOR, 'mul', symbol='*'),
    '/': Token(TokenType.OPERATOR, 'div', symbol='/'),
    '^': Token(TokenType.OPERATOR, 'pow', symbol='^'),
    '(': Token(TokenType.PAREN, 'lparen', symbol='('),
    ')': Token(TokenType.PAREN, 'rparen', symbol=')'),
}

NAME_TO_TOKEN = {token.name: token for token in TOKEN_DEFINITIONS.values()}

DISPLAY_NAMES = {
    'add': 'Add (+)',
    'sub': 'Sub (-)',
    'mul': 'Mul (*)',
    'div': 'Div (/)',
    'pow': 'Pow (^)',
    'lparen': 'Left Paren ("(")',
    'rparen': 'Right Paren (")")',
}

ADD = NAME_TO_TOKEN['add']
SUB = NAME_TO_TOKEN['sub']
MUL = NAME_TO_TOKEN['mul']
DIV = NAME_TO_TOKEN['div']
POW = NAME_TO_TOKEN['pow']
LEFT_PAREN = NAME_TO_TOKEN['lparen']
RIGHT_PAREN = NAME_TO_TOKEN['rparen']
