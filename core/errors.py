"""core/errors.py - 表达式求值中的错误类型"""


class CalcError(Exception):
    """所有计算错误的基类，kind 为展示给用户的错误名"""

    kind = "CalcError"

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ScanError(CalcError):
    """词法扫描阶段的错误"""
    kind = "ScanError"


class UnexpectedCharacter(ScanError):
    kind = "UnexpectedCharacter"

    def __init__(self, char, position):
        super().__init__(f"Unexpected input: {char!r} at position {position}")
        self.char = char
        self.position = position


class MalformedNumber(UnexpectedCharacter):
    """数字串无法转换（例如超出 32 位整数范围），对外仍报告为 UnexpectedCharacter"""

    def __init__(self, text, position):
        ScanError.__init__(self, f"Cannot parse number {text!r} at position {position}")
        self.char = text
        self.text = text
        self.position = position


class ParseError(CalcError):
    """括号匹配错误（中缀转后缀阶段）"""
    kind = "ParseError"


class UnmatchedRightParen(ParseError):
    kind = "UnmatchedRightParen"


class UnmatchedLeftParen(ParseError):
    kind = "UnmatchedLeftParen"


class EvalError(CalcError):
    """后缀表达式求值阶段的错误"""
    kind = "EvalError"


class InsufficientOperands(EvalError):
    kind = "InsufficientOperands"


class InvalidExpression(EvalError):
    kind = "InvalidExpression"


class DivideByZero(EvalError):
    kind = "DivideByZero"
