"""核心模块 - Token系统、扫描器、调度场、RPN评估器和操作符"""
from .token_system import (
    TokenType, Token, TOKEN_DEFINITIONS, NAME_TO_TOKEN,
    ADD, SUB, MUL, DIV, POW, LEFT_PAREN, RIGHT_PAREN
)
from .errors import (
    CalcError, ScanError, ParseError, EvalError,
    UnexpectedCharacter, MalformedNumber,
    UnmatchedLeftParen, UnmatchedRightParen,
    InsufficientOperands, InvalidExpression, DivideByZero
)
from .scanner import TokenStream, tokenize
from .shunting_yard import ShuntingYard
from .rpn_evaluator import RPNEvaluator
from .operators import Operators

__all__ = [
    'TokenType', 'Token', 'TOKEN_DEFINITIONS', 'NAME_TO_TOKEN',
    'ADD', 'SUB', 'MUL', 'DIV', 'POW', 'LEFT_PAREN', 'RIGHT_PAREN',
    'CalcError', 'ScanError', 'ParseError', 'EvalError',
    'UnexpectedCharacter', 'MalformedNumber',
    'UnmatchedLeftParen', 'UnmatchedRightParen',
    'InsufficientOperands', 'InvalidExpression', 'DivideByZero',
    'TokenStream', 'tokenize', 'ShuntingYard', 'RPNEvaluator', 'Operators'
]
