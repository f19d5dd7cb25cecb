"""工具模块"""
from .formatting import format_value, format_error, format_rpn

__all__ = ['format_value', 'format_error', 'format_rpn']
