"""utils/formatting.py"""
import numpy as np

from config.config import REPL_CONFIG


def format_value(token):
    """Int 输出整数；Float 输出不带指数的十进制（1.5、2.0、10000000000000000.0、0.00001、inf、nan）"""
    if token is None:
        return REPL_CONFIG['empty_sentinel']
    if token.is_int():
        return str(token.value)
    return np.format_float_positional(np.float64(token.value), trim='0')


def format_error(error, prefix=None):
    """一行诊断信息：错误类型 + 具体内容"""
    prefix = prefix or REPL_CONFIG['error_prefix']
    return f"{prefix}: {error.kind}: {error.message}"


def format_rpn(token_sequence):
    """后缀序列的紧凑写法，例如 '2 3 4 * +'"""
    return ' '.join(format_value(t) if t.is_num() else t.symbol for t in token_sequence)
