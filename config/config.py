"""配置文件"""

# 交互式循环参数
REPL_CONFIG = {
    "prompt": "> ",
    "exit_command": "exit",  # 输入此行即退出
    "empty_sentinel": "0 (empty)",  # 空表达式的输出
    "error_prefix": "error",
    "show_rpn": False,  # 输出结果前打印后缀表达式
}

# 运算符参数
OPERATOR_CONFIG = {
    "precedence": {
        "add": 1,
        "sub": 1,
        "mul": 2,
        "div": 2,
        "pow": 3,
    },
    "pow_loop_limit": 1 << 16,  # 超过此次数的乘方交给 numpy.power
}

# 批处理参数
BATCH_CONFIG = {
    "output_path": "results.csv",
    "columns": ["expression", "result", "error"],
    "encoding": "utf-8",
}

# 日志参数
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    prec = OPERATOR_CONFIG["precedence"]
    assert prec["add"] == prec["sub"] == 1, "Add/Sub precedence must be 1"
    assert prec["mul"] == prec["div"] == 2, "Mul/Div precedence must be 2"
    assert prec["pow"] == 3, "Pow precedence must be 3"
    assert OPERATOR_CONFIG["pow_loop_limit"] > 0, "pow_loop_limit must be positive"
    assert REPL_CONFIG["exit_command"], "exit_command must not be empty"
    assert BATCH_CONFIG["columns"] == ["expression", "result", "error"], "unexpected batch columns"
    return True
