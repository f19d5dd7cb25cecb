"""repl/session.py - 读取-求值-打印循环与批处理模式"""
import logging
import sys

import pandas as pd

from config.config import REPL_CONFIG, BATCH_CONFIG
from repl.evaluator import LineEvaluator
from utils.formatting import format_rpn

logger = logging.getLogger(__name__)


class Session:
    """
    交互会话。只负责 I/O：读入一行、去掉行尾空白、交给 LineEvaluator、输出结果。

    Args:
        stdin: 输入流，默认 sys.stdin
        stdout: 输出流，默认 sys.stdout
        prompt: 提示符，None 表示不输出提示符
        show_rpn: 是否在结果前输出后缀表达式
    """

    def __init__(self, stdin=None, stdout=None, prompt=None, show_rpn=None):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.prompt = REPL_CONFIG['prompt'] if prompt is None else prompt
        self.show_rpn = REPL_CONFIG['show_rpn'] if show_rpn is None else show_rpn
        self.evaluator = LineEvaluator()
        self.lines_evaluated = 0
        self.errors = 0

    def _write(self, text):
        self.stdout.write(text + "\n")
        self.stdout.flush()

    def handle(self, line):
        """处理一行输入，返回 LineResult"""
        result = self.evaluator.evaluate_line(line)
        self.lines_evaluated += 1
        if not result.ok:
            self.errors += 1
        elif self.show_rpn and not result.is_empty:
            self._write(format_rpn(result.rpn))
        self._write(result.format())
        return result

    def run(self):
        """循环直到读到 exit 命令或输入结束"""
        logger.info("Session started")
        while True:
            if self.prompt:
                self.stdout.write(self.prompt)
                self.stdout.flush()
            raw = self.stdin.readline()
            if not raw:
                logger.info("End of input")
                break
            line = raw.rstrip()
            if line == REPL_CONFIG['exit_command']:
                break
            self.handle(line)
        logger.info(f"Session finished: {self.lines_evaluated} lines, {self.errors} errors")
        return self.errors


def run_batch(input_path, output_path=None, evaluator=None):
    """
    对文件中的每一行求值，结果写入 CSV。

    Returns:
        pd.DataFrame，列为 expression / result / error
    """
    output_path = output_path or BATCH_CONFIG['output_path']
    evaluator = evaluator or LineEvaluator()
    logger.info(f"Evaluating expressions from {input_path}")

    records = []
    with open(input_path, 'r', encoding=BATCH_CONFIG['encoding']) as f:
        for raw in f:
            line = raw.rstrip()
            if line == REPL_CONFIG['exit_command']:
                break
            records.append(evaluator.evaluate_line(line).to_record())

    results = pd.DataFrame.from_records(records, columns=BATCH_CONFIG['columns'])
    results.to_csv(output_path, index=False, encoding=BATCH_CONFIG['encoding'])

    failed = int(results['error'].notna().sum())
    logger.info(f"Saved {len(results)} results to {output_path} ({failed} errors)")
    return results
