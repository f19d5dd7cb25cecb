"""交互与批处理模块"""
from .evaluator import LineEvaluator, LineResult, evaluate
from .session import Session, run_batch

__all__ = ['LineEvaluator', 'LineResult', 'evaluate', 'Session', 'run_batch']
