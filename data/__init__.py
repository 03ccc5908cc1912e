"""数据模块 - 批量表达式加载与求值"""
from .expression_loader import load_expressions, evaluate_frame, summarize_results

__all__ = ['load_expressions', 'evaluate_frame', 'summarize_results']
