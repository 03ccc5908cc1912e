"""工具模块"""
from .formatting import format_number, format_operand, format_results, is_integral

__all__ = ['format_number', 'format_operand', 'format_results', 'is_integral']
