"""会话模块 - 记忆寄存器与上一次结果"""
from .calculator_session import CalculatorSession, HistoryEntry

__all__ = ['CalculatorSession', 'HistoryEntry']
