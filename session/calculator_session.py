"""session/calculator_session.py"""
import math
import logging
from collections import deque
from typing import NamedTuple

from config.config import EVALUATOR_CONFIG, SESSION_CONFIG
from core import AngleMode, ExpressionEvaluator
from utils.formatting import format_operand

logger = logging.getLogger(__name__)


class HistoryEntry(NamedTuple):
    expression: str
    result: float


class CalculatorSession:
    """
    计算器会话：持有记忆寄存器 (M+ / M- / MR / MC)、上一次结果 ans 和计算历史。
    求值器本身是无状态的，所有状态都保存在这里。
    """

    def __init__(self, angle_mode=None, history_size=None, evaluator=None):
        self.angle_mode = AngleMode.parse(angle_mode or EVALUATOR_CONFIG["angle_mode"])
        self.evaluator = evaluator or ExpressionEvaluator()
        self.answer_name = SESSION_CONFIG["answer_name"]
        self.memory = 0.0
        self.last_answer = 0.0
        self.history = deque(maxlen=history_size or SESSION_CONFIG["history_size"])

    def _constants(self):
        return {self.answer_name: self.last_answer}

    def evaluate(self, expression):
        """求值；有限结果会成为新的 ans 并记入历史"""
        result = self.evaluator.evaluate(expression, angle_mode=self.angle_mode,
                                         constants=self._constants())
        if math.isfinite(result):
            self.last_answer = result
            self.history.append(HistoryEntry(expression, result))
        else:
            logger.debug(f"Not recording non-finite result for {expression!r}")
        return result

    def set_angle_mode(self, angle_mode):
        self.angle_mode = AngleMode.parse(angle_mode)

    # 记忆寄存器 ====================

    def _memory_operand(self, expression):
        # 记忆键总是按角度制计算当前输入
        return self.evaluator.evaluate(expression, angle_mode=AngleMode.DEGREES,
                                       constants=self._constants())

    def memory_add(self, expression):
        value = self._memory_operand(expression)
        if math.isnan(value):
            logger.debug(f"M+ ignored, {expression!r} does not evaluate")
            return self.memory
        self.memory += value
        return self.memory

    def memory_subtract(self, expression):
        value = self._memory_operand(expression)
        if math.isnan(value):
            logger.debug(f"M- ignored, {expression!r} does not evaluate")
            return self.memory
        self.memory -= value
        return self.memory

    def memory_recall(self, expression=''):
        """把记忆值以文本形式拼接到当前输入后面"""
        return (expression or '') + format_operand(self.memory)

    def memory_clear(self):
        self.memory = 0.0

    def clear_history(self):
        self.history.clear()
