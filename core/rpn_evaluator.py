"""RPN表达式求值器 - 调用统一的Functions注册表"""
import logging

import numpy as np

from core.errors import StackUnderflowError, UnknownSymbolError, MalformedResultError
from core.functions import (
    AngleMode, CONSTANTS, FUNCTION_DEFINITIONS, BINARY_OPERATIONS, UNARY_OPERATIONS
)
from core.token_system import TokenType, operator_spec, describe

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估后缀表达式的值"""

    @staticmethod
    def _pop_operands(stack, symbol, arity):
        if len(stack) < arity:
            raise StackUnderflowError(symbol, arity, len(stack))
        # 先弹出的是右操作数，这里恢复为书写顺序
        args = stack[-arity:]
        del stack[-arity:]
        return args

    @staticmethod
    def evaluate(postfix, angle_mode=AngleMode.DEGREES, constants=None):
        """
        评估后缀表达式
        Args:
            postfix: 后缀Token序列
            angle_mode: 角度制或弧度制，只影响三角函数
            constants: 额外常数（名称 -> 数值），优先于内置常数
        Returns:
            float 结果
        Raises:
            EvalError 的各个子类
        """
        stack = []

        with np.errstate(all='ignore'):
            for token in postfix:
                if token.type == TokenType.NUMBER:
                    stack.append(float(token.text))

                elif token.type == TokenType.CONSTANT:
                    if constants and token.text in constants:
                        stack.append(float(constants[token.text]))
                    elif token.text in CONSTANTS:
                        stack.append(CONSTANTS[token.text])
                    else:
                        raise UnknownSymbolError(token.text)

                # ================== 操作符处理 ==================
                elif token.type == TokenType.OPERATOR:
                    spec = operator_spec(token.text)
                    args = RPNEvaluator._pop_operands(stack, token.text, spec.arity)
                    if spec.arity == 1:
                        op = UNARY_OPERATIONS.get(token.text)
                    else:
                        op = BINARY_OPERATIONS.get(token.text)
                    if op is None:
                        raise UnknownSymbolError(token.text)
                    stack.append(op(*args))

                # ================== 函数处理 ==================
                elif token.type == TokenType.FUNCTION:
                    func = FUNCTION_DEFINITIONS.get(token.text)
                    if func is None:
                        raise UnknownSymbolError(token.text)
                    args = RPNEvaluator._pop_operands(stack, token.text, func.arity)
                    stack.append(func(args, angle_mode))

                else:
                    # 括号和逗号不应出现在后缀序列中
                    raise UnknownSymbolError(token.text)

        if len(stack) != 1:
            logger.debug(f"RPN expression: {describe(postfix)}")
            raise MalformedResultError(len(stack))
        return stack[0]
