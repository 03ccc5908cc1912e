"""core/errors.py - 表达式求值过程中的错误类型

所有错误都从 EvalError 派生；只在公开入口 evaluate() 处统一折叠为 NaN。
"""


class EvalError(Exception):
    """表达式求值错误基类"""

    def __init__(self, message, expression=None):
        super().__init__(message)
        self.message = message
        self.expression = expression

    def __str__(self):
        if self.expression is not None:
            return f"{self.message} (in {self.expression!r})"
        return self.message


class LexicalError(EvalError):
    """字符不匹配任何词法规则（仅严格模式下抛出）"""

    def __init__(self, char, position, expression=None):
        super().__init__(f"Unexpected character {char!r} at position {position}", expression)
        self.char = char
        self.position = position


class StackUnderflowError(EvalError):
    """操作数不足"""

    def __init__(self, symbol, required, available):
        super().__init__(f"Insufficient operands for {symbol}: need {required}, have {available}")
        self.symbol = symbol
        self.required = required
        self.available = available


class UnknownSymbolError(EvalError):
    """既不是已注册常数也不是已注册函数的标识符"""

    def __init__(self, symbol):
        super().__init__(f"Unknown symbol: {symbol}")
        self.symbol = symbol


class MalformedResultError(EvalError):
    """求值结束后栈内元素个数不为1"""

    def __init__(self, stack_size):
        super().__init__(f"Stack has {stack_size} elements after evaluation, expected 1")
        self.stack_size = stack_size


class DomainError(EvalError):
    """参数超出定义域，例如负数或非整数的阶乘"""


class MismatchedParensError(EvalError):
    """括号不匹配（仅 strict_parens 模式下抛出）"""


class ExpressionTooLongError(EvalError):
    """输入超过配置的最大长度"""

    def __init__(self, length, limit):
        super().__init__(f"Expression length {length} exceeds limit {limit}")
        self.length = length
        self.limit = limit
