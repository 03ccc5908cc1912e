"""core/token_system.py"""
from enum import Enum


class TokenType(Enum):
    NUMBER = "number"        # 数字字面量
    CONSTANT = "constant"    # 常数标识符 pi / e
    FUNCTION = "function"    # 函数标识符 sin / root ...
    OPERATOR = "operator"    # 操作符
    LPAREN = "lparen"
    RPAREN = "rparen"
    SEPARATOR = "separator"  # 参数分隔符 ,


class Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"


class Token:
    """不可变Token：类型 + 原始文本"""
    __slots__ = ('type', 'text')

    def __init__(self, token_type, text):
        object.__setattr__(self, 'type', token_type)
        object.__setattr__(self, 'text', text)

    def __setattr__(self, name, value):
        raise AttributeError("Token is immutable")

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.text == other.text

    def __hash__(self):
        return hash((self.type, self.text))

    def __repr__(self):
        return f"Token({self.type.name}, {self.text!r})"

    @property
    def is_operator(self):
        return self.type == TokenType.OPERATOR


class OperatorSpec:
    def __init__(self, symbol, precedence, associativity, arity):
        self.symbol = symbol
        self.precedence = precedence
        self.associativity = associativity
        self.arity = arity

    @property
    def is_left_associative(self):
        return self.associativity == Associativity.LEFT

    @property
    def is_postfix(self):
        # 目前只有阶乘是后缀一元操作符
        return self.arity == 1 and self.associativity == Associativity.LEFT


UNARY_MINUS = 'u-'
MULTIPLY = '*'

# 操作符定义字典：优先级越高结合越紧
OPERATOR_DEFINITIONS = {
    # 加减
    '+': OperatorSpec('+', 1, Associativity.LEFT, 2),
    '-': OperatorSpec('-', 1, Associativity.LEFT, 2),

    # 乘除取模
    '*': OperatorSpec('*', 2, Associativity.LEFT, 2),
    '/': OperatorSpec('/', 2, Associativity.LEFT, 2),
    '%': OperatorSpec('%', 2, Associativity.LEFT, 2),

    # 幂（右结合）
    '^': OperatorSpec('^', 3, Associativity.RIGHT, 2),

    # 一元操作符
    '!': OperatorSpec('!', 4, Associativity.LEFT, 1),
    UNARY_MINUS: OperatorSpec(UNARY_MINUS, 4, Associativity.RIGHT, 1),
}

# 词法层面允许出现的操作符符号（u- 只由解析器产生）
OPERATOR_SYMBOLS = frozenset(sym for sym in OPERATOR_DEFINITIONS if sym != UNARY_MINUS)


def operator_spec(symbol):
    """查找操作符描述；查不到说明是程序缺陷而不是输入错误"""
    try:
        return OPERATOR_DEFINITIONS[symbol]
    except KeyError:
        raise LookupError(f"No operator descriptor for {symbol!r}") from None


def describe(tokens):
    """把Token序列还原成便于日志阅读的字符串"""
    return ' '.join(t.text for t in tokens)
