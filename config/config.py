"""配置文件"""

# 求值器参数
EVALUATOR_CONFIG = {
    "angle_mode": "degrees",  # 计算器默认角度制
    "strict_lexing": False,  # True: 未知字符直接报错；False: 跳过（兼容旧行为）
    "strict_parens": False,  # True: 括号不匹配报错；False: 在出栈时静默丢弃
    "max_expression_length": 10000,  # 括号嵌套不限深度，因此在入口限制输入长度
    "cache_size": 256,  # 编译结果LRU缓存大小
}

# 计算器会话参数
SESSION_CONFIG = {
    "history_size": 100,  # 保留最近100条计算记录
    "answer_name": "ans",  # 上一次结果在表达式中的名称
}

# 函数图像采样参数
GRAPH_CONFIG = {
    "num_points": 200,
    "default_x_domain": (-10.0, 10.0),
    "angle_mode": "radians",  # 作图时三角函数按弧度
}

# 批量求值参数
BATCH_CONFIG = {
    "expression_column": "expression",
    "result_column": "result",
    "output_path": "results.csv",
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert EVALUATOR_CONFIG["angle_mode"] in ("degrees", "radians"), "angle_mode必须是degrees或radians"
    assert EVALUATOR_CONFIG["max_expression_length"] > 0, "必须限制输入长度"
    assert EVALUATOR_CONFIG["cache_size"] >= 0
    assert SESSION_CONFIG["history_size"] > 0
    assert GRAPH_CONFIG["num_points"] >= 2, "至少需要2个采样点"
    lo, hi = GRAPH_CONFIG["default_x_domain"]
    assert lo < hi, "x定义域下界必须小于上界"
    assert GRAPH_CONFIG["angle_mode"] in ("degrees", "radians")
    assert BATCH_CONFIG["expression_column"] != BATCH_CONFIG["result_column"]
    print("Configuration validated successfully!")
