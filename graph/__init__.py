"""函数图像模块 - 作图定义的解析与采样"""
from .graph_data import GraphPoint, GraphData, extract_graph_block
from .sampler import clean_equation, is_implicit, sample_function, sample_functions, points_frame

__all__ = [
    'GraphPoint', 'GraphData', 'extract_graph_block',
    'clean_equation', 'is_implicit', 'sample_function', 'sample_functions', 'points_frame'
]
