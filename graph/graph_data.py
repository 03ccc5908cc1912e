"""graph/graph_data.py - 求解服务在回答末尾附带的作图定义"""
import re
import json
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)

GRAPH_BLOCK_PATTERN = re.compile(r"```json-graph\s*([\s\S]*?)\s*```")


def _as_domain(value) -> Optional[Tuple[float, float]]:
    if value is None:
        return None
    lo, hi = value
    return float(lo), float(hi)


@dataclass
class GraphPoint:
    x: float
    y: float
    label: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        return cls(float(data["x"]), float(data["y"]), data.get("label"))


@dataclass
class GraphData:
    functions: List[str] = field(default_factory=list)
    points: Optional[List[GraphPoint]] = None
    x_domain: Optional[Tuple[float, float]] = None
    y_domain: Optional[Tuple[float, float]] = None

    @classmethod
    def from_dict(cls, data):
        """接受服务返回的 camelCase 键（xDomain / yDomain），也兼容 snake_case"""
        if not isinstance(data, dict):
            raise ValueError("Graph definition must be a JSON object")
        functions = data.get("functions") or []
        if not isinstance(functions, list):
            raise ValueError("'functions' must be a list of strings")
        points = data.get("points")
        return cls(
            functions=[str(f) for f in functions],
            points=[GraphPoint.from_dict(p) for p in points] if points is not None else None,
            x_domain=_as_domain(data.get("xDomain", data.get("x_domain"))),
            y_domain=_as_domain(data.get("yDomain", data.get("y_domain"))),
        )

    def to_dict(self):
        result = {"functions": list(self.functions)}
        if self.points is not None:
            result["points"] = [
                {k: v for k, v in (("x", p.x), ("y", p.y), ("label", p.label)) if v is not None}
                for p in self.points
            ]
        if self.x_domain is not None:
            result["xDomain"] = list(self.x_domain)
        if self.y_domain is not None:
            result["yDomain"] = list(self.y_domain)
        return result


def extract_graph_block(text):
    """
    从回答文本中取出 ```json-graph``` 代码块
    Returns:
        (去掉代码块后的文本, GraphData 或 None)
    """
    if not text:
        return '', None
    match = GRAPH_BLOCK_PATTERN.search(text)
    if match is None:
        return text.strip(), None

    clean_text = (text[:match.start()] + text[match.end():]).strip()
    try:
        graph_data = GraphData.from_dict(json.loads(match.group(1)))
    except (ValueError, TypeError, KeyError) as e:
        # json.JSONDecodeError 是 ValueError 的子类
        logger.error(f"Failed to parse graph JSON: {e}")
        return clean_text, None
    return clean_text, graph_data
