"""JSON serialization/deserialization for Indento statement trees.

This module converts between the tree dataclasses and plain Python
dict/list structures suitable for JSON encoding, so a parsed program can
be saved and run later without its source. Statements keep the number
and text of the line they came from.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from .ast import (
    Program,
    Assign,
    Print,
    If,
    BinaryOp,
    UnaryOp,
    Literal,
    Ident,
)
from .lines import SourceLine


def line_to_obj(line: Optional[SourceLine]) -> Optional[Dict[str, Any]]:
    if line is None:
        return None
    return {"number": line.number, "text": line.text}


def line_from_obj(o: Optional[Dict[str, Any]]) -> Optional[SourceLine]:
    if o is None:
        return None
    return SourceLine(o["text"], o.get("number", 0))


def tree_to_obj(node: Any) -> Any:
    if node is None:
        return None

    if isinstance(node, Program):
        return {"type": "Program", "body": [tree_to_obj(n) for n in node.body]}
    if isinstance(node, Assign):
        return {
            "type": "Assign",
            "name": node.name,
            "expr": tree_to_obj(node.expr),
            "line": line_to_obj(node.line),
        }
    if isinstance(node, Print):
        return {"type": "Print", "expr": tree_to_obj(node.expr), "line": line_to_obj(node.line)}
    if isinstance(node, If):
        return {
            "type": "If",
            "condition": tree_to_obj(node.condition),
            "body": [tree_to_obj(s) for s in node.body],
            "line": line_to_obj(node.line),
        }
    if isinstance(node, BinaryOp):
        return {
            "type": "BinaryOp",
            "op": node.op,
            "left": tree_to_obj(node.left),
            "right": tree_to_obj(node.right),
        }
    if isinstance(node, UnaryOp):
        return {"type": "UnaryOp", "op": node.op, "operand": tree_to_obj(node.operand)}
    if isinstance(node, Literal):
        return {"type": "Literal", "value": node.value, "literal_type": node.literal_type}
    if isinstance(node, Ident):
        return {"type": "Ident", "name": node.name}

    raise TypeError(f"Unsupported node for JSON serialization: {type(node).__name__}")


def tree_from_obj(obj: Any) -> Any:
    if obj is None:
        return None
    if not isinstance(obj, dict):
        raise ValueError(f"Expected a node object, got {type(obj).__name__}")

    t = obj.get("type")
    if t == "Program":
        return Program(body=[tree_from_obj(s) for s in obj["body"]])
    if t == "Assign":
        return Assign(
            name=obj["name"],
            expr=tree_from_obj(obj["expr"]),
            line=line_from_obj(obj.get("line")),
        )
    if t == "Print":
        return Print(expr=tree_from_obj(obj["expr"]), line=line_from_obj(obj.get("line")))
    if t == "If":
        return If(
            condition=tree_from_obj(obj["condition"]),
            body=[tree_from_obj(s) for s in obj["body"]],
            line=line_from_obj(obj.get("line")),
        )
    if t == "BinaryOp":
        return BinaryOp(op=obj["op"], left=tree_from_obj(obj["left"]), right=tree_from_obj(obj["right"]))
    if t == "UnaryOp":
        return UnaryOp(op=obj["op"], operand=tree_from_obj(obj["operand"]))
    if t == "Literal":
        return Literal(value=obj["value"], literal_type=obj["literal_type"])
    if t == "Ident":
        return Ident(name=obj["name"])

    raise ValueError(f"Unknown tree node type: {t}")
