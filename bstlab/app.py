import os
from typing import Any, Dict, List, Optional

from flask import Flask, jsonify, request, render_template_string

from bstlab.tree import BinarySearchTree, EmptyTreeError, InvalidRotationError

app = Flask(__name__)

tree = BinarySearchTree()

DEFAULT_SEED = os.environ.get("BST_SEED", "7,1,9,8,11")
DEFAULT_HOST = os.environ.get("BST_HOST", "127.0.0.1")
DEFAULT_PORT = int(os.environ.get("BST_PORT", "5000"))

STATE: Dict[str, Any] = {"seed": [], "seeded": False}


def ok(data=None, **extra):
    payload = {"ok": True}
    if data is not None:
        payload["data"] = data
    payload.update(extra)
    return jsonify(payload)

def err(message: str, status: int = 400, **extra):
    payload = {"ok": False, "error": message}
    payload.update(extra)
    return jsonify(payload), status

def parse_int(raw: Any) -> Optional[int]:
    """Returns raw as an int, or None if it is not an integer literal."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    try:
        return int(str(raw).strip())
    except ValueError:
        return None

def parse_seed(raw: str) -> List[int]:
    """Parse a comma-separated list of integers; bad tokens are reported and skipped."""
    values: List[int] = []
    for token in (raw or "").split(","):
        if not token.strip():
            continue
        value = parse_int(token)
        if value is None:
            print(f"[warm_start] Skipping non-integer seed value: {token!r}")
            continue
        values.append(value)
    return values

def values_from_body(data: Dict[str, Any]) -> Optional[List[int]]:
    """Accept {"value": n} or {"values": [n, ...]}; None if anything is malformed."""
    if not isinstance(data, dict):
        return None
    if "values" in data:
        raw = data["values"]
        if not isinstance(raw, list):
            return None
    elif "value" in data:
        raw = [data["value"]]
    else:
        return None
    values = [parse_int(v) for v in raw]
    if any(v is None for v in values):
        return None
    return values

def describe(t: BinarySearchTree) -> Dict[str, Any]:
    try:
        smallest, largest = t.find_min(), t.find_max()
    except EmptyTreeError:
        smallest, largest = None, None
    return {
        "size": t.node_count(),
        "height": t.height(),
        "is_empty": t.is_empty(),
        "is_full": t.is_full(),
        "min": smallest,
        "max": largest,
    }

def warm_start():
    """Seed the tree from BST_SEED."""
    STATE["seed"] = parse_seed(DEFAULT_SEED)
    tree.make_empty()
    for v in STATE["seed"]:
        tree.insert(v)
    STATE["seeded"] = True
    print(f"[warm_start] Tree seeded with {tree.node_count():,} values: {list(tree)}")


@app.get("/api/status")
def api_status():
    status = describe(tree)
    status["seeded"] = STATE["seeded"]
    return ok(status)


@app.get("/api/tree/inorder")
def api_tree_inorder():
    return ok({"elements": list(tree)})


@app.get("/api/tree/levels")
def api_tree_levels():
    rows = [{"level": level, "elements": row} for level, row in tree.levels()]
    return ok({"levels": rows})


@app.get("/api/tree/contains/<value>")
def api_tree_contains(value: str):
    v = parse_int(value)
    if v is None:
        return err("value must be an integer")
    return ok({"value": v, "contains": tree.contains(v)})


@app.post("/api/tree/insert")
def api_tree_insert():
    data = request.get_json(silent=True) or {}
    values = values_from_body(data)
    if values is None:
        return err("body must be {\"value\": int} or {\"values\": [int, ...]}")

    for v in values:
        tree.insert(v)
    return ok({"inserted": values, "size": tree.node_count()})


@app.post("/api/tree/remove")
def api_tree_remove():
    data = request.get_json(silent=True) or {}
    values = values_from_body(data)
    if values is None:
        return err("body must be {\"value\": int} or {\"values\": [int, ...]}")

    removed = [v for v in values if tree.contains(v)]
    for v in values:
        tree.remove(v)
    return ok({"removed": removed, "size": tree.node_count()})


@app.post("/api/tree/rotate")
def api_tree_rotate():
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return err("body must be a JSON object")
    v = parse_int(data.get("value"))
    direction = data.get("direction")
    if v is None:
        return err("value must be an integer")
    if not isinstance(direction, str) or direction.strip().lower() not in ("left", "right"):
        return err("direction must be 'left' or 'right'")
    direction = direction.strip().lower()

    p = tree.find(v)
    if p is None:
        return err("value not found", 404)

    try:
        if direction == "right":
            pivot = tree.rotate_right(p)
        else:
            pivot = tree.rotate_left(p)
    except InvalidRotationError as e:
        return err(str(e), 409)

    rows = [{"level": level, "elements": row} for level, row in tree.levels()]
    return ok({"pivot": pivot.get_element(), "levels": rows})


@app.post("/api/tree/reset")
def api_tree_reset():
    warm_start()
    return ok({"elements": list(tree)})


@app.post("/api/tree/compare")
def api_tree_compare():
    data = request.get_json(silent=True) or {}
    values = values_from_body(data)
    if values is None:
        return err("body must be {\"values\": [int, ...]}")

    other = BinarySearchTree(values)
    return ok({
        "other": list(other),
        "equals": tree.equals(other),
        "compare_structure": tree.compare_structure(other),
        "is_mirror": tree.is_mirror(other),
    })


HTML = r"""
<!doctype html>
<html>
<head>
<meta charset="utf-8">
<title>BST Inspector</title>
<style>
  body { font-family: system-ui, sans-serif; margin: 2rem; }
  pre { background: #f4f4f4; padding: 1rem; }
</style>
</head>
<body>
<h1>BST Inspector</h1>
<p>Size {{ status.size }}, height {{ status.height }}, full: {{ status.is_full }}</p>
<h2>Levels</h2>
<pre>{% for level, row in levels %}{{ level }}: {{ row|join(' ') }}
{% else %}Empty tree{% endfor %}</pre>
<h2>In order</h2>
<pre>{{ elements|join('\n') }}</pre>
</body>
</html>
"""

@app.get("/")
def home():
    return render_template_string(HTML, status=describe(tree), levels=list(tree.levels()), elements=list(tree))

if __name__ == "__main__":
    warm_start()
    app.run(host=DEFAULT_HOST, port=DEFAULT_PORT, debug=True, use_reloader=False)
