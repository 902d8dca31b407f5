# src/ui/layout.py
"""
Geometria pura da visualização (sem tkinter), para poder ser testada isoladamente.
"""
from typing import Dict, List, Tuple
import numpy as np

def circular_layout(names: List[str], width: float, height: float, margin: float = 60.0) -> Dict[str, Tuple[float, float]]:
    """
    Distribui as localidades num círculo centrado no canvas,
    na ordem de inserção e começando no topo.
    """
    if not names:
        return {}
    cx, cy = width / 2.0, height / 2.0
    if len(names) == 1:
        return {names[0]: (cx, cy)}

    radius = max(min(width, height) / 2.0 - margin, 0.0)
    angles = np.linspace(0.0, 2.0 * np.pi, num=len(names), endpoint=False) - np.pi / 2.0
    xs = cx + radius * np.cos(angles)
    ys = cy + radius * np.sin(angles)
    return {name: (float(x), float(y)) for name, x, y in zip(names, xs, ys)}

def tree_layout(root, width: float, level_height: float = 70.0, top: float = 40.0) -> Dict[str, Tuple[float, float]]:
    """
    Posiciona os nós da AVL: x pela ordem in-order (colunas igualmente espaçadas)
    e y pela profundidade. Só lê a árvore.
    """
    ordered: List[Tuple[str, int]] = []  # (chave, profundidade)

    def walk(node, depth):
        if node is None:
            return
        walk(node.left, depth + 1)
        ordered.append((node.key, depth))
        walk(node.right, depth + 1)

    walk(root, 0)
    if not ordered:
        return {}

    step = width / (len(ordered) + 1)
    return {key: (step * (i + 1), top + depth * level_height) for i, (key, depth) in enumerate(ordered)}

def tree_edges(root) -> List[Tuple[str, str]]:
    """Pares (pai, filho) da árvore, para desenhar as ligações."""
    edges = []
    stack = [root] if root else []
    while stack:
        node = stack.pop()
        for child in (node.left, node.right):
            if child is not None:
                edges.append((node.key, child.key))
                stack.append(child)
    return edges

def path_edges(path: List[str]) -> set:
    """Arestas consecutivas de um caminho, sem direção (para destacar no canvas)."""
    return {frozenset(pair) for pair in zip(path, path[1:])}
