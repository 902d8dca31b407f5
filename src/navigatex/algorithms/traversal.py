from collections import deque
from typing import List, Set
from src.navigatex.models.graph import LocationGraph

class GraphTraversal:
    """
    Percursos em largura (BFS) e profundidade (DFS) sobre o grafo de localidades.
    Ambos visitam apenas o que é alcançável a partir do início. O(V + E).
    """
    def __init__(self, graph: LocationGraph):
        self.graph = graph

    def bfs(self, start: str) -> List[str]:
        """Ordem por nível a partir de start; lista vazia se start não existir."""
        start_id = self.graph.get_location_id(start)
        if start_id is None:
            return []
        return [self.graph.get_name(location_id) for location_id in self._bfs_ids(start_id)]

    def dfs(self, start: str) -> List[str]:
        """Pré-ordem com pilha explícita a partir de start; lista vazia se start não existir."""
        start_id = self.graph.get_location_id(start)
        if start_id is None:
            return []
        return [self.graph.get_name(location_id) for location_id in self._dfs_ids(start_id)]

    def is_connected(self) -> bool:
        """
        BFS a partir da primeira localidade inserida.
        Grafo vazio é considerado conexo.
        """
        if self.graph.get_node_count() == 0:
            return True
        return len(self._bfs_ids(0)) == self.graph.get_node_count()

    def _bfs_ids(self, start_id: int) -> List[int]:
        visited = {start_id}
        frontier = deque([start_id])
        order = []

        while frontier:
            u = frontier.popleft()
            order.append(u)
            for road in self.graph.get_roads(u):
                if road.target not in visited:
                    visited.add(road.target)
                    frontier.append(road.target)
        return order

    def _dfs_ids(self, start_id: int) -> List[int]:
        # Pilha explícita: caminhos longos não estouram o limite de recursão
        visited: Set[int] = set()
        stack = [start_id]
        order = []

        while stack:
            u = stack.pop()
            if u in visited:
                continue
            visited.add(u)
            order.append(u)
            # Empilha ao contrário para visitar os vizinhos na ordem da lista
            for road in reversed(self.graph.get_roads(u)):
                if road.target not in visited:
                    stack.append(road.target)
        return order
