import heapq
from dataclasses import dataclass, field
from typing import List, Dict
from src.navigatex.models.graph import LocationGraph

@dataclass
class PathResult:
    """
    Resultado de uma consulta de menor caminho.
    Quando não há caminho: path vazio e distance == PathResult.NO_PATH.
    """
    NO_PATH = -1

    path: List[str] = field(default_factory=list)
    distance: int = NO_PATH

    @property
    def found(self) -> bool:
        return self.distance != PathResult.NO_PATH

class ShortestPathRouter:
    """
    Implementa o algoritmo de Dijkstra para encontrar a rota de menor distância.
    Complexidade: O((V + E) log V) com heap binário.
    """
    def __init__(self, graph: LocationGraph):
        self.graph = graph

    def find_shortest_path(self, source: str, dest: str, verbose: bool = False) -> PathResult:
        """
        Executa o Dijkstra entre duas localidades (nomes sem diferenciar caixa).
        Args:
            verbose: Se True, imprime o passo a passo da decisão.
        """
        start_id = self.graph.get_location_id(source)
        target_id = self.graph.get_location_id(dest)

        if start_id is None or target_id is None:
            if verbose: print("Erro: Localidades inválidas.")
            return PathResult()

        if verbose:
            print(f"\n[DIJKSTRA START] Buscando rota de {self.graph.get_name(start_id)} "
                  f"para {self.graph.get_name(target_id)}")

        dist: Dict[int, float] = {location_id: float('inf') for location_id in self.graph.adj_list}
        dist[start_id] = 0
        came_from: Dict[int, int] = {}
        visited = set()

        open_set = [(0, start_id)]

        while open_set:
            current_dist, current_id = heapq.heappop(open_set)

            # Entrada obsoleta: o nó já foi finalizado com uma distância menor
            if current_id in visited:
                continue
            visited.add(current_id)

            if verbose:
                print(f"\n  > Finalizando {self.graph.get_name(current_id)} (distância: {current_dist})")

            if current_id == target_id:
                break

            for road in self.graph.get_roads(current_id):
                neighbor_id = road.target
                tentative = dist[current_id] + road.weight

                if tentative < dist[neighbor_id]:
                    dist[neighbor_id] = tentative
                    came_from[neighbor_id] = current_id
                    heapq.heappush(open_set, (tentative, neighbor_id))

                    if verbose:
                        print(f"    - Relaxando {self.graph.get_name(neighbor_id)}: nova distância = {tentative}")

        if dist[target_id] == float('inf'):
            if verbose: print("[DIJKSTRA FAIL] Caminho não encontrado.")
            return PathResult()

        path = [self.graph.get_name(location_id) for location_id in self._reconstruct_path(came_from, target_id)]
        if verbose:
            print(f"[DIJKSTRA SUCCESS] {' -> '.join(path)} | Distância: {dist[target_id]}")
        return PathResult(path=path, distance=int(dist[target_id]))

    def _reconstruct_path(self, came_from: Dict[int, int], current_id: int) -> List[int]:
        path = [current_id]
        while current_id in came_from:
            current_id = came_from[current_id]
            path.append(current_id)
        return path[::-1]
