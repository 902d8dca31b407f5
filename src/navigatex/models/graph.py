from typing import Dict, List, Optional, Tuple
from src.navigatex.models.location import Location, normalize_name
from src.navigatex.models.edge import Road

class LocationGraph:
    """
    Grafo não direcionado e ponderado de localidades.
    Nomes são resolvidos sem diferenciar maiúsculas/minúsculas; a grafia da
    primeira inserção é a canônica.
    """
    def __init__(self):
        # Localidades em ordem de inserção: o índice na lista é o id
        self.locations: List[Location] = []

        # Índice normalizado para resolução O(1): {nome_normalizado: id}
        self._index: Dict[str, int] = {}

        # Lista de Adjacência para as conexões: {id: [Road, ...]}
        self.adj_list: Dict[int, List[Road]] = {}

    def add_location(self, name: str) -> int:
        """
        Adiciona uma localidade e retorna seu id.
        Se já existir uma com o mesmo nome (ignorando caixa), retorna o id existente.
        """
        self._validate_name(name)
        existing = self._resolve_id(name)
        if existing is not None:
            return existing

        location_id = len(self.locations)
        location = Location(location_id, name.strip())
        self.locations.append(location)
        self._index[location.lookup_key] = location_id
        self.adj_list[location_id] = [] # Inicializa lista de vizinhos vazia
        return location_id

    def add_edge(self, name_a: str, name_b: str, weight: int):
        """
        Cria (ou atualiza) uma estrada bidirecional entre duas localidades.
        Localidades ausentes são criadas. Toda validação acontece antes de
        qualquer alteração no grafo.
        """
        self._validate_name(name_a)
        self._validate_name(name_b)
        if isinstance(weight, bool) or not isinstance(weight, int) or weight <= 0:
            raise ValueError(f"O peso da estrada deve ser um inteiro positivo (recebido: {weight!r}).")
        if normalize_name(name_a) == normalize_name(name_b):
            raise ValueError(f"Laço não permitido: '{name_a}' não pode se conectar a si mesma.")

        u_id = self.add_location(name_a)
        v_id = self.add_location(name_b)

        road_uv = self._find_road(u_id, v_id)
        if road_uv is not None:
            # Estrada já existe: atualiza o peso nos dois sentidos
            road_uv.weight = weight
            self._find_road(v_id, u_id).weight = weight
            return

        # Sentido U -> V
        self.adj_list[u_id].append(Road(u_id, v_id, weight))
        # Sentido V -> U (mesmo peso)
        self.adj_list[v_id].append(Road(v_id, u_id, weight))

    # --- Consultas ---

    def has_location(self, name: str) -> bool:
        return self._resolve_id(name) is not None

    def get_actual_location_name(self, name: str) -> str:
        """Retorna a grafia canônica, ou o próprio nome se ele não existir."""
        location = self.get_location(name)
        return location.name if location else name

    def get_location(self, name: str) -> Optional[Location]:
        location_id = self._resolve_id(name)
        if location_id is None:
            return None
        return self.locations[location_id]

    def get_location_id(self, name: str) -> Optional[int]:
        return self._resolve_id(name)

    def get_name(self, location_id: int) -> str:
        return self.locations[location_id].name

    def get_locations(self) -> List[str]:
        return [location.name for location in self.locations]

    def get_roads(self, location_id: int) -> List[Road]:
        """Retorna todas as estradas que saem de uma localidade (por id)."""
        return self.adj_list.get(location_id, [])

    def get_neighbors(self, name: str) -> List[Tuple[str, int]]:
        """Vizinhos de uma localidade como pares (nome, peso); vazio se não existir."""
        location_id = self._resolve_id(name)
        if location_id is None:
            return []
        return [(self.get_name(road.target), road.weight) for road in self.adj_list[location_id]]

    def get_edge_weight(self, name_a: str, name_b: str) -> Optional[int]:
        u_id = self._resolve_id(name_a)
        v_id = self._resolve_id(name_b)
        if u_id is None or v_id is None:
            return None
        road = self._find_road(u_id, v_id)
        return road.weight if road else None

    def get_edges(self) -> List[Tuple[str, str, int]]:
        """Cada estrada uma única vez, como (nome_a, nome_b, peso)."""
        edges = []
        for u_id, roads in self.adj_list.items():
            for road in roads:
                # 1-2 é igual a 2-1: emite só a partir do menor id
                if road.source < road.target:
                    edges.append((self.get_name(road.source), self.get_name(road.target), road.weight))
        return edges

    def get_node_count(self) -> int:
        return len(self.locations)

    def get_edge_count(self) -> int:
        return sum(len(roads) for roads in self.adj_list.values()) // 2

    def reset(self):
        """Limpa todo o estado do grafo."""
        self.locations = []
        self._index = {}
        self.adj_list = {}

    # --- Algoritmos (delegam para src.navigatex.algorithms) ---

    def shortest_path(self, source: str, dest: str, verbose: bool = False):
        from src.navigatex.algorithms.routing import ShortestPathRouter
        return ShortestPathRouter(self).find_shortest_path(source, dest, verbose=verbose)

    def bfs(self, start: str) -> List[str]:
        from src.navigatex.algorithms.traversal import GraphTraversal
        return GraphTraversal(self).bfs(start)

    def dfs(self, start: str) -> List[str]:
        from src.navigatex.algorithms.traversal import GraphTraversal
        return GraphTraversal(self).dfs(start)

    def is_connected(self) -> bool:
        from src.navigatex.algorithms.traversal import GraphTraversal
        return GraphTraversal(self).is_connected()

    # --- Auxiliares ---

    def _resolve_id(self, name) -> Optional[int]:
        if not isinstance(name, str):
            return None
        return self._index.get(normalize_name(name))

    def _find_road(self, u_id: int, v_id: int) -> Optional[Road]:
        for road in self.adj_list.get(u_id, []):
            if road.target == v_id:
                return road
        return None

    def _validate_name(self, name):
        if not isinstance(name, str) or not name.strip():
            raise ValueError("O nome da localidade deve ser uma string não vazia.")
