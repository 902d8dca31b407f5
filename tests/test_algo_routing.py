import sys
import os
import random

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import numpy as np

from src.navigatex.models.graph import LocationGraph
from src.navigatex.algorithms.routing import ShortestPathRouter, PathResult

def test_dijkstra_routing():
    print("--- Iniciando Teste do Roteamento Dijkstra ---")

    # 1. Setup: a estrada direta não é a mais curta
    graph = LocationGraph()
    for name in ["A", "B", "C", "D"]:
        graph.add_location(name)
    graph.add_edge("A", "B", 1400)
    graph.add_edge("A", "C", 850)
    graph.add_edge("B", "C", 2150)
    graph.add_edge("C", "D", 350)

    # 2. Executa o Roteador
    router = ShortestPathRouter(graph)
    print("Buscando rota de A para D...")
    result = router.find_shortest_path("A", "D", verbose=True)
    print(f"Rota Encontrada: {result.path} | Distância: {result.distance}")

    # 3. Validação
    assert result.found
    assert result.path == ["A", "C", "D"], f"Erro: caminho errado: {result.path}"
    assert result.distance == 1200, f"Erro: distância errada: {result.distance}"
    print(">> SUCESSO: Dijkstra encontrou A -> C -> D com distância 1200.")

def test_unreachable_destination_is_not_found():
    graph = LocationGraph()
    graph.add_edge("A", "B", 5)
    graph.add_location("X")

    result = graph.shortest_path("A", "X")
    assert not result.found
    assert result.path == []
    assert result.distance == PathResult.NO_PATH

def test_unknown_locations_are_not_found():
    graph = LocationGraph()
    graph.add_edge("A", "B", 5)

    for src, dst in [("A", "Z"), ("Z", "A"), ("Y", "Z")]:
        result = graph.shortest_path(src, dst)
        assert not result.found, f"{src} -> {dst} deveria ser não-encontrado"
        assert result.path == []

    assert graph.get_node_count() == 2, "Consultas não podem criar localidades"

def test_same_source_and_destination():
    graph = LocationGraph()
    graph.add_edge("Mumbai", "Pune", 150)
    result = graph.shortest_path("mumbai", "MUMBAI")
    assert result.path == ["Mumbai"]
    assert result.distance == 0

def test_lookup_is_case_insensitive_and_returns_canonical_names():
    graph = LocationGraph()
    graph.add_edge("Mumbai", "Delhi", 1400)
    graph.add_edge("Mumbai", "Bangalore", 850)
    graph.add_edge("Bangalore", "Chennai", 350)

    result = graph.shortest_path("MUMBAI", "chennai")
    assert result.path == ["Mumbai", "Bangalore", "Chennai"]
    assert result.distance == 1200

def test_stale_queue_entries_are_skipped():
    """B entra na fila com 10 e depois com 2; a entrada antiga deve ser descartada."""
    graph = LocationGraph()
    graph.add_edge("A", "B", 10)
    graph.add_edge("A", "C", 1)
    graph.add_edge("C", "B", 1)
    graph.add_edge("B", "D", 1)

    result = graph.shortest_path("A", "D")
    assert result.path == ["A", "C", "B", "D"]
    assert result.distance == 3

def test_weight_update_changes_route():
    graph = LocationGraph()
    graph.add_edge("A", "B", 1)
    graph.add_edge("B", "C", 1)
    graph.add_edge("A", "C", 5)
    assert graph.shortest_path("A", "C").path == ["A", "B", "C"]

    graph.add_edge("A", "C", 1)
    result = graph.shortest_path("A", "C")
    assert result.path == ["A", "C"]
    assert result.distance == 1

def floyd_warshall(graph: LocationGraph) -> np.ndarray:
    """Referência O(V^3) com numpy para comparar as distâncias do Dijkstra."""
    n = graph.get_node_count()
    dist = np.full((n, n), np.inf)
    np.fill_diagonal(dist, 0)
    for u_id, roads in graph.adj_list.items():
        for road in roads:
            dist[u_id, road.target] = road.weight
    for k in range(n):
        dist = np.minimum(dist, dist[:, [k]] + dist[[k], :])
    return dist

def test_dijkstra_matches_floyd_warshall_on_random_graphs():
    print("--- Teste: Dijkstra x Floyd-Warshall ---")
    rng = random.Random(7)

    for _ in range(5):
        graph = LocationGraph()
        names = [f"L{i}" for i in range(25)]
        for name in names:
            graph.add_location(name)
        for _ in range(40):
            a, b = rng.sample(names, 2)
            graph.add_edge(a, b, rng.randint(1, 100))

        reference = floyd_warshall(graph)
        for src in rng.sample(names, 5):
            for dst in names:
                result = graph.shortest_path(src, dst)
                expected = reference[graph.get_location_id(src), graph.get_location_id(dst)]
                if np.isinf(expected):
                    assert not result.found
                    continue

                assert result.distance == int(expected), f"{src}->{dst}: {result.distance} != {expected}"
                assert result.path[0] == src and result.path[-1] == dst
                walked = sum(graph.get_edge_weight(a, b) for a, b in zip(result.path, result.path[1:]))
                assert walked == result.distance, "A soma das estradas do caminho deve bater com a distância"

    print(">> SUCESSO: Distâncias conferem com a referência.")

if __name__ == "__main__":
    test_dijkstra_routing()
    test_dijkstra_matches_floyd_warshall_on_random_graphs()
