import sys
import os

# Adiciona o diretório raiz ao path para conseguir importar 'src'
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest

from src.navigatex.models.graph import LocationGraph

def build_india_graph() -> LocationGraph:
    graph = LocationGraph()
    for city in ["Mumbai", "Delhi", "Bangalore", "Chennai"]:
        graph.add_location(city)
    graph.add_edge("Mumbai", "Delhi", 1400)
    graph.add_edge("Mumbai", "Bangalore", 850)
    graph.add_edge("Delhi", "Bangalore", 2150)
    graph.add_edge("Bangalore", "Chennai", 350)
    return graph

def assert_symmetric(graph: LocationGraph):
    for u_id, roads in graph.adj_list.items():
        for road in roads:
            back = [r for r in graph.adj_list[road.target] if r.target == u_id]
            assert len(back) == 1, f"Estrada {u_id}->{road.target} sem o sentido inverso"
            assert back[0].weight == road.weight, "Pesos diferentes nos dois sentidos"

def test_create_simple_graph():
    print("--- Iniciando Teste do Grafo ---")
    graph = build_india_graph()

    print(f"Localidades: {graph.get_node_count()} | Estradas: {graph.get_edge_count()}")
    assert graph.get_node_count() == 4
    assert graph.get_edge_count() == 4
    assert graph.get_locations() == ["Mumbai", "Delhi", "Bangalore", "Chennai"]
    assert graph.get_neighbors("Bangalore") == [("Mumbai", 850), ("Delhi", 2150), ("Chennai", 350)]
    assert_symmetric(graph)
    print(">> SUCESSO: Grafo criado e simétrico.")

def test_location_ids_are_sequential_and_case_insensitive():
    graph = LocationGraph()
    first = graph.add_location("Mumbai")
    second = graph.add_location("mumbai")
    third = graph.add_location("MUMBAI")

    assert first == second == third == 0, "Mesmo nome (ignorando caixa) deve manter o mesmo id"
    assert graph.add_location("Delhi") == 1
    assert graph.get_node_count() == 2

    # A grafia da primeira inserção é a canônica
    assert graph.get_actual_location_name("mUmBaI") == "Mumbai"
    assert graph.get_actual_location_name("Pune") == "Pune", "Nome desconhecido volta inalterado"
    assert graph.has_location("DELHI")
    assert not graph.has_location("Pune")
    assert graph.get_location("delhi").id == 1

def test_edge_update_is_idempotent():
    graph = LocationGraph()
    graph.add_edge("A", "B", 100)
    graph.add_edge("b", "a", 200)

    assert graph.get_edge_count() == 1, "Re-adicionar o par não pode duplicar a estrada"
    assert graph.get_edge_weight("A", "B") == 200
    assert graph.get_edge_weight("B", "A") == 200
    assert len(graph.get_roads(0)) == 1 and len(graph.get_roads(1)) == 1
    assert_symmetric(graph)

def test_add_edge_creates_missing_locations():
    graph = LocationGraph()
    graph.add_edge("Pune", "Nagpur", 700)
    assert graph.get_locations() == ["Pune", "Nagpur"]
    assert graph.get_edges() == [("Pune", "Nagpur", 700)]

def test_invalid_edges_are_rejected_before_mutation():
    graph = build_india_graph()
    snapshot = (graph.get_locations(), graph.get_edges())

    for bad_weight in [0, -5, 2.5, "10", True, None]:
        with pytest.raises(ValueError):
            graph.add_edge("Mumbai", "Pune", bad_weight)

    with pytest.raises(ValueError, match="Laço"):
        graph.add_edge("Mumbai", "mumbai", 10)
    with pytest.raises(ValueError, match="Laço"):
        graph.add_edge("Goa", "GOA", 10)

    with pytest.raises(ValueError):
        graph.add_edge("", "Delhi", 10)
    with pytest.raises(ValueError):
        graph.add_location("   ")

    assert (graph.get_locations(), graph.get_edges()) == snapshot, "Erro de validação alterou o grafo"
    assert not graph.has_location("Pune") and not graph.has_location("Goa")

def test_unknown_names_report_not_found():
    graph = build_india_graph()
    assert graph.get_location("Pune") is None
    assert graph.get_location_id("Pune") is None
    assert graph.get_neighbors("Pune") == []
    assert graph.get_edge_weight("Mumbai", "Pune") is None
    assert graph.get_edge_weight("Mumbai", "Chennai") is None, "Não há estrada direta"

def test_get_edges_lists_each_road_once():
    graph = build_india_graph()
    edges = graph.get_edges()
    assert len(edges) == graph.get_edge_count()
    assert ("Bangalore", "Chennai", 350) in edges
    assert ("Chennai", "Bangalore", 350) not in edges

def test_reset_clears_everything():
    graph = build_india_graph()
    graph.reset()
    assert graph.get_node_count() == 0
    assert graph.get_edge_count() == 0
    assert not graph.has_location("Mumbai")
    assert graph.add_location("Chennai") == 0, "Após reset os ids recomeçam do zero"

if __name__ == "__main__":
    test_create_simple_graph()
