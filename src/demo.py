# src/demo.py
import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.navigatex.workspace import DSAWorkspace
from src.navigatex.structures.traffic_queue import TrafficUpdate, TrafficLevel

def print_sequence(values, label: str = ""):
    prefix = f"{label}: " if label else ""
    print(prefix + " -> ".join(values))

def demonstrate_hash_map(ws: DSAWorkspace):
    print("\n=== HASH MAP (Cadastro de Usuários) ===")
    ws.users.add_user("U001", "Alice")
    ws.users.add_user("U002", "Bob")
    ws.users.add_user("U003", "Charlie")
    print(f"Usuários cadastrados: {ws.users.size()}")

    found = ws.users.find_user("U002")
    if found:
        print(f"Encontrado: {found.name}")

    ws.users.remove_user("U001")
    print(f"Após remoção: {ws.users.size()} usuários")

def demonstrate_trie(ws: DSAWorkspace):
    print("\n=== TRIE (Auto-Completar) ===")
    for city in ["Mumbai", "Delhi", "Bangalore", "Chennai", "Mysore"]:
        ws.trie.insert(city)
    print("Inseridos: Mumbai, Delhi, Bangalore, Chennai, Mysore")

    print_sequence(ws.trie.suggest("M"), "Sugestões para 'M'")
    print_sequence(ws.trie.suggest("Ban"), "Sugestões para 'Ban'")

def demonstrate_graph(ws: DSAWorkspace):
    print("\n=== GRAFO (Dijkstra, BFS, DFS) ===")
    g = ws.graph
    for city in ["Mumbai", "Delhi", "Bangalore", "Chennai"]:
        g.add_location(city)

    g.add_edge("Mumbai", "Delhi", 1400)
    g.add_edge("Mumbai", "Bangalore", 850)
    g.add_edge("Delhi", "Bangalore", 2150)
    g.add_edge("Bangalore", "Chennai", 350)
    print(f"Grafo: {g.get_node_count()} localidades, {g.get_edge_count()} estradas")

    print_sequence(g.bfs("Mumbai"), "BFS a partir de Mumbai")
    print_sequence(g.dfs("Mumbai"), "DFS a partir de Mumbai")

    result = g.shortest_path("Mumbai", "Chennai")
    if result.found:
        print_sequence(result.path, "Menor caminho (Dijkstra)")
        print(f"Distância: {result.distance}")
    print(f"Conexo: {'Sim' if g.is_connected() else 'Não'}")

def demonstrate_linked_list(ws: DSAWorkspace):
    print("\n=== LISTA ENCADEADA (Linhas de Ônibus) ===")
    ws.bus_routes.add_route("Route101")
    for stop in ["Stop1", "Stop2", "Stop3"]:
        ws.bus_routes.add_stop_to_route("Route101", stop)
    print_sequence(ws.bus_routes.get_route_stops("Route101"), "Paradas")

    ws.bus_routes.reverse_route("Route101")
    print_sequence(ws.bus_routes.get_route_stops("Route101"), "Após inversão")

def demonstrate_queue(ws: DSAWorkspace):
    print("\n=== FILA FIFO (Atualizações de Trânsito) ===")
    ws.traffic.push_update(TrafficUpdate("Route1", TrafficLevel.HIGH))
    ws.traffic.push_update(TrafficUpdate("Route2", TrafficLevel.MEDIUM))
    ws.traffic.push_update(TrafficUpdate("Route3", TrafficLevel.LOW))
    print(f"Tamanho da fila: {ws.traffic.queue_size()}")

    processed = ws.traffic.process_updates()
    print(f"Processadas {processed} atualizações")
    print(f"Fila vazia: {'Sim' if ws.traffic.is_empty() else 'Não'}")

def demonstrate_avl_tree(ws: DSAWorkspace):
    print("\n=== ÁRVORE AVL ===")
    for key, value in [("Mumbai", 100), ("Delhi", 200), ("Bangalore", 300), ("Chennai", 400), ("Kolkata", 500)]:
        ws.avl.insert(key, value)
    print("Inseridas 5 localidades")
    print("Estrutura da árvore:")
    for line in ws.avl.render():
        print(line)

    ordered = " ".join(f"{k}({v})" for k, v in ws.avl.inorder_traversal())
    print(f"Percurso in-order (ordenado): {ordered}")

    value = ws.avl.search("Bangalore")
    if value is not None:
        print(f"Encontrado Bangalore: {value}")

def print_hash_table(ws: DSAWorkspace):
    print(ws.hash_table)
    for index, chain in enumerate(ws.hash_table.get_buckets()):
        if chain:
            print(f"Bucket {index}: " + " -> ".join(f"[{k}:{v}]" for k, v in chain))

def demonstrate_custom_hash_table(ws: DSAWorkspace):
    print("\n=== TABELA HASH COM ENCADEAMENTO ===")
    for key, value in [("Mumbai", 100), ("Delhi", 200), ("Bangalore", 300), ("Chennai", 400)]:
        ws.hash_table.insert(key, value)
    print("Inseridas 4 entradas")
    print_hash_table(ws)

    value = ws.hash_table.search("Delhi")
    if value is not None:
        print(f"Encontrado Delhi: {value}")

    ws.hash_table.remove("Chennai")
    print("\nApós remover Chennai:")
    print_hash_table(ws)

def run_all_demonstrations(ws: DSAWorkspace = None):
    ws = ws or DSAWorkspace(hash_table_capacity=8)

    print("=" * 40)
    print("  DEMONSTRAÇÃO DAS ESTRUTURAS DE DADOS")
    print("=" * 40)

    demonstrate_hash_map(ws)
    demonstrate_trie(ws)
    demonstrate_graph(ws)
    demonstrate_linked_list(ws)
    demonstrate_queue(ws)
    demonstrate_avl_tree(ws)
    demonstrate_custom_hash_table(ws)

    print("\n" + "=" * 40)
    print("  DEMONSTRAÇÃO CONCLUÍDA")
    print("=" * 40)
    return ws

if __name__ == "__main__":
    run_all_demonstrations()
