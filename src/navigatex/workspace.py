from src.navigatex.models.graph import LocationGraph
from src.navigatex.structures.avl_tree import AVLTree
from src.navigatex.structures.bus_routes import BusRouteManager
from src.navigatex.structures.hash_table import CustomHashTable
from src.navigatex.structures.traffic_queue import TrafficManager
from src.navigatex.structures.trie import Trie
from src.navigatex.structures.user_registry import UserSystem

class DSAWorkspace:
    """
    Dona das instâncias de cada estrutura durante uma sessão (demo ou interface).
    Quem orquestra recebe o workspace explicitamente; não há estado global.
    """
    def __init__(self, hash_table_capacity: int = CustomHashTable.DEFAULT_CAPACITY):
        self.hash_table_capacity = hash_table_capacity
        self.reset_all()

    def reset_all(self):
        """Recria todas as estruturas vazias."""
        self.users = UserSystem()
        self.trie = Trie()
        self.graph = LocationGraph()
        self.bus_routes = BusRouteManager()
        self.traffic = TrafficManager()
        self.avl = AVLTree()
        self.hash_table = CustomHashTable(self.hash_table_capacity)

    def summary(self) -> dict:
        return {
            'users': self.users.size(),
            'trie_words': self.trie.word_count(),
            'locations': self.graph.get_node_count(),
            'roads': self.graph.get_edge_count(),
            'bus_routes': len(self.bus_routes.get_all_route_names()),
            'pending_traffic': self.traffic.queue_size(),
            'avl_entries': len(self.avl),
            'hash_entries': self.hash_table.get_size()
        }
