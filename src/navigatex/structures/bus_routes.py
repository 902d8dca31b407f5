from typing import Dict, List, Optional

class Stop:
    """Parada de ônibus (nó da lista encadeada)."""
    def __init__(self, name: str):
        self.name = name
        self.next: Optional["Stop"] = None

class BusRoute:
    """
    Linha de ônibus como lista simplesmente encadeada de paradas.
    Inserção no fim, remoção e inversão em O(n).
    """
    def __init__(self, route_name: str):
        self.route_name = route_name
        self.head: Optional[Stop] = None

    def add_stop(self, name: str):
        node = Stop(name)
        if not self.head:
            self.head = node
            return

        cur = self.head
        while cur.next:
            cur = cur.next
        cur.next = node

    def delete_stop(self, name: str) -> bool:
        """Remove a primeira ocorrência da parada. False se ela não existir."""
        if not self.head:
            return False

        if self.head.name == name:
            self.head = self.head.next
            return True

        cur = self.head
        while cur.next and cur.next.name != name:
            cur = cur.next

        if not cur.next:
            return False
        cur.next = cur.next.next
        return True

    def reverse_route(self):
        """Inverte os ponteiros no próprio lugar."""
        prev = None
        cur = self.head
        while cur:
            nxt = cur.next
            cur.next = prev
            prev = cur
            cur = nxt
        self.head = prev

    def has_stop(self, name: str) -> bool:
        return name in self.get_stops()

    def get_stops(self) -> List[str]:
        stops = []
        cur = self.head
        while cur:
            stops.append(cur.name)
            cur = cur.next
        return stops

    def size(self) -> int:
        count = 0
        cur = self.head
        while cur:
            count += 1
            cur = cur.next
        return count

    def __repr__(self):
        return f"BusRoute({self.route_name}: {' -> '.join(self.get_stops())})"

class BusRouteManager:
    """
    Gerencia as linhas pelo nome.
    Operações sobre linhas inexistentes retornam False (ou lista vazia).
    """
    def __init__(self):
        self._routes: Dict[str, BusRoute] = {}

    def add_route(self, route_name: str) -> bool:
        self._validate_name(route_name, "linha")
        if route_name in self._routes:
            return False
        self._routes[route_name] = BusRoute(route_name)
        return True

    def add_stop_to_route(self, route_name: str, stop_name: str) -> bool:
        """False se a linha não existir ou se a parada já estiver nela."""
        self._validate_name(stop_name, "parada")
        route = self._routes.get(route_name)
        if route is None or route.has_stop(stop_name):
            return False
        route.add_stop(stop_name)
        return True

    def delete_stop_from_route(self, route_name: str, stop_name: str) -> bool:
        route = self._routes.get(route_name)
        if route is None:
            return False
        return route.delete_stop(stop_name)

    def delete_route(self, route_name: str) -> bool:
        return self._routes.pop(route_name, None) is not None

    def reverse_route(self, route_name: str) -> bool:
        route = self._routes.get(route_name)
        if route is None:
            return False
        route.reverse_route()
        return True

    def get_all_route_names(self) -> List[str]:
        return list(self._routes.keys())

    def get_route_stops(self, route_name: str) -> List[str]:
        route = self._routes.get(route_name)
        return route.get_stops() if route else []

    def clear(self):
        self._routes.clear()

    @staticmethod
    def _validate_name(name, label: str):
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"O nome da {label} deve ser uma string não vazia.")
