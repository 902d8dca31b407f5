from collections import deque
from dataclasses import dataclass
from typing import Dict, List, Optional

class TrafficLevel:
    """Intensidade do trânsito reportada para uma rota."""
    LOW = 1
    MEDIUM = 2
    HIGH = 3

    @staticmethod
    def name_of(level: int) -> str:
        return {1: "LOW", 2: "MEDIUM", 3: "HIGH"}.get(level, "UNKNOWN")

@dataclass
class TrafficUpdate:
    route_name: str
    level: int = TrafficLevel.LOW

    def __repr__(self):
        return f"[{TrafficLevel.name_of(self.level)}] {self.route_name}"

class TrafficManager:
    """
    Fila FIFO de atualizações de trânsito.
    Enfileirar e desenfileirar em O(1); a ordem de chegada é sempre respeitada,
    independentemente do nível.
    """
    def __init__(self):
        self._queue = deque()
        self._processed: List[TrafficUpdate] = []
        self.current_traffic: Dict[str, int] = {}

    def push_update(self, update: TrafficUpdate):
        if not isinstance(update.route_name, str) or not update.route_name.strip():
            raise ValueError("O nome da rota deve ser uma string não vazia.")
        level = update.level
        if isinstance(level, bool) or not isinstance(level, int) \
                or level not in (TrafficLevel.LOW, TrafficLevel.MEDIUM, TrafficLevel.HIGH):
            raise ValueError(f"Nível de trânsito inválido: {update.level!r}")
        self._queue.append(update)

    def dequeue(self) -> Optional[TrafficUpdate]:
        """Processa apenas a atualização mais antiga. None se a fila estiver vazia."""
        if not self._queue:
            return None
        update = self._queue.popleft()
        self.current_traffic[update.route_name] = update.level
        self._processed.append(update)
        return update

    def process_updates(self) -> int:
        """Esvazia a fila aplicando cada atualização. Retorna quantas foram processadas."""
        count = 0
        while self._queue:
            self.dequeue()
            count += 1
        return count

    def peek(self) -> Optional[TrafficUpdate]:
        return self._queue[0] if self._queue else None

    def get_current_level(self, route_name: str) -> Optional[int]:
        return self.current_traffic.get(route_name)

    def get_pending(self) -> List[TrafficUpdate]:
        return list(self._queue)

    def get_processed(self) -> List[TrafficUpdate]:
        return list(self._processed)

    def queue_size(self) -> int:
        return len(self._queue)

    def is_empty(self) -> bool:
        return len(self._queue) == 0

    def clear(self):
        """Descarta as pendentes, o histórico e o estado atual."""
        self._queue.clear()
        self._processed.clear()
        self.current_traffic.clear()
