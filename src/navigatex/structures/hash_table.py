from typing import List, Optional, Tuple

class HashNode:
    """Elo da cadeia de um bucket."""
    def __init__(self, key: str, value: int):
        self.key = key
        self.value = value
        self.next: Optional["HashNode"] = None

class CustomHashTable:
    """
    Tabela hash com encadeamento separado (chaining).
    Complexidade: O(1) médio, O(n) no pior caso (todas as chaves no mesmo bucket).
    A capacidade dobra quando o fator de carga atinge LOAD_FACTOR_THRESHOLD.
    """
    DEFAULT_CAPACITY = 16
    LOAD_FACTOR_THRESHOLD = 0.75
    _HASH_MASK = 0xFFFFFFFFFFFFFFFF  # Aritmética de 64 bits sem sinal

    def __init__(self, initial_capacity: int = DEFAULT_CAPACITY):
        if isinstance(initial_capacity, bool) or not isinstance(initial_capacity, int) or initial_capacity <= 0:
            raise ValueError("A capacidade da tabela deve ser maior que zero.")

        self.capacity = initial_capacity
        self.size = 0
        self.table: List[Optional[HashNode]] = [None] * initial_capacity

    def insert(self, key: str, value: int) -> bool:
        """
        Insere uma chave nova (True) ou sobrescreve o valor de uma existente (False).
        """
        self._validate_key(key)
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"O valor da chave '{key}' deve ser um inteiro.")

        existing = self._find_node(key)
        if existing:
            existing.value = value
            return False

        if self.size / self.capacity >= self.LOAD_FACTOR_THRESHOLD:
            self._rehash()

        # Novo nó entra na cabeça da cadeia
        index = self._hash_function(key)
        new_node = HashNode(key, value)
        new_node.next = self.table[index]
        self.table[index] = new_node
        self.size += 1
        return True

    def search(self, key: str) -> Optional[int]:
        node = self._find_node(key)
        return node.value if node else None

    def remove(self, key: str) -> bool:
        if not isinstance(key, str):
            return False
        index = self._hash_function(key)
        node = self.table[index]
        prev = None

        while node:
            if node.key == key:
                if prev:
                    prev.next = node.next
                else:
                    self.table[index] = node.next
                self.size -= 1
                return True
            prev = node
            node = node.next

        return False

    def get_size(self) -> int:
        return self.size

    def get_capacity(self) -> int:
        return self.capacity

    def get_load_factor(self) -> float:
        return self.size / self.capacity

    def is_empty(self) -> bool:
        return self.size == 0

    def get_all_entries(self) -> List[Tuple[str, int]]:
        """Todos os pares na ordem dos buckets e, dentro de cada um, da cadeia."""
        return [entry for bucket in self.get_buckets() for entry in bucket]

    def get_buckets(self) -> List[List[Tuple[str, int]]]:
        """Retrato de cada bucket (usado pela visualização)."""
        buckets = []
        for head in self.table:
            chain = []
            node = head
            while node:
                chain.append((node.key, node.value))
                node = node.next
            buckets.append(chain)
        return buckets

    def _find_node(self, key) -> Optional[HashNode]:
        if not isinstance(key, str):
            return None
        node = self.table[self._hash_function(key)]
        while node:
            if node.key == key:
                return node
            node = node.next
        return None

    def _hash_function(self, key: str) -> int:
        # djb2: h = h * 33 + c
        h = 5381
        for byte in key.encode("utf-8"):
            h = ((h << 5) + h + byte) & self._HASH_MASK
        return h % self.capacity

    def _rehash(self):
        old_table = self.table
        self.capacity *= 2
        self.table = [None] * self.capacity

        for head in old_table:
            node = head
            while node:
                next_node = node.next
                new_index = self._hash_function(node.key)
                node.next = self.table[new_index]
                self.table[new_index] = node
                node = next_node

    def _validate_key(self, key):
        if not isinstance(key, str) or not key:
            raise ValueError("A chave deve ser uma string não vazia.")

    def __repr__(self):
        return (f"CustomHashTable(size={self.size}, capacity={self.capacity}, "
                f"load_factor={self.get_load_factor():.2f})")
