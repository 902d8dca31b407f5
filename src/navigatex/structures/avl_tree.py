from typing import List, Optional, Tuple


class AVLNode:
    """
    Nó interno da Árvore AVL.
    Armazena a chave (nome da localidade), o valor inteiro e a altura.
    """
    def __init__(self, key: str, value: int):
        self.key = key
        self.value = value
        self.left: Optional["AVLNode"] = None
        self.right: Optional["AVLNode"] = None
        self.height = 1         # Altura inicial do nó é 1


class AVLTree:
    """
    Mapa ordenado chave -> valor sobre uma Árvore AVL.
    Garante inserção, busca e remoção em O(log n) por meio de rotações.

    Invariantes mantidas após toda operação:
    - |altura(esq) - altura(dir)| <= 1 em todos os nós
    - chaves da subárvore esquerda < chave do nó < chaves da subárvore direita
    """
    def __init__(self):
        self.root: Optional[AVLNode] = None
        self._size = 0

    # --- API Pública ---

    def insert(self, key: str, value: int):
        """
        Insere (ou atualiza) uma chave e rebalanceia a árvore automaticamente.
        Chave já existente: apenas o valor é sobrescrito, sem rotações.
        """
        self._validate_key(key)
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"O valor da chave '{key}' deve ser um inteiro.")
        self.root = self._insert_recursive(self.root, key, value)

    def search(self, key: str) -> Optional[int]:
        """Busca uma chave em O(log n). Retorna o valor ou None."""
        node = self._find_node(key)
        return node.value if node else None

    def remove(self, key: str) -> bool:
        """
        Remove uma chave. Retorna False (sem alterar nada) se ela não existir.
        """
        if self._find_node(key) is None:
            return False
        self.root = self._delete_recursive(self.root, key)
        self._size -= 1
        return True

    def inorder_traversal(self) -> List[Tuple[str, int]]:
        """Retorna todos os pares (chave, valor) em ordem crescente de chave. O(n)."""
        result: List[Tuple[str, int]] = []
        self._in_order(self.root, result)
        return result

    def is_empty(self) -> bool:
        return self.root is None

    def height(self) -> int:
        return self._get_height(self.root)

    def clear(self):
        self.root = None
        self._size = 0

    def render(self) -> List[str]:
        """
        Desenho textual da árvore "deitada": subárvore direita em cima,
        quatro espaços de recuo por nível.
        """
        if not self.root:
            return ["(Empty tree)"]
        lines: List[str] = []
        self._render_recursive(self.root, 0, lines)
        return lines

    def __len__(self):
        return self._size

    def __contains__(self, key):
        return self._find_node(key) is not None

    # --- Inserção ---

    def _insert_recursive(self, node: Optional[AVLNode], key: str, value: int) -> AVLNode:
        # 1. Inserção normal de BST (Binary Search Tree)
        if not node:
            self._size += 1
            return AVLNode(key, value)

        if key < node.key:
            node.left = self._insert_recursive(node.left, key, value)
        elif key > node.key:
            node.right = self._insert_recursive(node.right, key, value)
        else:
            # Chaves duplicadas não são permitidas, atualizamos o valor
            node.value = value
            return node

        # 2. Atualizar altura do nó ancestral
        node.height = 1 + max(self._get_height(node.left), self._get_height(node.right))

        # 3. Obter o fator de balanceamento para verificar se houve desequilíbrio
        balance = self._get_balance(node)

        # 4. Na inserção, a chave inserida decide o caso de rotação

        # Caso 1 - Rotação à Direita (Left-Left Case)
        if balance > 1 and key < node.left.key:
            return self._rotate_right(node)

        # Caso 2 - Rotação à Esquerda (Right-Right Case)
        if balance < -1 and key > node.right.key:
            return self._rotate_left(node)

        # Caso 3 - Rotação Dupla à Direita (Left-Right Case)
        if balance > 1 and key > node.left.key:
            node.left = self._rotate_left(node.left)
            return self._rotate_right(node)

        # Caso 4 - Rotação Dupla à Esquerda (Right-Left Case)
        if balance < -1 and key < node.right.key:
            node.right = self._rotate_right(node.right)
            return self._rotate_left(node)

        return node

    # --- Remoção ---

    def _delete_recursive(self, node: Optional[AVLNode], key: str) -> Optional[AVLNode]:
        if not node:
            return node

        if key < node.key:
            node.left = self._delete_recursive(node.left, key)
        elif key > node.key:
            node.right = self._delete_recursive(node.right, key)
        else:
            # Folha ou um único filho: o filho (ou None) ocupa o lugar do nó
            if not node.left or not node.right:
                return node.left or node.right

            # Dois filhos: copia o sucessor in-order e remove o original dele
            successor = self._min_value_node(node.right)
            node.key = successor.key
            node.value = successor.value
            node.right = self._delete_recursive(node.right, successor.key)

        node.height = 1 + max(self._get_height(node.left), self._get_height(node.right))
        balance = self._get_balance(node)

        # Na remoção não existe chave inserida: o balanço do filho decide o caso
        if balance > 1 and self._get_balance(node.left) >= 0:
            return self._rotate_right(node)

        if balance > 1 and self._get_balance(node.left) < 0:
            node.left = self._rotate_left(node.left)
            return self._rotate_right(node)

        if balance < -1 and self._get_balance(node.right) <= 0:
            return self._rotate_left(node)

        if balance < -1 and self._get_balance(node.right) > 0:
            node.right = self._rotate_right(node.right)
            return self._rotate_left(node)

        return node

    # --- Métodos Auxiliares e Rotações ---

    def _validate_key(self, key):
        if not isinstance(key, str) or not key:
            raise ValueError("A chave deve ser uma string não vazia.")

    def _find_node(self, key) -> Optional[AVLNode]:
        if not isinstance(key, str):
            return None
        current = self.root
        while current:
            if key == current.key:
                return current
            elif key < current.key:
                current = current.left
            else:
                current = current.right
        return None

    def _min_value_node(self, node: AVLNode) -> AVLNode:
        current = node
        while current.left:
            current = current.left
        return current

    def _get_height(self, node):
        if not node:
            return 0
        return node.height

    def _get_balance(self, node):
        if not node:
            return 0
        return self._get_height(node.left) - self._get_height(node.right)

    def _rotate_left(self, z):
        """
        Realiza rotação simples à esquerda.
        Usada quando o peso está na direita (Right-Right).
        """
        y = z.right
        T2 = y.left

        # Rotação
        y.left = z
        z.right = T2

        # Atualiza alturas
        z.height = 1 + max(self._get_height(z.left), self._get_height(z.right))
        y.height = 1 + max(self._get_height(y.left), self._get_height(y.right))

        return y

    def _rotate_right(self, z):
        """
        Realiza rotação simples à direita.
        Usada quando o peso está na esquerda (Left-Left).
        """
        y = z.left
        T3 = y.right

        # Rotação
        y.right = z
        z.left = T3

        # Atualiza alturas
        z.height = 1 + max(self._get_height(z.left), self._get_height(z.right))
        y.height = 1 + max(self._get_height(y.left), self._get_height(y.right))

        return y

    def _in_order(self, node, result):
        if node:
            self._in_order(node.left, result)
            result.append((node.key, node.value))
            self._in_order(node.right, result)

    def _render_recursive(self, node, indent, lines):
        if node:
            self._render_recursive(node.right, indent + 4, lines)
            lines.append(" " * indent + f"{node.key}({node.value})")
            self._render_recursive(node.left, indent + 4, lines)
