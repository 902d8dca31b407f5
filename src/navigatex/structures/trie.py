from typing import List, Optional

class TrieNode:
    """Nó da Trie: um filho por letra do alfabeto (a-z)."""
    def __init__(self):
        self.is_end = False
        self.children: List[Optional["TrieNode"]] = [None] * Trie.ALPHABET_SIZE

class Trie:
    """
    Árvore de prefixos para auto-completar nomes de localidades.
    Inserção e busca em O(m), onde m é o tamanho da palavra.
    Letras são normalizadas para minúsculas; demais caracteres são ignorados.
    """
    ALPHABET_SIZE = 26

    def __init__(self):
        self.root = TrieNode()
        self._word_count = 0

    def insert(self, word: str):
        """Insere uma palavra. Palavras sem nenhuma letra são rejeitadas."""
        indexes = self._indexes(word)
        if not indexes:
            raise ValueError(f"A palavra {word!r} não contém letras (a-z).")

        cur = self.root
        for i in indexes:
            if cur.children[i] is None:
                cur.children[i] = TrieNode()
            cur = cur.children[i]

        if not cur.is_end:
            cur.is_end = True
            self._word_count += 1

    def contains(self, word: str) -> bool:
        node = self._walk(word)
        return node is not None and node.is_end

    def suggest(self, prefix: str) -> List[str]:
        """
        Retorna todas as palavras que começam com prefix, em ordem alfabética.
        Prefixo vazio retorna todas as palavras.
        """
        node = self._walk(prefix)
        if node is None:
            return []
        out: List[str] = []
        self._collect_all(node, "".join(chr(ord('a') + i) for i in self._indexes(prefix)), out)
        return out

    def word_count(self) -> int:
        return self._word_count

    def is_empty(self) -> bool:
        return self._word_count == 0

    def clear(self):
        self.root = TrieNode()
        self._word_count = 0

    def _walk(self, text) -> Optional[TrieNode]:
        cur = self.root
        for i in self._indexes(text):
            cur = cur.children[i]
            if cur is None:
                return None
        return cur

    def _collect_all(self, node: TrieNode, prefix: str, out: List[str]):
        if node.is_end:
            out.append(prefix)
        for i, child in enumerate(node.children):
            if child is not None:
                self._collect_all(child, prefix + chr(ord('a') + i), out)

    @staticmethod
    def _indexes(text) -> List[int]:
        if not isinstance(text, str):
            raise ValueError("A palavra deve ser uma string.")
        return [ord(c) - ord('a') for c in text.lower() if 'a' <= c <= 'z']
