class Location:
    """
    Localidade do mapa (vértice do grafo).
    O id é sequencial e estável; o nome guarda a grafia da primeira inserção.
    """
    def __init__(self, location_id: int, name: str):
        self.id = location_id
        self.name = name

    @property
    def lookup_key(self) -> str:
        """Chave normalizada usada na busca case-insensitive."""
        return normalize_name(self.name)

    def __repr__(self):
        return f"Location(id={self.id}, name='{self.name}')"


def normalize_name(name: str) -> str:
    return name.strip().casefold()
