class Road:
    """
    Entrada da lista de adjacência: estrada de mão dupla até um vizinho.
    Cada estrada existe duas vezes (u -> v e v -> u) com o mesmo peso.
    """
    def __init__(self, source_id: int, target_id: int, weight: int):
        self.source = source_id
        self.target = target_id
        self.weight = weight

    def __repr__(self):
        return f"Estrada {self.source}<->{self.target} (Peso: {self.weight})"
