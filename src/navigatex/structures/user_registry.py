from dataclasses import dataclass
from typing import Dict, List, Optional

@dataclass
class User:
    user_id: str
    name: str

class UserSystem:
    """
    Cadastro de usuários sobre a tabela hash nativa (dict).
    Todas as operações em O(1) médio.
    """
    def __init__(self):
        self._users: Dict[str, User] = {}

    def add_user(self, user_id: str, name: str) -> bool:
        """Retorna False se o id já estiver cadastrado."""
        if not isinstance(user_id, str) or not user_id.strip():
            raise ValueError("O id do usuário deve ser uma string não vazia.")
        if not isinstance(name, str) or not name.strip():
            raise ValueError("O nome do usuário deve ser uma string não vazia.")

        if user_id in self._users:
            return False
        self._users[user_id] = User(user_id, name)
        return True

    def find_user(self, user_id: str) -> Optional[User]:
        return self._users.get(user_id)

    def remove_user(self, user_id: str) -> bool:
        return self._users.pop(user_id, None) is not None

    def get_all_users(self) -> List[User]:
        return list(self._users.values())

    def size(self) -> int:
        return len(self._users)

    def is_empty(self) -> bool:
        return len(self._users) == 0

    def clear(self):
        self._users.clear()
