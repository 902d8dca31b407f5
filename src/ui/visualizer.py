# src/ui/visualizer.py
import tkinter as tk
from tkinter import ttk, messagebox
import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..')))

from src.navigatex.workspace import DSAWorkspace
from src.navigatex.structures.traffic_queue import TrafficUpdate, TrafficLevel
from src.ui.layout import circular_layout, tree_layout, tree_edges, path_edges

class NavigateXApp:
    """
    Camada de apresentação: só consulta e chama as operações públicas das
    estruturas do workspace; nunca mexe no estado interno delas.
    """
    NODE_RADIUS = 22
    HIGHLIGHT_MS = 5000
    STATUS_MS = 3000

    COLOR_NODE = "#667eea"
    COLOR_NODE_BORDER = "#764ba2"
    COLOR_PATH = "#ff6b6b"
    COLOR_EDGE = "#999999"

    def __init__(self, root, workspace: DSAWorkspace = None):
        self.root = root
        self.root.title("NavigateX - Visualização de Estruturas de Dados")
        self.root.minsize(1000, 650)
        self.root.geometry("1200x750")

        self.ws = workspace or DSAWorkspace()
        self.highlighted_path = []
        self._status_job = None
        self._highlight_job = None

        self.create_layout()
        self.refresh_all()

    # --- Layout ---

    def create_layout(self):
        # --- 1. BARRA DE FERRAMENTAS ---
        toolbar = tk.Frame(self.root, bd=1, relief=tk.RAISED, bg="#f0f0f0")
        toolbar.pack(side=tk.TOP, fill=tk.X)
        tk.Label(toolbar, text="NavigateX", font=("Segoe UI", 13, "bold"), bg="#f0f0f0").pack(side=tk.LEFT, padx=10)
        tk.Button(toolbar, text="♻️ Resetar Tudo", command=self.reset_all, bg="#ffccaa").pack(side=tk.RIGHT, padx=5, pady=5)

        # --- 2. ABAS (uma por estrutura) ---
        self.notebook = ttk.Notebook(self.root)
        self.notebook.pack(fill=tk.BOTH, expand=True)

        self._create_graph_tab()
        self._create_avl_tab()
        self._create_hash_tab()
        self._create_trie_tab()
        self._create_routes_tab()
        self._create_traffic_tab()
        self._create_users_tab()

        # --- 3. BARRA DE STATUS (notificações) ---
        self.lbl_status = tk.Label(self.root, text="Pronto.", anchor="w", font=("Arial", 10), bg="#ddd", pady=4)
        self.lbl_status.pack(side=tk.BOTTOM, fill=tk.X)

    def _controls(self, tab):
        frame = tk.Frame(tab, bg="#e8e8e8", width=280)
        frame.pack(side=tk.LEFT, fill=tk.Y)
        return frame

    def _entry(self, parent, label: str) -> tk.Entry:
        tk.Label(parent, text=label, bg="#e8e8e8", font=("Arial", 9)).pack(anchor="w", padx=8, pady=(6, 0))
        entry = tk.Entry(parent, width=28)
        entry.pack(anchor="w", padx=8)
        return entry

    def _button(self, parent, text, command, bg="#dddddd"):
        tk.Button(parent, text=text, command=command, bg=bg, width=24).pack(anchor="w", padx=8, pady=3)

    def _text_panel(self, tab) -> tk.Text:
        text = tk.Text(tab, font=("Consolas", 10), state=tk.DISABLED, bg="#ffffff")
        text.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        return text

    def _create_graph_tab(self):
        tab = tk.Frame(self.notebook)
        self.notebook.add(tab, text="Grafo")
        ctrl = self._controls(tab)

        self.e_location = self._entry(ctrl, "Localidade")
        self._button(ctrl, "➕ Adicionar Localidade", self.add_location, bg="#eebbff")
        self.e_edge_from = self._entry(ctrl, "De")
        self.e_edge_to = self._entry(ctrl, "Para")
        self.e_edge_weight = self._entry(ctrl, "Peso (inteiro positivo)")
        self._button(ctrl, "🔗 Adicionar Estrada", self.add_edge, bg="#aaccff")
        self._button(ctrl, "🧭 Menor Caminho (De → Para)", self.find_shortest_path, bg="#ddffdd")
        self._button(ctrl, "BFS a partir de 'De'", lambda: self.traverse("BFS"))
        self._button(ctrl, "DFS a partir de 'De'", lambda: self.traverse("DFS"))
        self._button(ctrl, "Verificar Conectividade", self.check_connectivity)
        self._button(ctrl, "🗑 Limpar Grafo", self.clear_graph, bg="#ffaaaa")

        self.graph_canvas = tk.Canvas(tab, bg="#ffffff")
        self.graph_canvas.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        self.graph_canvas.bind("<Configure>", lambda _e: self.draw_graph())

    def _create_avl_tab(self):
        tab = tk.Frame(self.notebook)
        self.notebook.add(tab, text="Árvore AVL")
        ctrl = self._controls(tab)

        self.e_avl_key = self._entry(ctrl, "Chave")
        self.e_avl_value = self._entry(ctrl, "Valor (inteiro)")
        self._button(ctrl, "➕ Inserir", self.avl_insert, bg="#ddffdd")
        self._button(ctrl, "🔍 Buscar", self.avl_search)
        self._button(ctrl, "➖ Remover", self.avl_remove, bg="#ffaaaa")
        self._button(ctrl, "🗑 Limpar Árvore", self.avl_clear)

        self.avl_canvas = tk.Canvas(tab, bg="#ffffff")
        self.avl_canvas.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        self.avl_canvas.bind("<Configure>", lambda _e: self.draw_avl())

    def _create_hash_tab(self):
        tab = tk.Frame(self.notebook)
        self.notebook.add(tab, text="Tabela Hash")
        ctrl = self._controls(tab)

        self.e_hash_key = self._entry(ctrl, "Chave")
        self.e_hash_value = self._entry(ctrl, "Valor (inteiro)")
        self._button(ctrl, "➕ Inserir", self.hash_insert, bg="#ddffdd")
        self._button(ctrl, "🔍 Buscar", self.hash_search)
        self._button(ctrl, "➖ Remover", self.hash_remove, bg="#ffaaaa")
        self.hash_text = self._text_panel(tab)

    def _create_trie_tab(self):
        tab = tk.Frame(self.notebook)
        self.notebook.add(tab, text="Trie")
        ctrl = self._controls(tab)

        self.e_trie_word = self._entry(ctrl, "Palavra")
        self._button(ctrl, "➕ Inserir", self.trie_insert, bg="#ddffdd")
        self.e_trie_prefix = self._entry(ctrl, "Prefixo")
        self._button(ctrl, "🔍 Sugerir", self.trie_suggest)
        self._button(ctrl, "🗑 Limpar Trie", self.trie_clear, bg="#ffaaaa")
        self.trie_text = self._text_panel(tab)

    def _create_routes_tab(self):
        tab = tk.Frame(self.notebook)
        self.notebook.add(tab, text="Linhas de Ônibus")
        ctrl = self._controls(tab)

        self.e_route = self._entry(ctrl, "Linha")
        self._button(ctrl, "➕ Criar Linha", self.add_route, bg="#ddffdd")
        self.e_stop = self._entry(ctrl, "Parada")
        self._button(ctrl, "➕ Adicionar Parada", self.add_stop)
        self._button(ctrl, "➖ Remover Parada", self.delete_stop)
        self._button(ctrl, "🔄 Inverter Linha", self.reverse_route)
        self._button(ctrl, "🗑 Remover Linha", self.delete_route, bg="#ffaaaa")
        self.routes_text = self._text_panel(tab)

    def _create_traffic_tab(self):
        tab = tk.Frame(self.notebook)
        self.notebook.add(tab, text="Trânsito (FIFO)")
        ctrl = self._controls(tab)

        self.e_traffic_route = self._entry(ctrl, "Rota")
        tk.Label(ctrl, text="Nível", bg="#e8e8e8", font=("Arial", 9)).pack(anchor="w", padx=8, pady=(6, 0))
        self.cb_traffic_level = ttk.Combobox(ctrl, values=["LOW", "MEDIUM", "HIGH"], state="readonly", width=25)
        self.cb_traffic_level.current(0)
        self.cb_traffic_level.pack(anchor="w", padx=8)
        self._button(ctrl, "➕ Enfileirar", self.enqueue_update, bg="#ddffdd")
        self._button(ctrl, "▶ Processar Próxima", self.dequeue_update)
        self._button(ctrl, "⏩ Processar Todas", self.process_all_updates)
        self._button(ctrl, "🗑 Limpar Fila", self.clear_traffic, bg="#ffaaaa")
        self.traffic_text = self._text_panel(tab)

    def _create_users_tab(self):
        tab = tk.Frame(self.notebook)
        self.notebook.add(tab, text="Usuários")
        ctrl = self._controls(tab)

        self.e_user_id = self._entry(ctrl, "ID")
        self.e_user_name = self._entry(ctrl, "Nome")
        self._button(ctrl, "➕ Adicionar", self.add_user, bg="#ddffdd")
        self._button(ctrl, "🔍 Buscar", self.find_user)
        self._button(ctrl, "➖ Remover", self.remove_user, bg="#ffaaaa")
        self.users_text = self._text_panel(tab)

    # --- Notificações ---

    def show_info(self, message: str, kind: str = "info"):
        colors = {"success": "#ccffcc", "error": "#ffcccc", "info": "#ddd"}
        self.lbl_status.config(text=message, bg=colors.get(kind, "#ddd"))
        if self._status_job:
            self.root.after_cancel(self._status_job)
        self._status_job = self.root.after(self.STATUS_MS, lambda: self.lbl_status.config(text="Pronto.", bg="#ddd"))

    def _read_int(self, entry: tk.Entry, label: str):
        raw = entry.get().strip()
        try:
            return int(raw)
        except ValueError:
            self.show_info(f"{label} deve ser um número inteiro.", "error")
            return None

    # --- Grafo ---

    def add_location(self):
        name = self.e_location.get().strip()
        if not name:
            self.show_info("Informe o nome da localidade.", "error")
            return
        if self.ws.graph.has_location(name):
            self.show_info(f"A localidade '{self.ws.graph.get_actual_location_name(name)}' já existe!", "error")
            return
        self.ws.graph.add_location(name)
        self.e_location.delete(0, tk.END)
        self.draw_graph()
        self.show_info(f"Localidade '{name}' adicionada!", "success")

    def add_edge(self):
        src = self.e_edge_from.get().strip()
        dst = self.e_edge_to.get().strip()
        weight = self._read_int(self.e_edge_weight, "O peso")
        if weight is None:
            return
        for name in (src, dst):
            if not self.ws.graph.has_location(name):
                self.show_info(f"A localidade '{name}' não existe! Adicione-a primeiro.", "error")
                return
        try:
            self.ws.graph.add_edge(src, dst, weight)
        except ValueError as e:
            self.show_info(str(e), "error")
            return
        self.draw_graph()
        self.show_info(f"Estrada: {self.ws.graph.get_actual_location_name(src)} ↔ "
                       f"{self.ws.graph.get_actual_location_name(dst)} ({weight})", "success")

    def find_shortest_path(self):
        src = self.e_edge_from.get().strip()
        dst = self.e_edge_to.get().strip()
        result = self.ws.graph.shortest_path(src, dst)
        if not result.found:
            self.show_info("Nenhum caminho encontrado entre essas localidades!", "error")
            return
        self.highlighted_path = result.path
        self.draw_graph()
        self._schedule_highlight_clear()
        self.show_info(f"Menor caminho: {' → '.join(result.path)} | Distância: {result.distance}", "success")

    def traverse(self, kind: str):
        start = self.e_edge_from.get().strip()
        order = self.ws.graph.bfs(start) if kind == "BFS" else self.ws.graph.dfs(start)
        if not order:
            self.show_info(f"A localidade '{start}' não existe!", "error")
            return
        self.show_info(f"{kind}: {' → '.join(order)}", "success")

    def check_connectivity(self):
        if self.ws.graph.is_connected():
            self.show_info("O grafo é conexo.", "success")
        else:
            self.show_info("O grafo NÃO é conexo.", "error")

    def clear_graph(self):
        if self.ws.graph.get_node_count() == 0:
            self.show_info("O grafo já está vazio.")
            return
        if messagebox.askyesno("Confirmar", "Remover todas as localidades e estradas?"):
            self.ws.graph.reset()
            self.highlighted_path = []
            self.draw_graph()
            self.show_info("Grafo limpo!", "success")

    def _schedule_highlight_clear(self):
        # Uma nova busca reinicia o prazo do destaque anterior
        if self._highlight_job:
            self.root.after_cancel(self._highlight_job)
        self._highlight_job = self.root.after(self.HIGHLIGHT_MS, self._clear_highlight)

    def _clear_highlight(self):
        self._highlight_job = None
        self.highlighted_path = []
        self.draw_graph()

    def draw_graph(self):
        c = self.graph_canvas
        c.delete("all")
        width, height = c.winfo_width(), c.winfo_height()
        positions = circular_layout(self.ws.graph.get_locations(), width, height)
        if not positions:
            c.create_text(width / 2, height / 2, text="Grafo vazio. Adicione localidades.", fill="#666")
            return

        on_path = path_edges(self.highlighted_path)
        for a, b, weight in self.ws.graph.get_edges():
            (x1, y1), (x2, y2) = positions[a], positions[b]
            highlighted = frozenset((a, b)) in on_path
            c.create_line(x1, y1, x2, y2, fill=self.COLOR_PATH if highlighted else self.COLOR_EDGE,
                          width=5 if highlighted else 3)
            c.create_text((x1 + x2) / 2, (y1 + y2) / 2 - 10, text=str(weight), font=("Arial", 9, "bold"))

        r = self.NODE_RADIUS
        for name, (x, y) in positions.items():
            fill = self.COLOR_PATH if name in self.highlighted_path else self.COLOR_NODE
            c.create_oval(x - r, y - r, x + r, y + r, fill=fill, outline=self.COLOR_NODE_BORDER, width=2)
            c.create_text(x, y + r + 10, text=name, font=("Arial", 9))

    # --- Árvore AVL ---

    def avl_insert(self):
        key = self.e_avl_key.get().strip()
        value = self._read_int(self.e_avl_value, "O valor")
        if value is None:
            return
        try:
            self.ws.avl.insert(key, value)
        except ValueError as e:
            self.show_info(str(e), "error")
            return
        self.draw_avl()
        self.show_info(f"'{key}' inserida (altura da árvore: {self.ws.avl.height()})", "success")

    def avl_search(self):
        key = self.e_avl_key.get().strip()
        value = self.ws.avl.search(key)
        if value is None:
            self.show_info(f"'{key}' não encontrada.", "error")
        else:
            self.show_info(f"Encontrada: {key} = {value}", "success")

    def avl_remove(self):
        key = self.e_avl_key.get().strip()
        if self.ws.avl.remove(key):
            self.draw_avl()
            self.show_info(f"'{key}' removida.", "success")
        else:
            self.show_info(f"'{key}' não encontrada.", "error")

    def avl_clear(self):
        self.ws.avl.clear()
        self.draw_avl()
        self.show_info("Árvore limpa!", "success")

    def draw_avl(self):
        c = self.avl_canvas
        c.delete("all")
        positions = tree_layout(self.ws.avl.root, c.winfo_width())
        if not positions:
            c.create_text(c.winfo_width() / 2, 40, text="(Empty tree)", fill="#666")
            return

        for parent, child in tree_edges(self.ws.avl.root):
            (x1, y1), (x2, y2) = positions[parent], positions[child]
            c.create_line(x1, y1, x2, y2, fill=self.COLOR_EDGE, width=2)

        values = dict(self.ws.avl.inorder_traversal())
        r = self.NODE_RADIUS
        for key, (x, y) in positions.items():
            c.create_oval(x - r, y - r, x + r, y + r, fill=self.COLOR_NODE, outline=self.COLOR_NODE_BORDER, width=2)
            c.create_text(x, y, text=key[:6], fill="white", font=("Arial", 8, "bold"))
            c.create_text(x, y + r + 8, text=str(values[key]), font=("Arial", 8))

    # --- Tabela Hash ---

    def hash_insert(self):
        key = self.e_hash_key.get().strip()
        value = self._read_int(self.e_hash_value, "O valor")
        if value is None:
            return
        try:
            added = self.ws.hash_table.insert(key, value)
        except ValueError as e:
            self.show_info(str(e), "error")
            return
        self.draw_hash_table()
        self.show_info(f"'{key}' {'inserida' if added else 'atualizada'}.", "success")

    def hash_search(self):
        key = self.e_hash_key.get().strip()
        value = self.ws.hash_table.search(key)
        if value is None:
            self.show_info(f"'{key}' não encontrada.", "error")
        else:
            self.show_info(f"Encontrada: {key} = {value}", "success")

    def hash_remove(self):
        key = self.e_hash_key.get().strip()
        if self.ws.hash_table.remove(key):
            self.draw_hash_table()
            self.show_info(f"'{key}' removida.", "success")
        else:
            self.show_info(f"'{key}' não encontrada.", "error")

    def draw_hash_table(self):
        ht = self.ws.hash_table
        lines = [f"Tamanho: {ht.get_size()}  Capacidade: {ht.get_capacity()}  "
                 f"Fator de carga: {ht.get_load_factor():.2f}", ""]
        for index, chain in enumerate(ht.get_buckets()):
            cells = " -> ".join(f"[{k}:{v}]" for k, v in chain) if chain else "∅"
            lines.append(f"Bucket {index:3d}: {cells}")
        self._set_text(self.hash_text, lines)

    # --- Trie ---

    def trie_insert(self):
        word = self.e_trie_word.get().strip()
        try:
            self.ws.trie.insert(word)
        except ValueError as e:
            self.show_info(str(e), "error")
            return
        self.e_trie_word.delete(0, tk.END)
        self.draw_trie()
        self.show_info(f"Palavra '{word.lower()}' inserida!", "success")

    def trie_suggest(self):
        prefix = self.e_trie_prefix.get().strip()
        matches = self.ws.trie.suggest(prefix)
        if not matches:
            self.show_info("Nenhuma correspondência encontrada!", "error")
            return
        self.show_info(f"{len(matches)} correspondência(s): {', '.join(matches)}", "success")

    def trie_clear(self):
        self.ws.trie.clear()
        self.draw_trie()
        self.show_info("Trie limpa!", "success")

    def draw_trie(self):
        words = self.ws.trie.suggest("")
        self._set_text(self.trie_text, [f"{len(words)} palavra(s):", ""] + words)

    # --- Linhas de Ônibus ---

    def add_route(self):
        name = self.e_route.get().strip()
        try:
            added = self.ws.bus_routes.add_route(name)
        except ValueError as e:
            self.show_info(str(e), "error")
            return
        if not added:
            self.show_info(f"A linha '{name}' já existe!", "error")
            return
        self.draw_routes()
        self.show_info(f"Linha '{name}' criada!", "success")

    def add_stop(self):
        route, stop = self.e_route.get().strip(), self.e_stop.get().strip()
        try:
            added = self.ws.bus_routes.add_stop_to_route(route, stop)
        except ValueError as e:
            self.show_info(str(e), "error")
            return
        if not added:
            self.show_info("Linha inexistente ou parada já cadastrada nela!", "error")
            return
        self.draw_routes()
        self.show_info(f"Parada '{stop}' adicionada à linha '{route}'!", "success")

    def delete_stop(self):
        route, stop = self.e_route.get().strip(), self.e_stop.get().strip()
        if self.ws.bus_routes.delete_stop_from_route(route, stop):
            self.draw_routes()
            self.show_info(f"Parada '{stop}' removida!", "success")
        else:
            self.show_info("Parada não encontrada nessa linha!", "error")

    def reverse_route(self):
        route = self.e_route.get().strip()
        if self.ws.bus_routes.reverse_route(route):
            self.draw_routes()
            self.show_info(f"Linha '{route}' invertida!", "success")
        else:
            self.show_info(f"A linha '{route}' não existe!", "error")

    def delete_route(self):
        route = self.e_route.get().strip()
        if self.ws.bus_routes.delete_route(route):
            self.draw_routes()
            self.show_info(f"Linha '{route}' removida!", "success")
        else:
            self.show_info(f"A linha '{route}' não existe!", "error")

    def draw_routes(self):
        lines = []
        for name in self.ws.bus_routes.get_all_route_names():
            stops = self.ws.bus_routes.get_route_stops(name)
            lines.append(f"{name} ({len(stops)} paradas)")
            lines.append("    " + (" → ".join(stops) if stops else "(linha vazia)"))
        self._set_text(self.routes_text, lines or ["Nenhuma linha cadastrada."])

    # --- Trânsito ---

    def enqueue_update(self):
        route = self.e_traffic_route.get().strip()
        level = getattr(TrafficLevel, self.cb_traffic_level.get())
        try:
            self.ws.traffic.push_update(TrafficUpdate(route, level))
        except ValueError as e:
            self.show_info(str(e), "error")
            return
        self.draw_traffic()
        self.show_info(f"Atualização de '{route}' enfileirada!", "success")

    def dequeue_update(self):
        update = self.ws.traffic.dequeue()
        if update is None:
            self.show_info("A fila está vazia!", "error")
            return
        self.draw_traffic()
        self.show_info(f"Processada: {update}", "success")

    def process_all_updates(self):
        count = self.ws.traffic.process_updates()
        if count == 0:
            self.show_info("A fila está vazia!", "error")
            return
        self.draw_traffic()
        self.show_info(f"{count} atualização(ões) processada(s)!", "success")

    def clear_traffic(self):
        self.ws.traffic.clear()
        self.draw_traffic()
        self.show_info("Fila limpa!", "success")

    def draw_traffic(self):
        t = self.ws.traffic
        lines = ["Pendentes (frente → fim):"]
        lines += [f"  {u}" for u in t.get_pending()] or ["  (vazia)"]
        lines += ["", "Processadas:"]
        lines += [f"  {u}" for u in t.get_processed()] or ["  (nenhuma)"]
        lines += ["", "Nível atual por rota:"]
        lines += [f"  {route}: {TrafficLevel.name_of(level)}" for route, level in t.current_traffic.items()]
        self._set_text(self.traffic_text, lines)

    # --- Usuários ---

    def add_user(self):
        user_id, name = self.e_user_id.get().strip(), self.e_user_name.get().strip()
        try:
            added = self.ws.users.add_user(user_id, name)
        except ValueError as e:
            self.show_info(str(e), "error")
            return
        if not added:
            self.show_info("Usuário já existe!", "error")
            return
        self.draw_users()
        self.show_info(f"Usuário '{user_id}' adicionado!", "success")

    def find_user(self):
        user = self.ws.users.find_user(self.e_user_id.get().strip())
        if user is None:
            self.show_info("Usuário não encontrado!", "error")
        else:
            self.show_info(f"Encontrado: ID={user.user_id}, Nome={user.name}", "success")

    def remove_user(self):
        user_id = self.e_user_id.get().strip()
        if self.ws.users.remove_user(user_id):
            self.draw_users()
            self.show_info(f"Usuário '{user_id}' removido!", "success")
        else:
            self.show_info("Usuário não encontrado!", "error")

    def draw_users(self):
        lines = [f"{u.user_id}: {u.name}" for u in self.ws.users.get_all_users()]
        self._set_text(self.users_text, lines or ["Nenhum usuário cadastrado."])

    # --- Geral ---

    def _set_text(self, widget: tk.Text, lines):
        widget.config(state=tk.NORMAL)
        widget.delete("1.0", tk.END)
        widget.insert(tk.END, "\n".join(lines))
        widget.config(state=tk.DISABLED)

    def refresh_all(self):
        self.draw_graph()
        self.draw_avl()
        self.draw_hash_table()
        self.draw_trie()
        self.draw_routes()
        self.draw_traffic()
        self.draw_users()

    def reset_all(self):
        if messagebox.askyesno("Confirmar", "Apagar todas as estruturas?"):
            self.ws.reset_all()
            self.highlighted_path = []
            self.refresh_all()
            self.show_info("Todas as estruturas foram reiniciadas.", "success")

if __name__ == "__main__":
    root = tk.Tk()
    app = NavigateXApp(root)
    root.mainloop()
