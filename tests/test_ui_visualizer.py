import sys
import os
from types import SimpleNamespace

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest

pytest.importorskip("tkinter")

from src.ui.visualizer import NavigateXApp

class FakeRoot:
    """Registra os agendamentos do Tk sem abrir janela."""
    def __init__(self):
        self.scheduled = {}
        self.cancelled = []
        self._next_id = 0

    def after(self, ms, callback):
        self._next_id += 1
        job = f"after#{self._next_id}"
        self.scheduled[job] = (ms, callback)
        return job

    def after_cancel(self, job):
        self.cancelled.append(job)
        self.scheduled.pop(job, None)

def make_app_stub():
    app = SimpleNamespace(root=FakeRoot(), HIGHLIGHT_MS=NavigateXApp.HIGHLIGHT_MS,
                          _highlight_job=None, highlighted_path=["A", "B"], draws=0)
    app.draw_graph = lambda: setattr(app, "draws", app.draws + 1)
    app._clear_highlight = lambda: NavigateXApp._clear_highlight(app)
    return app

def test_new_search_cancels_previous_highlight_timer():
    print("--- Teste: Reagendamento do destaque do caminho ---")
    app = make_app_stub()

    NavigateXApp._schedule_highlight_clear(app)
    first_job = app._highlight_job
    NavigateXApp._schedule_highlight_clear(app)

    assert app.root.cancelled == [first_job], "O temporizador anterior deve ser cancelado"
    assert list(app.root.scheduled) == [app._highlight_job], "Só o último destaque fica agendado"
    assert app.root.scheduled[app._highlight_job][0] == NavigateXApp.HIGHLIGHT_MS
    print(">> SUCESSO: Apenas um temporizador ativo.")

def test_highlight_timer_clears_path_and_job():
    app = make_app_stub()
    NavigateXApp._schedule_highlight_clear(app)

    _, callback = app.root.scheduled[app._highlight_job]
    callback()

    assert app.highlighted_path == []
    assert app._highlight_job is None
    assert app.draws == 1

    # Sem temporizador pendente, nada é cancelado no próximo agendamento
    NavigateXApp._schedule_highlight_clear(app)
    assert app.root.cancelled == []

if __name__ == "__main__":
    test_new_search_cancels_previous_highlight_timer()
