import sys
import os
import logging

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.avl.main import run
from src.avl.structures import avl_tree as avl_tree_module

def test_run_builds_prints_and_releases(caplog):
    caplog.set_level(logging.INFO)
    assert run(["10", "20", "30"]) == 0

    messages = [r.getMessage() for r in caplog.records]
    assert "data:     20,  parent:     20" in messages
    assert "3 nós liberados." in messages

def test_run_rejects_bad_input():
    assert run([]) == 1
    assert run(["10", "x"]) == 1

def test_run_reports_allocation_failure(monkeypatch, caplog):
    def failing_node(key):
        raise MemoryError()

    monkeypatch.setattr(avl_tree_module, "AVLNode", failing_node)

    # Falha de alocação encerra só a operação, não o processo
    assert run(["10", "20"]) == 1
    assert any(r.levelname == "ERROR" for r in caplog.records)
