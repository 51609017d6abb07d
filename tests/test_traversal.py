import sys
import os
import logging
import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.avl.structures.avl_tree import build_avl
from src.avl.algorithms.traversal import preorder_print, destroy, in_order_keys, count_nodes
from src.avl.errors import InvalidNodeError

def test_preorder_print_logs_each_node_with_parent(caplog):
    print("--- Iniciando Teste de Travessia em Pré-Ordem ---")
    caplog.set_level(logging.INFO, logger="src.avl.algorithms.traversal")

    #        20
    #       /  \
    #     10    30
    #             \
    #              40
    avl = build_avl([20, 10, 30, 40])
    count = preorder_print(avl.root)
    assert count == 4

    messages = [r.getMessage() for r in caplog.records]
    data_lines = [m for m in messages if m.startswith("data:")]
    assert data_lines == [
        "data:     20,  parent:     20",
        "data:     10,  parent:     20",
        "data:     30,  parent:     20",
        "data:     40,  parent:     30",
    ]
    assert messages.count("LEFT.") == 1
    assert messages.count("RIGHT.") == 2

    print(">> SUCESSO: Nós visitados em pré-ordem com o pai correto.")

def test_preorder_print_invalid_node(caplog):
    with pytest.raises(InvalidNodeError):
        preorder_print(None)
    assert any(r.levelname == "ERROR" for r in caplog.records)

def test_destroy_counts_and_unlinks():
    avl = build_avl(list(range(100)))
    root = avl.root

    released = destroy(root)
    assert released == 100
    assert root.left is None and root.right is None

def test_destroy_invalid_node():
    with pytest.raises(InvalidNodeError):
        destroy(None)

def test_count_nodes():
    avl = build_avl([5, 3, 8, 3, 9, 1, 7])
    assert count_nodes(avl.root) == 7
    assert count_nodes(None) == 0
    assert len(avl) == 7
    assert avl.count() == 7

def test_in_order_keys():
    avl = build_avl([50, 20, 70, 20, 10, 90, 60])
    assert in_order_keys(avl.root) == [10, 20, 20, 50, 60, 70, 90]
    assert in_order_keys(None) == []

if __name__ == "__main__":
    test_destroy_counts_and_unlinks()
    test_in_order_keys()
