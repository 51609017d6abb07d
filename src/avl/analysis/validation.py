from typing import List, Optional
from src.avl.models.node import AVLNode
from src.avl.algorithms.balance import balance_factor, height

def find_violations(root: Optional[AVLNode]) -> List[str]:
    """
    Percorre a árvore e lista cada quebra de invariante:
    - ordem de BST (in-order não decrescente)
    - balanceamento AVL (fator em {-1, 0, 1})
    - altura armazenada coerente com as alturas dos filhos
    Árvore vazia não tem violações.
    """
    violations: List[str] = []
    _check(root, None, None, violations)
    return violations

def _check(node, low, high, violations: List[str]):
    if node is None:
        return

    # Limites herdados dos ancestrais: low <= data <= high.
    # Chaves repetidas podem acabar à esquerda de uma igual após uma rotação.
    if low is not None and node.data < low:
        violations.append(f"Ordem: {node.data} menor que o limite inferior {low}")
    if high is not None and node.data > high:
        violations.append(f"Ordem: {node.data} maior que o limite superior {high}")

    bf = balance_factor(node)
    if bf not in (-1, 0, 1):
        violations.append(f"Balanceamento: nó {node.data} com fator {bf}")

    expected = height(node)
    if node.height != expected:
        violations.append(f"Altura: nó {node.data} guarda {node.height}, esperado {expected}")

    _check(node.left, low, node.data, violations)
    _check(node.right, node.data, high, violations)

def is_valid_avl(root: Optional[AVLNode]) -> bool:
    return not find_violations(root)
