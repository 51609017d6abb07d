"""
Avaliação de altura e fator de balanceamento.
Ambas as funções leem apenas a altura ARMAZENADA dos filhos (O(1)),
nunca recalculam a subárvore recursivamente. Por isso as alturas
precisam ser atualizadas de baixo para cima após cada mudança.
"""
from typing import Optional
from src.avl.models.node import AVLNode

def _contributions(node: AVLNode):
    # Filho ausente contribui 0; filho presente contribui 1 + sua altura
    lh = 0 if node.left is None else 1 + node.left.height
    rh = 0 if node.right is None else 1 + node.right.height
    return lh, rh

def height(node: Optional[AVLNode]) -> int:
    """Altura do nó a partir dos filhos. Folha = 0, None = 0."""
    if not node:
        return 0
    lh, rh = _contributions(node)
    return max(lh, rh)

def balance_factor(node: Optional[AVLNode]) -> int:
    """Altura da esquerda menos altura da direita. None = 0."""
    if not node:
        return 0
    lh, rh = _contributions(node)
    return lh - rh

def update_height(node: Optional[AVLNode]):
    if node:
        node.height = height(node)
