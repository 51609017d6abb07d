import logging
from src.avl.models.node import AVLNode
from src.avl.algorithms.balance import update_height

logger = logging.getLogger(__name__)

# Rotação à direita
#         z                y
#        / \              / \
#       y   D    -->     A   z
#      / \                  / \
#     A   T3               T3  D
def rotate_right(z: AVLNode) -> AVLNode:
    """
    Realiza rotação simples à direita e retorna a nova raiz da subárvore.
    A altura de z (que vira filho) é recalculada antes da de y (nova raiz),
    pois y depende da altura armazenada de z.
    """
    y = z.left
    T3 = y.right

    y.right = z
    z.left = T3

    update_height(z)
    update_height(y)

    logger.debug("Rotação à direita em %d -> nova raiz %d", z.data, y.data)
    return y

# Rotação à esquerda
#     z                    y
#    / \                  / \
#   A   y      -->       z   D
#      / \              / \
#     T2  D            A   T2
def rotate_left(z: AVLNode) -> AVLNode:
    """Realiza rotação simples à esquerda (espelho de rotate_right)."""
    y = z.right
    T2 = y.left

    y.left = z
    z.right = T2

    update_height(z)
    update_height(y)

    logger.debug("Rotação à esquerda em %d -> nova raiz %d", z.data, y.data)
    return y

# --- Correções dos quatro casos de desbalanceamento ---

def fix_left_left(node: AVLNode) -> AVLNode:
    """Caso 1 - Left-Left: uma rotação à direita."""
    return rotate_right(node)

def fix_right_right(node: AVLNode) -> AVLNode:
    """Caso 2 - Right-Right: uma rotação à esquerda."""
    return rotate_left(node)

def fix_left_right(node: AVLNode) -> AVLNode:
    """Caso 3 - Left-Right: rotação dupla (esquerda no filho, direita no nó)."""
    node.left = rotate_left(node.left)
    return rotate_right(node)

def fix_right_left(node: AVLNode) -> AVLNode:
    """Caso 4 - Right-Left: rotação dupla (direita no filho, esquerda no nó)."""
    node.right = rotate_right(node.right)
    return rotate_left(node)
