import logging
from typing import List, Optional
from src.avl.models.node import AVLNode
from src.avl.errors import InvalidNodeError

logger = logging.getLogger(__name__)

def preorder_print(node: Optional[AVLNode], parent: Optional[AVLNode] = None) -> int:
    """
    Imprime a árvore em pré-ordem (nó, esquerda, direita) pelo logger.
    Cada linha mostra a chave e a chave do pai imediato; a raiz aparece
    como pai de si mesma quando parent não é informado.
    Retorna quantos nós foram visitados.
    """
    if not node:
        logger.error("Nó inválido para travessia.")
        raise InvalidNodeError("Nó inválido para travessia.")

    if parent is None:
        parent = node

    count = 1
    logger.info("data: %6d,  parent: %6d", node.data, parent.data)

    if node.left:
        logger.info("LEFT.")
        count += preorder_print(node.left, node)

    if node.right:
        logger.info("RIGHT.")
        count += preorder_print(node.right, node)

    return count

def destroy(node: Optional[AVLNode]) -> int:
    """
    Desmonta a subárvore (esquerda, direita, nó) desligando todos os filhos.
    Retorna o número de nós liberados, incluindo a raiz.
    """
    if not node:
        logger.error("Raiz inválida para destruição.")
        raise InvalidNodeError("Raiz inválida para destruição.")

    count = 0
    if node.left:
        count += destroy(node.left)
    if node.right:
        count += destroy(node.right)

    node.left = None
    node.right = None
    node.height = 0

    return count + 1

def in_order_keys(node: Optional[AVLNode]) -> List[int]:
    """Retorna as chaves em ordem (in-order traversal)."""
    keys: List[int] = []
    _in_order(node, keys)
    return keys

def _in_order(node, keys: List[int]):
    if node:
        _in_order(node.left, keys)
        keys.append(node.data)
        _in_order(node.right, keys)

def count_nodes(node: Optional[AVLNode]) -> int:
    """Conta os nós da subárvore sem montar listas. None = 0."""
    if not node:
        return 0
    return 1 + count_nodes(node.left) + count_nodes(node.right)
