import logging
from numbers import Integral
from typing import Iterable, List, Optional
from src.avl.models.node import AVLNode, Direction
from src.avl.structures.path_stack import PathStack
from src.avl.algorithms.balance import balance_factor, update_height
from src.avl.algorithms.rotations import (
    fix_left_left, fix_right_right, fix_left_right, fix_right_left
)
from src.avl.algorithms.traversal import count_nodes, destroy, in_order_keys
from src.avl.errors import AllocationError, InvalidInputError

logger = logging.getLogger(__name__)

class AVLTree:
    """
    Árvore AVL construída de forma iterativa.
    A inserção desce guardando o caminho numa pilha (sem ponteiro para o pai)
    e depois desempilha rebalanceando cada ancestral de baixo para cima.
    Garante inserção e busca em O(log n).
    """
    def __init__(self):
        self.root: Optional[AVLNode] = None

    @classmethod
    def from_keys(cls, keys: Iterable[int]) -> "AVLTree":
        """Gera a árvore a partir de uma sequência com pelo menos uma chave."""
        if keys is None:
            logger.error("Sequência de chaves inválida: None.")
            raise InvalidInputError("Sequência de chaves inválida: None.")

        keys = list(keys)
        if not keys:
            logger.error("Sequência de chaves inválida: vazia.")
            raise InvalidInputError("Sequência de chaves inválida: vazia.")

        # Valida tudo antes de inserir, para nunca devolver uma árvore parcial
        for key in keys:
            cls._check_key(key)

        tree = cls()
        for key in keys:
            tree.insert(key)

        logger.debug("Árvore AVL gerada com %d chaves (raiz %d).", len(keys), tree.root.data)
        return tree

    def insert(self, key: int):
        """Insere uma chave e rebalanceia a árvore automaticamente."""
        self._check_key(key)

        if self.root is None:
            self.root = self._new_node(key)
            return

        stack = PathStack()
        current = self.root

        # 1. Descida: chaves iguais vão para a direita
        while True:
            direction = Direction.LEFT if key < current.data else Direction.RIGHT
            child = current.child(direction)

            if child is None:
                current.set_child(direction, self._new_node(key))
                update_height(current)
                break

            stack.push(current, direction)
            current = child

        # 2. Desempilha e rebalanceia cada ancestral
        entry = stack.pop()
        while entry is not None:
            self._rebalance(stack, entry.node, key)
            entry = stack.pop()

    def _rebalance(self, stack: PathStack, node: AVLNode, key: int):
        """
        Rebalanceia a subárvore de 'node' conforme o fator de balanceamento.
        Se houver rotação, o pai é obtido desempilhando a próxima entrada;
        se a pilha estiver vazia, 'node' era a raiz e self.root é trocada.
        """
        balance = balance_factor(node)
        fix = None

        if balance == -2:
            # Subárvore direita mais alta
            fix = fix_right_right if key >= node.right.data else fix_right_left
        elif balance == 2:
            # Subárvore esquerda mais alta
            fix = fix_left_left if key < node.left.data else fix_left_right

        if fix is not None:
            parent = stack.pop()
            new_root = fix(node)

            if parent is not None:
                parent.node.set_child(parent.direction, new_root)
            else:
                self.root = new_root

        update_height(node)

    def search(self, key: int) -> Optional[AVLNode]:
        """Busca um nó pela chave em O(log n). Retorna o nó ou None."""
        current = self.root
        while current:
            if key == current.data:
                return current
            elif key < current.data:
                current = current.left
            else:
                current = current.right
        return None

    def in_order(self) -> List[int]:
        """Retorna todas as chaves em ordem crescente."""
        return in_order_keys(self.root)

    def count(self) -> int:
        return count_nodes(self.root)

    def is_empty(self) -> bool:
        return self.root is None

    def clear(self) -> int:
        """Desmonta a árvore inteira. Retorna quantos nós foram liberados."""
        if self.root is None:
            return 0
        released = destroy(self.root)
        self.root = None
        return released

    @property
    def height(self) -> int:
        return self.root.height if self.root else 0

    def __len__(self):
        return self.count()

    def __contains__(self, key):
        return self.search(key) is not None

    # --- Métodos Auxiliares ---

    @staticmethod
    def _check_key(key):
        # bool é Integral, mas não é uma chave válida
        if isinstance(key, bool) or not isinstance(key, Integral):
            logger.error("Chave inválida: %r não é inteira.", key)
            raise InvalidInputError(f"Chave inválida: {key!r} não é inteira.")

    @staticmethod
    def _new_node(key: int) -> AVLNode:
        try:
            return AVLNode(key)
        except MemoryError as e:
            logger.error("Falha ao alocar nó para a chave %d.", key)
            raise AllocationError(f"Falha ao alocar nó para a chave {key}.") from e

def build_avl(keys: Iterable[int]) -> AVLTree:
    """Atalho para AVLTree.from_keys."""
    return AVLTree.from_keys(keys)
