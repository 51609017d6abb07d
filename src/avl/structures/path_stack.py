from dataclasses import dataclass
from typing import List, Optional
from src.avl.models.node import AVLNode, Direction

@dataclass
class PathEntry:
    """Um passo da descida: o nó visitado e o lado escolhido a partir dele."""
    node: AVLNode
    direction: int

class PathStack:
    """
    Pilha (LIFO) com o caminho percorrido durante uma inserção.
    Substitui o ponteiro para o pai: ao desempilhar, sabemos quem é o pai
    e de que lado está o filho. Vive apenas durante uma inserção.
    """
    def __init__(self):
        self._entries: List[PathEntry] = []

    def push(self, node: AVLNode, direction: int):
        """Empilha o nó e a direção tomada. Complexidade: O(1)"""
        self._entries.append(PathEntry(node, direction))

    def pop(self) -> Optional[PathEntry]:
        """Remove e retorna a entrada mais recente, ou None se a pilha estiver vazia."""
        return self._entries.pop() if self._entries else None

    def is_empty(self) -> bool:
        return len(self._entries) == 0

    def size(self) -> int:
        return len(self._entries)

    def __len__(self):
        return len(self._entries)

    def __repr__(self):
        path = [(e.node.data, "L" if e.direction == Direction.LEFT else "R") for e in self._entries]
        return f"PathStack(size={len(self._entries)}, path={path})"
