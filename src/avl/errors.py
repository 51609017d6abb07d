class AVLError(Exception):
    """Erro base para as operações da árvore AVL."""

class InvalidInputError(AVLError, ValueError):
    """Sequência de chaves nula, vazia ou com valores não inteiros."""

class AllocationError(AVLError, MemoryError):
    """Falha ao criar um nó novo."""

class InvalidNodeError(AVLError, ValueError):
    """Travessia ou destruição chamada sobre um nó inexistente."""
