class Direction:
    """Lado tomado a partir de um nó durante a descida."""
    LEFT = 0
    RIGHT = 1

class AVLNode:
    """
    Nó da Árvore AVL.
    Guarda a chave inteira, os filhos e a altura em cache.
    Um nó novo é uma folha, portanto começa com altura 0.
    """
    def __init__(self, data: int):
        self.data = data
        self.left = None
        self.right = None
        self.height = 0

    def child(self, direction: int):
        return self.left if direction == Direction.LEFT else self.right

    def set_child(self, direction: int, node):
        if direction == Direction.LEFT:
            self.left = node
        else:
            self.right = node

    def __repr__(self):
        return f"AVLNode(data={self.data}, height={self.height})"
