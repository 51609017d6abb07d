import sys
import logging

from src.avl.config import AVLConfig
from src.avl.structures.avl_tree import build_avl
from src.avl.algorithms.traversal import preorder_print
from src.avl.errors import AVLError

logger = logging.getLogger(__name__)

def run(args) -> int:
    """Gera a AVL com as chaves recebidas, imprime em pré-ordem e desmonta."""
    try:
        keys = [int(a) for a in args]
    except ValueError as e:
        logger.error("Chave não numérica: %s", e)
        return 1

    try:
        tree = build_avl(keys)
    except AVLError:
        # Entrada inválida ou falha de alocação, já registradas no log pelo construtor
        return 1

    preorder_print(tree.root)
    released = tree.clear()
    logger.info("%d nós liberados.", released)
    return 0

if __name__ == "__main__":
    logging.basicConfig(level=AVLConfig.LOG_LEVEL, format=AVLConfig.LOG_FORMAT)
    sys.exit(run(sys.argv[1:]))
