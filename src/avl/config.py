import logging

class AVLConfig:
    """
    Parâmetros globais do projeto.
    Só os pontos de entrada (__main__) configuram o logging; os módulos apenas escrevem nele.
    """
    LOG_LEVEL = logging.INFO
    LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    # Tamanhos usados no benchmark de altura (escala ~logarítmica)
    BENCHMARK_SIZES = [100, 500, 1000, 5000, 10000, 20000, 50000]
    PATH_BENCHMARK_PLOT = "data/avl_height_benchmark.png"

    # Altura máxima de uma AVL com n nós: ~1.44 * log2(n + 2)
    HEIGHT_BOUND_FACTOR = 1.44
